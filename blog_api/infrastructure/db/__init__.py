from .mongo_connection import (
    get_database,
    get_user_collection,
    get_post_collection,
    close_mongo_connection,
)
from .mongo_user_repository import MongoUserRepository
from .mongo_post_repository import MongoPostRepository

__all__ = [
    "get_database",
    "get_user_collection",
    "get_post_collection",
    "close_mongo_connection",
    "MongoUserRepository",
    "MongoPostRepository",
]
