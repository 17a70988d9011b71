from .create_post import CreatePostUseCase
from .list_posts import ListPostsUseCase
from .get_post import GetPostUseCase
from .update_post import UpdatePostUseCase
from .delete_post import DeletePostUseCase
from .mappers import post_to_response

__all__ = [
    "CreatePostUseCase",
    "ListPostsUseCase",
    "GetPostUseCase",
    "UpdatePostUseCase",
    "DeletePostUseCase",
    "post_to_response",
]
