# Standard library imports
from typing import Any, Dict, Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from bson import ObjectId
from bson.errors import InvalidId
from pymongo import ASCENDING
from pymongo.errors import DuplicateKeyError, PyMongoError

# Local application imports
from ...core.exceptions import ConflictError, PersistenceError, ValidationError
from ...domain.repositories.user_repository import UserRepository
from ...domain.models.user import User
from ...domain.constants import UserFields
from ...utils.datetime_utils import ensure_utc, utc_now
from .mongo_connection import get_user_collection


class MongoUserRepository(UserRepository):
    """MongoDB implementation of UserRepository"""

    def __init__(self, user_collection: Optional[AsyncIOMotorCollection] = None) -> None:
        self.user_collection = user_collection if user_collection is not None else get_user_collection()

    async def find_by_email(self, email: str) -> Optional[User]:
        """
        Find user by email address (case-insensitive; emails are stored lower-cased)

        Returns:
            User domain model if found, None otherwise
        """
        if not email:
            return None
        return await self._find_one({UserFields.EMAIL: email.strip().lower()}, "email")

    async def find_by_username(self, username: str) -> Optional[User]:
        """Find user by exact username"""
        if not username:
            return None
        return await self._find_one({UserFields.USERNAME: username}, "username")

    async def find_by_id(self, user_id: str) -> Optional[User]:
        """
        Find user by ID

        Returns:
            User domain model if found, None otherwise (including malformed IDs)
        """
        if not user_id:
            return None

        try:
            object_id = ObjectId(user_id)
        except (InvalidId, TypeError):
            return None

        return await self._find_one({UserFields.MONGO_ID: object_id}, "ID")

    async def save(self, user: User) -> User:
        """
        Save user (create new or update existing)

        Raises:
            ConflictError: If the email or username is already taken
            ValidationError: If an existing user's ID is malformed or unknown
        """
        user_dict = self._user_to_dict(user)

        try:
            if user.id:
                try:
                    object_id = ObjectId(user.id)
                except (InvalidId, TypeError):
                    raise ValidationError(f"Invalid user ID format: {user.id}")

                update_result = await self.user_collection.update_one(
                    {UserFields.MONGO_ID: object_id},
                    {"$set": user_dict}
                )
                if update_result.matched_count == 0:
                    raise ValidationError(f"User with ID {user.id} not found")

                document = await self.user_collection.find_one({UserFields.MONGO_ID: object_id})
            else:
                user_dict.setdefault(UserFields.CREATED_AT, utc_now())
                result = await self.user_collection.insert_one(user_dict)
                document = await self.user_collection.find_one({UserFields.MONGO_ID: result.inserted_id})

            if document is None:
                raise PersistenceError("User was saved but could not be retrieved")
            return self._document_to_user(document)
        except DuplicateKeyError:
            raise ConflictError("User with this email or username already exists")
        except PyMongoError as e:
            raise PersistenceError(f"Error saving user: {str(e)}")

    async def ensure_indexes(self) -> None:
        await self.user_collection.create_index([(UserFields.EMAIL, ASCENDING)], unique=True)
        await self.user_collection.create_index([(UserFields.USERNAME, ASCENDING)], unique=True)

    async def _find_one(self, query: Dict[str, Any], label: str) -> Optional[User]:
        try:
            document = await self.user_collection.find_one(query)
        except PyMongoError as e:
            raise PersistenceError(f"Error finding user by {label}: {str(e)}")
        if document is None:
            return None
        return self._document_to_user(document)

    def _document_to_user(self, document: Dict[str, Any]) -> User:
        """Convert MongoDB document to User domain model"""
        if not document or UserFields.MONGO_ID not in document:
            raise PersistenceError("Invalid document: missing _id field")

        return User(
            id=str(document[UserFields.MONGO_ID]),
            username=document.get(UserFields.USERNAME, ""),
            email=document.get(UserFields.EMAIL, ""),
            hashed_password=document.get(UserFields.HASHED_PASSWORD, ""),
            created_at=ensure_utc(document.get(UserFields.CREATED_AT)),
        )

    def _user_to_dict(self, user: User) -> Dict[str, Any]:
        """Convert User domain model to MongoDB document (without _id)"""
        user_dict: Dict[str, Any] = {
            UserFields.USERNAME: user.username,
            UserFields.EMAIL: user.email.strip().lower(),
            UserFields.HASHED_PASSWORD: user.hashed_password,
        }
        if user.created_at is not None:
            user_dict[UserFields.CREATED_AT] = user.created_at
        return user_dict
