# Standard library imports
import logging
from typing import Any, Dict, List, Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from bson import ObjectId
from bson.errors import InvalidId
from pymongo import ASCENDING, ReturnDocument
from pymongo.errors import PyMongoError

# Local application imports
from ...core.exceptions import PersistenceError, ValidationError
from ...domain.repositories.post_repository import PostRepository
from ...domain.models.post import Post
from ...domain.constants import PostFields
from ...utils.datetime_utils import ensure_utc, utc_now
from .mongo_connection import get_post_collection

logger = logging.getLogger(__name__)

# Creation order, with _id breaking ties between identical timestamps
CREATION_ORDER = [(PostFields.CREATED_AT, ASCENDING), (PostFields.MONGO_ID, ASCENDING)]

# Largest skip the server accepts (signed 64-bit)
MAX_SKIP = 2 ** 63 - 1

# Fields stored as ObjectId references
REFERENCE_FIELDS = (PostFields.AUTHOR, PostFields.CATEGORY)


def _to_object_id(value: Optional[str]) -> Optional[ObjectId]:
    if not value:
        return None
    try:
        return ObjectId(value)
    except (InvalidId, TypeError):
        return None


class MongoPostRepository(PostRepository):
    """MongoDB implementation of PostRepository"""

    def __init__(self, post_collection: Optional[AsyncIOMotorCollection] = None) -> None:
        self.post_collection = post_collection if post_collection is not None else get_post_collection()

    async def create(self, post: Post) -> Post:
        """
        Insert a new post

        Returns:
            Saved Post domain model with ID and timestamps set
        """
        if post.id:
            raise ValidationError("New posts must not carry an ID")

        post_dict = self._post_to_dict(post)
        timestamp = utc_now()
        post_dict.setdefault(PostFields.CREATED_AT, timestamp)
        post_dict.setdefault(PostFields.UPDATED_AT, post_dict[PostFields.CREATED_AT])

        try:
            result = await self.post_collection.insert_one(post_dict)
            document = await self.post_collection.find_one({PostFields.MONGO_ID: result.inserted_id})
        except PyMongoError as e:
            raise PersistenceError(f"Error creating post: {str(e)}")

        if document is None:
            raise PersistenceError("Post was created but could not be retrieved")
        return self._document_to_post(document)

    async def find_by_id(self, post_id: str) -> Optional[Post]:
        """Find post by ID"""
        object_id = _to_object_id(post_id)
        if object_id is None:
            return None

        try:
            document = await self.post_collection.find_one({PostFields.MONGO_ID: object_id})
        except PyMongoError as e:
            raise PersistenceError(f"Error finding post by ID: {str(e)}")

        if document is None:
            return None
        return self._document_to_post(document)

    async def find_many(
        self,
        category: Optional[str],
        skip: int,
        limit: int,
    ) -> List[Post]:
        query = self._build_query(category)
        if query is None or skip > MAX_SKIP:
            return []

        try:
            cursor = (
                self.post_collection.find(query)
                .sort(CREATION_ORDER)
                .skip(max(0, int(skip)))
                .limit(max(1, int(limit)))
            )
            posts: List[Post] = []
            async for document in cursor:
                posts.append(self._document_to_post(document))
            return posts
        except PyMongoError as e:
            raise PersistenceError(f"Error listing posts: {str(e)}")

    async def count(self, category: Optional[str]) -> int:
        query = self._build_query(category)
        if query is None:
            return 0

        try:
            return await self.post_collection.count_documents(query)
        except PyMongoError as e:
            raise PersistenceError(f"Error counting posts: {str(e)}")

    async def update(self, post_id: str, changes: Dict[str, Any]) -> Optional[Post]:
        """
        Set the given mutable fields (plus updated_at) in a single atomic write.
        Concurrent updates to the same post resolve last-write-wins.
        """
        object_id = _to_object_id(post_id)
        if object_id is None:
            return None

        unknown = set(changes) - set(PostFields.MUTABLE)
        if unknown:
            raise ValidationError(f"Fields cannot be updated: {', '.join(sorted(unknown))}")

        update_doc: Dict[str, Any] = {}
        for field, value in changes.items():
            if field in REFERENCE_FIELDS:
                value = _to_object_id(value)
                if value is None:
                    raise ValidationError(f"Invalid {field} ID format")
            update_doc[field] = value
        update_doc[PostFields.UPDATED_AT] = utc_now()

        try:
            document = await self.post_collection.find_one_and_update(
                {PostFields.MONGO_ID: object_id},
                {"$set": update_doc},
                return_document=ReturnDocument.AFTER,
            )
        except PyMongoError as e:
            raise PersistenceError(f"Error updating post: {str(e)}")

        if document is None:
            return None
        return self._document_to_post(document)

    async def delete(self, post_id: str) -> bool:
        object_id = _to_object_id(post_id)
        if object_id is None:
            return False

        try:
            result = await self.post_collection.delete_one({PostFields.MONGO_ID: object_id})
        except PyMongoError as e:
            raise PersistenceError(f"Error deleting post: {str(e)}")
        return result.deleted_count > 0

    async def ensure_indexes(self) -> None:
        await self.post_collection.create_index(CREATION_ORDER)
        await self.post_collection.create_index([(PostFields.CATEGORY, ASCENDING), *CREATION_ORDER])
        await self.post_collection.create_index([(PostFields.AUTHOR, ASCENDING)])
        logger.debug("Post indexes ensured")

    def _build_query(self, category: Optional[str]) -> Optional[Dict[str, Any]]:
        """
        Build the list filter. Returns None when the category filter can
        never match, so callers can skip the round trip. Stored categories
        read back as lower-case hex, so only that exact spelling can match.
        """
        if category is None:
            return {}
        category_id = _to_object_id(category)
        if category_id is None or str(category_id) != category:
            return None
        return {PostFields.CATEGORY: category_id}

    def _document_to_post(self, document: Dict[str, Any]) -> Post:
        """Convert MongoDB document to Post domain model"""
        if not document or PostFields.MONGO_ID not in document:
            raise PersistenceError("Invalid document: missing _id field")

        return Post(
            id=str(document[PostFields.MONGO_ID]),
            title=document.get(PostFields.TITLE, ""),
            content=document.get(PostFields.CONTENT),
            author=str(document.get(PostFields.AUTHOR) or ""),
            category=str(document.get(PostFields.CATEGORY) or ""),
            slug=document.get(PostFields.SLUG),
            created_at=ensure_utc(document.get(PostFields.CREATED_AT)),
            updated_at=ensure_utc(document.get(PostFields.UPDATED_AT)),
        )

    def _post_to_dict(self, post: Post) -> Dict[str, Any]:
        """Convert Post domain model to MongoDB document (without _id)"""
        author_id = _to_object_id(post.author)
        if author_id is None:
            raise ValidationError("Invalid author ID format")
        category_id = _to_object_id(post.category)
        if category_id is None:
            raise ValidationError("Invalid category ID format")

        post_dict: Dict[str, Any] = {
            PostFields.TITLE: post.title,
            PostFields.CONTENT: post.content,
            PostFields.AUTHOR: author_id,
            PostFields.CATEGORY: category_id,
            PostFields.SLUG: post.slug,
        }
        if post.created_at is not None:
            post_dict[PostFields.CREATED_AT] = post.created_at
        if post.updated_at is not None:
            post_dict[PostFields.UPDATED_AT] = post.updated_at
        return post_dict
