from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from ..models.post import Post


class PostRepository(ABC):
    """Repository interface - defines contract for post data access"""

    @abstractmethod
    async def create(self, post: Post) -> Post:
        """Insert a new post and return it with its generated ID"""
        pass

    @abstractmethod
    async def find_by_id(self, post_id: str) -> Optional[Post]:
        """Find post by ID; malformed IDs are treated as not found"""
        pass

    @abstractmethod
    async def find_many(
        self,
        category: Optional[str],
        skip: int,
        limit: int,
    ) -> List[Post]:
        """
        List posts in creation order (created_at, then ID, ascending),
        optionally restricted to one category, skipping `skip` and
        returning at most `limit` posts.
        """
        pass

    @abstractmethod
    async def count(self, category: Optional[str]) -> int:
        """Count posts, optionally restricted to one category"""
        pass

    @abstractmethod
    async def update(self, post_id: str, changes: Dict[str, Any]) -> Optional[Post]:
        """Set the given fields on a post; returns None if it no longer exists"""
        pass

    @abstractmethod
    async def delete(self, post_id: str) -> bool:
        """Delete a post; returns False if nothing was deleted"""
        pass

    @abstractmethod
    async def ensure_indexes(self) -> None:
        """Create the indexes listing and filtering rely on"""
        pass
