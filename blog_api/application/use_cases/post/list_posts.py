# Standard library imports
from typing import List, Optional, Tuple

# Local application imports
from ....core.config import get_settings
from ....core.exceptions import ValidationError
from ....domain.repositories.post_repository import PostRepository
from ...dto.post_dto import PostResponse
from .mappers import post_to_response


class ListPostsUseCase:
    """Use case for listing posts, filtered by category and paginated"""

    def __init__(self, post_repository: PostRepository) -> None:
        self.post_repository = post_repository

    async def execute(
        self,
        category: Optional[str],
        page: int,
        limit: int,
    ) -> Tuple[int, List[PostResponse]]:
        """
        List one page of posts in creation order

        Args:
            category: Exact category ID to filter by, or None for all posts
            page: 1-based page number
            limit: Page size, at most the configured maximum

        Returns:
            (total number of matching posts, posts on the requested page)

        Raises:
            ValidationError: If page or limit is out of range
        """
        max_page_size = get_settings().max_page_size
        if page < 1:
            raise ValidationError("page must be a positive integer")
        if limit < 1:
            raise ValidationError("limit must be a positive integer")
        if limit > max_page_size:
            raise ValidationError(f"limit must not exceed {max_page_size}")

        total = await self.post_repository.count(category)
        posts = await self.post_repository.find_many(
            category=category,
            skip=(page - 1) * limit,
            limit=limit,
        )
        return total, [post_to_response(post) for post in posts]
