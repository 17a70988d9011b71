# Standard library imports
import logging

# Local application imports
from ....domain.repositories.post_repository import PostRepository
from ....domain.models.post import Post
from ...dto.post_dto import PostCreateRequest, PostResponse
from .mappers import post_to_response

logger = logging.getLogger(__name__)


class CreatePostUseCase:
    """Use case for creating a new post"""

    def __init__(self, post_repository: PostRepository) -> None:
        self.post_repository = post_repository

    async def execute(self, request: PostCreateRequest, author_id: str) -> PostResponse:
        """
        Create a new post authored by the authenticated user

        Args:
            request: Post creation request
            author_id: ID of the authenticated user; the only source of the author

        Returns:
            PostResponse with the created post

        Raises:
            ValidationError: If the post fails domain validation
        """
        new_post = Post(
            id=None,
            title=request.title,
            content=request.content,
            author=author_id,
            category=request.category,
            slug=request.slug,
        )

        saved_post = await self.post_repository.create(new_post)
        logger.info("Post %s created by user %s", saved_post.id, author_id)
        return post_to_response(saved_post)
