# Standard library imports
import logging

# Local application imports
from ....core.exceptions import AuthorizationError, NotFoundError
from ....domain.repositories.post_repository import PostRepository
from ...dto.post_dto import PostDeleteResponse

logger = logging.getLogger(__name__)


class DeletePostUseCase:
    """Use case for deleting a post; only its author may do so"""

    def __init__(self, post_repository: PostRepository) -> None:
        self.post_repository = post_repository

    async def execute(self, post_id: str, user_id: str) -> PostDeleteResponse:
        """
        Permanently delete a post

        Raises:
            NotFoundError: If the post does not exist
            AuthorizationError: If the user is not the post's author
        """
        post = await self.post_repository.find_by_id(post_id)
        if post is None:
            raise NotFoundError("Post not found")

        if not post.is_authored_by(user_id):
            logger.warning("User %s denied deletion of post %s", user_id, post_id)
            raise AuthorizationError("Not authorized to delete this post")

        if not await self.post_repository.delete(post_id):
            raise NotFoundError("Post not found")

        logger.info("Post %s deleted by user %s", post_id, user_id)
        return PostDeleteResponse(id=post_id)
