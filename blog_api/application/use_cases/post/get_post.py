# Local application imports
from ....core.exceptions import NotFoundError
from ....domain.repositories.post_repository import PostRepository
from ...dto.post_dto import PostResponse
from .mappers import post_to_response


class GetPostUseCase:
    """Use case for getting a post by ID"""

    def __init__(self, post_repository: PostRepository) -> None:
        self.post_repository = post_repository

    async def execute(self, post_id: str) -> PostResponse:
        post = await self.post_repository.find_by_id(post_id)
        if post is None:
            raise NotFoundError("Post not found")
        return post_to_response(post)
