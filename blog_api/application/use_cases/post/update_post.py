# Standard library imports
import logging
from dataclasses import replace
from typing import Any, Dict, Union

# External package imports
from pydantic import ValidationError as PydanticValidationError

# Local application imports
from ....core.exceptions import AuthorizationError, NotFoundError, ValidationError
from ....domain.constants import PostFields
from ....domain.repositories.post_repository import PostRepository
from ...dto.post_dto import PostResponse, PostUpdateRequest
from .mappers import post_to_response

logger = logging.getLogger(__name__)


def _parse_update(payload: Any) -> PostUpdateRequest:
    if isinstance(payload, PostUpdateRequest):
        return payload
    if not isinstance(payload, dict):
        raise ValidationError("Request body must be a JSON object")

    try:
        return PostUpdateRequest.model_validate(payload)
    except PydanticValidationError as e:
        error = e.errors()[0]
        field = ".".join(str(part) for part in error.get("loc", ()))
        message = error.get("msg", "Invalid value")
        raise ValidationError(f"{field}: {message}" if field else message)


class UpdatePostUseCase:
    """Use case for updating a post; only its author may do so"""

    def __init__(self, post_repository: PostRepository) -> None:
        self.post_repository = post_repository

    async def execute(
        self,
        post_id: str,
        payload: Union[PostUpdateRequest, Dict[str, Any], None],
        user_id: str,
    ) -> PostResponse:
        """
        Apply the fields present in the payload to the post

        The payload is validated only once the caller is known to be the
        author, so a non-author is refused regardless of what was sent.

        Args:
            post_id: ID of the post to update
            payload: Partial update (raw JSON object or parsed request);
                omitted fields keep their values
            user_id: ID of the authenticated user

        Returns:
            PostResponse with the updated post

        Raises:
            NotFoundError: If the post does not exist
            AuthorizationError: If the user is not the post's author
            ValidationError: If the payload or the updated post is invalid
        """
        post = await self.post_repository.find_by_id(post_id)
        if post is None:
            raise NotFoundError("Post not found")

        if not post.is_authored_by(user_id):
            logger.warning("User %s denied update of post %s", user_id, post_id)
            raise AuthorizationError("Not authorized to modify this post")

        request = _parse_update(payload)
        changes: Dict[str, Any] = request.model_dump(exclude_unset=True)
        if not changes:
            return post_to_response(post)

        # A new title re-derives the slug unless one was supplied
        if PostFields.TITLE in changes and PostFields.SLUG not in changes:
            changes[PostFields.SLUG] = None

        # Runs the domain validations (and slug normalization) on the result
        candidate = replace(post, **changes)
        changes = {field: getattr(candidate, field) for field in changes}

        updated_post = await self.post_repository.update(post_id, changes)
        if updated_post is None:
            raise NotFoundError("Post not found")

        logger.info("Post %s updated by user %s (%s)", post_id, user_id, ", ".join(sorted(changes)))
        return post_to_response(updated_post)
