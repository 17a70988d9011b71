"""
Posts API: create, list (category filter + pagination), retrieve, update, delete.

Reads are public; writes need a bearer token, and update/delete are
restricted to the post's author.
"""
# Standard library imports
import logging
from typing import Any, List, Optional

# External package imports
from fastapi import APIRouter, Body, Depends, HTTPException, Query, Response, status

# Local application imports
from ..application.dto.post_dto import (
    PostCreateRequest,
    PostDeleteResponse,
    PostResponse,
)
from ..application.dto.user_dto import UserResponse
from ..application.use_cases.post.create_post import CreatePostUseCase
from ..application.use_cases.post.delete_post import DeletePostUseCase
from ..application.use_cases.post.get_post import GetPostUseCase
from ..application.use_cases.post.list_posts import ListPostsUseCase
from ..application.use_cases.post.update_post import UpdatePostUseCase
from ..core.config import get_settings
from ..core.exceptions import AuthorizationError, NotFoundError, ValidationError
from ..di.container import get_container
from .dependencies import get_current_user

logger = logging.getLogger(__name__)
router = APIRouter(tags=["posts"])

TOTAL_COUNT_HEADER = "X-Total-Count"


@router.post("", response_model=PostResponse, status_code=status.HTTP_201_CREATED)
async def create_post(
    request: PostCreateRequest,
    current_user: UserResponse = Depends(get_current_user),
) -> PostResponse:
    """
    Create a post authored by the current user.
    Any author supplied in the body is ignored.
    """
    container = get_container()
    create_post_use_case = container.get(CreatePostUseCase)

    try:
        return await create_post_use_case.execute(request=request, author_id=current_user.id)
    except ValidationError as exception:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=exception.message)


@router.get("", response_model=List[PostResponse])
async def list_posts(
    response: Response,
    category: Optional[str] = Query(None, description="Only posts in this category"),
    page: int = Query(1, ge=1),
    limit: Optional[int] = Query(None, ge=1, description="Page size (default and maximum come from settings)"),
) -> List[PostResponse]:
    """
    List posts in creation order.
    A limit above the configured maximum is rejected. The category filter is applied before pagination; the total number of
    matching posts is returned in the X-Total-Count header.
    """
    settings = get_settings()
    page_size = limit or settings.default_page_size

    container = get_container()
    list_posts_use_case = container.get(ListPostsUseCase)

    try:
        total, posts = await list_posts_use_case.execute(category=category, page=page, limit=page_size)
    except ValidationError as exception:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=exception.message)

    response.headers[TOTAL_COUNT_HEADER] = str(total)
    return posts


@router.get("/{post_id}", response_model=PostResponse)
async def get_post(post_id: str) -> PostResponse:
    container = get_container()
    get_post_use_case = container.get(GetPostUseCase)

    try:
        return await get_post_use_case.execute(post_id)
    except NotFoundError as exception:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=exception.message)


@router.put("/{post_id}", response_model=PostResponse)
async def update_post(
    post_id: str,
    payload: Any = Body(None),
    current_user: UserResponse = Depends(get_current_user),
) -> PostResponse:
    """
    Update the submitted fields of a post; author only.
    The body is validated after the authorship check, so a non-author
    always gets 403.
    """
    container = get_container()
    update_post_use_case = container.get(UpdatePostUseCase)

    try:
        return await update_post_use_case.execute(
            post_id=post_id,
            payload=payload,
            user_id=current_user.id,
        )
    except NotFoundError as exception:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=exception.message)
    except AuthorizationError as exception:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=exception.message)
    except ValidationError as exception:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=exception.message)


@router.delete("/{post_id}", response_model=PostDeleteResponse)
async def delete_post(
    post_id: str,
    current_user: UserResponse = Depends(get_current_user),
) -> PostDeleteResponse:
    """Delete a post permanently; author only"""
    container = get_container()
    delete_post_use_case = container.get(DeletePostUseCase)

    try:
        return await delete_post_use_case.execute(post_id=post_id, user_id=current_user.id)
    except NotFoundError as exception:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=exception.message)
    except AuthorizationError as exception:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=exception.message)
