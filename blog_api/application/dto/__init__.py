from .auth_dto import UserRegistrationRequest, UserLoginRequest, TokenResponse
from .user_dto import UserResponse
from .post_dto import (
    PostCreateRequest,
    PostUpdateRequest,
    PostResponse,
    PostDeleteResponse,
)

__all__ = [
    "UserRegistrationRequest",
    "UserLoginRequest",
    "TokenResponse",
    "UserResponse",
    "PostCreateRequest",
    "PostUpdateRequest",
    "PostResponse",
    "PostDeleteResponse",
]
