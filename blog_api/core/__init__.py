from .config import Settings, get_settings
from .exceptions import (
    BlogApiError,
    AuthenticationError,
    AuthorizationError,
    ValidationError,
    ConflictError,
    NotFoundError,
    PersistenceError,
)
from .security import (
    AuthenticatedIdentity,
    TokenVerifier,
    JwtTokenVerifier,
    hash_password,
    verify_password,
    create_jwt_token,
    create_access_token,
    decode_jwt_token,
)

__all__ = [
    "Settings",
    "get_settings",
    "BlogApiError",
    "AuthenticationError",
    "AuthorizationError",
    "ValidationError",
    "ConflictError",
    "NotFoundError",
    "PersistenceError",
    "AuthenticatedIdentity",
    "TokenVerifier",
    "JwtTokenVerifier",
    "hash_password",
    "verify_password",
    "create_jwt_token",
    "create_access_token",
    "decode_jwt_token",
]
