# Standard library imports
from typing import Optional

# External package imports
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

# Local application imports
from ..application.use_cases.auth.get_current_user import GetCurrentUserUseCase
from ..application.dto.user_dto import UserResponse
from ..core.exceptions import AuthenticationError
from ..di.container import get_container


# auto_error=False so a missing header is reported as 401 by us, not by the scheme
security_scheme = HTTPBearer(auto_error=False)


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security_scheme),
) -> UserResponse:
    """
    FastAPI dependency to get current authenticated user from a bearer token

    FastAPI resolves dependencies before validating the request body, so an
    unauthenticated request gets 401 even when its payload is also invalid.

    Raises:
        HTTPException: 401 if the token is missing, invalid, or the user is gone
    """
    if credentials is None or not credentials.credentials:
        raise _unauthorized("Not authenticated")

    container = get_container()
    get_current_user_use_case = container.get(GetCurrentUserUseCase)

    try:
        return await get_current_user_use_case.execute(credentials.credentials)
    except AuthenticationError as exception:
        raise _unauthorized(exception.message)
