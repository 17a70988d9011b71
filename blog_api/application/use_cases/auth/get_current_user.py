# Local application imports
from ....core.exceptions import AuthenticationError
from ....core.security import TokenVerifier
from ....domain.repositories.user_repository import UserRepository
from ...dto.user_dto import UserResponse


class GetCurrentUserUseCase:
    """Use case for resolving the user behind an access token"""

    def __init__(self, user_repository: UserRepository, token_verifier: TokenVerifier) -> None:
        self.user_repository = user_repository
        self.token_verifier = token_verifier

    async def execute(self, token: str) -> UserResponse:
        """
        Get current user from an access token

        Raises:
            AuthenticationError: If token is invalid or the user no longer exists
        """
        identity = self.token_verifier.verify(token)

        user = await self.user_repository.find_by_id(identity.user_id)
        if user is None:
            raise AuthenticationError("User not found")

        return UserResponse(
            id=user.id or "",
            username=user.username,
            email=user.email,
            created_at=user.created_at,
        )
