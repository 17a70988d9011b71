# Standard library imports
import logging

# Local application imports
from ....core.exceptions import ConflictError
from ....domain.repositories.user_repository import UserRepository
from ....domain.models.user import User
from ....core.security import hash_password
from ...dto.auth_dto import UserRegistrationRequest
from ...dto.user_dto import UserResponse

logger = logging.getLogger(__name__)


class RegisterUserUseCase:
    """Use case for registering a new user"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, request: UserRegistrationRequest) -> UserResponse:
        """
        Register a new user

        Args:
            request: Registration request with user details

        Returns:
            UserResponse with created user information

        Raises:
            ConflictError: If the email or username is already taken
        """
        email = request.email.strip().lower()

        if await self.user_repository.find_by_email(email) is not None:
            raise ConflictError("User with this email already exists")
        if await self.user_repository.find_by_username(request.username) is not None:
            raise ConflictError("User with this username already exists")

        new_user = User(
            id=None,  # Will be set by repository
            username=request.username,
            email=email,
            hashed_password=hash_password(request.password),
        )

        saved_user = await self.user_repository.save(new_user)
        logger.info("Registered user %s (%s)", saved_user.id, saved_user.username)

        return UserResponse(
            id=saved_user.id or "",
            username=saved_user.username,
            email=saved_user.email,
            created_at=saved_user.created_at,
        )
