"""
Unit tests for auth use cases (Login, Register, GetCurrentUser).
"""
from unittest.mock import AsyncMock, MagicMock

import pytest
from blog_api.core.exceptions import AuthenticationError, ConflictError
from blog_api.core.security import (
    AuthenticatedIdentity,
    JwtTokenVerifier,
    TokenVerifier,
    create_access_token,
    decode_jwt_token,
    hash_password,
)
from blog_api.application.use_cases.auth.login_user import LoginUserUseCase
from blog_api.application.use_cases.auth.register_user import RegisterUserUseCase
from blog_api.application.use_cases.auth.get_current_user import GetCurrentUserUseCase
from blog_api.application.dto.auth_dto import UserLoginRequest, UserRegistrationRequest, TokenResponse
from blog_api.domain.models.user import User

USER_ID = "507f1f77bcf86cd799439011"


@pytest.fixture
def mock_user_repo():
    """Mock UserRepository with async methods."""
    return AsyncMock()


def _user(password_hash="hash"):
    return User(
        id=USER_ID,
        username="testuser",
        email="test@example.com",
        hashed_password=password_hash,
    )


class TestLoginUserUseCase:
    """Tests for LoginUserUseCase"""

    @pytest.mark.asyncio
    async def test_login_success(self, mock_user_repo, mock_settings):
        mock_user_repo.find_by_email.return_value = _user(hash_password("validpass123"))

        use_case = LoginUserUseCase(mock_user_repo)
        result = await use_case.execute(
            UserLoginRequest(email="test@example.com", password="validpass123")
        )
        assert isinstance(result, TokenResponse)
        assert result.token_type == "bearer"
        assert decode_jwt_token(result.access_token)["sub"] == USER_ID

    @pytest.mark.asyncio
    async def test_login_user_not_found(self, mock_user_repo):
        mock_user_repo.find_by_email.return_value = None
        use_case = LoginUserUseCase(mock_user_repo)
        result = await use_case.execute(
            UserLoginRequest(email="unknown@example.com", password="anypass123")
        )
        assert result is None

    @pytest.mark.asyncio
    async def test_login_wrong_password(self, mock_user_repo, mock_settings):
        mock_user_repo.find_by_email.return_value = _user(hash_password("correctpass"))

        use_case = LoginUserUseCase(mock_user_repo)
        result = await use_case.execute(
            UserLoginRequest(email="test@example.com", password="wrongpassword")
        )
        assert result is None


class TestRegisterUserUseCase:
    """Tests for RegisterUserUseCase"""

    @pytest.mark.asyncio
    async def test_register_success(self, mock_user_repo):
        mock_user_repo.find_by_email.return_value = None
        mock_user_repo.find_by_username.return_value = None
        mock_user_repo.save.return_value = User(
            id="usr-new",
            username="newuser",
            email="new@example.com",
            hashed_password="$2b$12$hashed",
        )

        use_case = RegisterUserUseCase(mock_user_repo)
        result = await use_case.execute(
            UserRegistrationRequest(
                username="newuser",
                email="New@Example.com",
                password="password123",
            )
        )
        assert result.id == "usr-new"
        assert result.username == "newuser"
        saved = mock_user_repo.save.call_args.args[0]
        assert saved.email == "new@example.com"
        assert saved.hashed_password != "password123"

    @pytest.mark.asyncio
    async def test_register_duplicate_email_raises(self, mock_user_repo):
        mock_user_repo.find_by_email.return_value = _user()

        use_case = RegisterUserUseCase(mock_user_repo)
        with pytest.raises(ConflictError, match="email already exists"):
            await use_case.execute(
                UserRegistrationRequest(
                    username="duplicate",
                    email="test@example.com",
                    password="password123",
                )
            )
        mock_user_repo.save.assert_not_called()

    @pytest.mark.asyncio
    async def test_register_duplicate_username_raises(self, mock_user_repo):
        mock_user_repo.find_by_email.return_value = None
        mock_user_repo.find_by_username.return_value = _user()

        use_case = RegisterUserUseCase(mock_user_repo)
        with pytest.raises(ConflictError, match="username already exists"):
            await use_case.execute(
                UserRegistrationRequest(
                    username="testuser",
                    email="other@example.com",
                    password="password123",
                )
            )


class TestGetCurrentUserUseCase:
    """Tests for GetCurrentUserUseCase"""

    @pytest.mark.asyncio
    async def test_get_current_user_success(self, mock_user_repo, mock_settings):
        mock_user_repo.find_by_id.return_value = _user()

        use_case = GetCurrentUserUseCase(mock_user_repo, JwtTokenVerifier())
        result = await use_case.execute(create_access_token(USER_ID))
        assert result.id == USER_ID
        assert result.email == "test@example.com"
        mock_user_repo.find_by_id.assert_awaited_once_with(USER_ID)

    @pytest.mark.asyncio
    async def test_get_current_user_invalid_token_raises(self, mock_user_repo, mock_settings):
        use_case = GetCurrentUserUseCase(mock_user_repo, JwtTokenVerifier())
        with pytest.raises(AuthenticationError, match="Invalid"):
            await use_case.execute("invalid.jwt.token")
        mock_user_repo.find_by_id.assert_not_called()

    @pytest.mark.asyncio
    async def test_get_current_user_not_found_raises(self, mock_user_repo, mock_settings):
        mock_user_repo.find_by_id.return_value = None

        use_case = GetCurrentUserUseCase(mock_user_repo, JwtTokenVerifier())
        with pytest.raises(AuthenticationError, match="User not found"):
            await use_case.execute(create_access_token("nonexistent"))

    @pytest.mark.asyncio
    async def test_uses_injected_verifier(self, mock_user_repo):
        verifier = MagicMock(spec=TokenVerifier)
        verifier.verify.return_value = AuthenticatedIdentity(user_id=USER_ID)
        mock_user_repo.find_by_id.return_value = _user()

        use_case = GetCurrentUserUseCase(mock_user_repo, verifier)
        result = await use_case.execute("opaque-credential")
        assert result.id == USER_ID
        verifier.verify.assert_called_once_with("opaque-credential")
