# Standard library imports
import time
from dataclasses import dataclass
from typing import Any, Dict

# External package imports
import jwt
import bcrypt
from jwt.exceptions import InvalidTokenError

# Local application imports
from .config import get_settings
from .exceptions import AuthenticationError


@dataclass(frozen=True)
class AuthenticatedIdentity:
    """Result of a successful credential check"""
    user_id: str


def hash_password(plain_password: str) -> str:
    """
    Hash a plain password using bcrypt

    Args:
        plain_password: The plain text password to hash

    Returns:
        Hashed password string
    """
    salt = bcrypt.gensalt(rounds=12)
    hashed = bcrypt.hashpw(plain_password.encode("utf-8"), salt)
    return hashed.decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Verify a plain password against a hashed password

    Returns:
        True if passwords match, False otherwise (including malformed hashes)
    """
    try:
        return bcrypt.checkpw(
            plain_password.encode("utf-8"),
            hashed_password.encode("utf-8")
        )
    except ValueError:
        return False


def create_jwt_token(payload: Dict[str, Any]) -> str:
    """
    Create a JWT token with expiration

    Args:
        payload: Dictionary containing token claims (e.g., sub)

    Returns:
        Encoded JWT token string
    """
    settings = get_settings()
    issued_at = int(time.time())
    expires_at = issued_at + (settings.access_token_expire_minutes * 60)

    token_payload = {
        **payload,
        "iat": issued_at,
        "exp": expires_at,
    }

    return jwt.encode(
        token_payload,
        settings.jwt_secret_key,
        algorithm=settings.jwt_algorithm
    )


def create_access_token(user_id: str) -> str:
    """Issue an access token whose subject is the given user ID"""
    return create_jwt_token({"sub": user_id})


def decode_jwt_token(token: str) -> Dict[str, Any]:
    """
    Decode and validate a JWT token

    Args:
        token: The JWT token string to decode

    Returns:
        Dictionary containing decoded token claims

    Raises:
        AuthenticationError: If token is invalid, tampered or expired
    """
    settings = get_settings()
    try:
        return jwt.decode(
            token,
            settings.jwt_secret_key,
            algorithms=[settings.jwt_algorithm]
        )
    except InvalidTokenError as e:
        raise AuthenticationError(f"Invalid token: {str(e)}")


class TokenVerifier:
    """Maps a presented credential to an authenticated identity"""

    def verify(self, token: str) -> AuthenticatedIdentity:
        raise NotImplementedError


class JwtTokenVerifier(TokenVerifier):
    """Verifies HS256 access tokens issued by create_access_token"""

    def verify(self, token: str) -> AuthenticatedIdentity:
        if not token:
            raise AuthenticationError("Missing authentication token")

        payload = decode_jwt_token(token)
        user_id = payload.get("sub")
        if not user_id or not isinstance(user_id, str):
            raise AuthenticationError("Invalid authentication payload: missing user ID")

        return AuthenticatedIdentity(user_id=user_id)
