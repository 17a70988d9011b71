from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ...core.exceptions import ValidationError


@dataclass
class User:
    """Pure domain model for User entity - no external dependencies"""
    id: Optional[str]
    username: str
    email: str
    hashed_password: str
    created_at: Optional[datetime] = None

    def __post_init__(self):
        """Business validations"""
        if not self.username or len(self.username.strip()) < 3:
            raise ValidationError("Username must be at least 3 characters")
        if not self.email or "@" not in self.email:
            raise ValidationError("Invalid email format")
        if not self.hashed_password:
            raise ValidationError("Password hash is required")
