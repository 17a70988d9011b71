# Standard library imports
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

# Local application imports
from ...core.exceptions import ValidationError
from ...utils.text_utils import slugify

TITLE_MAX_LENGTH = 200


@dataclass
class Post:
    """
    Pure domain model for Post entity.

    A post always has exactly one author (a user ID) fixed at creation, and
    belongs to a category given as an opaque identifier. The slug is derived
    from the title when none is supplied.
    """
    id: Optional[str]
    title: str
    author: str
    category: str
    content: Optional[str] = None
    slug: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def __post_init__(self) -> None:
        """Business validations"""
        if not self.title or not self.title.strip():
            raise ValidationError("Title is required")
        if len(self.title) > TITLE_MAX_LENGTH:
            raise ValidationError(f"Title must be at most {TITLE_MAX_LENGTH} characters")
        if not self.author:
            raise ValidationError("Author is required")
        if not self.category:
            raise ValidationError("Category is required")
        self.slug = slugify(self.slug) if self.slug else slugify(self.title)

    def is_authored_by(self, user_id: str) -> bool:
        return bool(user_id) and self.author == user_id
