# Standard library imports
from datetime import datetime
from typing import Optional

# External package imports
from bson import ObjectId
from pydantic import BaseModel, Field, field_validator

# Local application imports
from ...domain.models.post import TITLE_MAX_LENGTH


def _require_title(value: Optional[str]) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValueError("Title is required")
    return value.strip()


def _require_object_id(value: Optional[str]) -> str:
    if not isinstance(value, str) or not ObjectId.is_valid(value):
        raise ValueError("Category must be a valid identifier")
    # IDs are echoed back as lower-case hex
    if str(ObjectId(value)) != value:
        raise ValueError("Category must be a lower-case hex identifier")
    return value


class PostCreateRequest(BaseModel):
    """
    DTO for post creation request.

    The author is never read from the payload; unknown fields such as
    `author` are ignored.
    """
    title: str = Field(max_length=TITLE_MAX_LENGTH)
    content: Optional[str] = None
    category: str
    slug: Optional[str] = Field(default=None, max_length=TITLE_MAX_LENGTH)

    @field_validator("title", mode="before")
    @classmethod
    def validate_title(cls, value: Optional[str]) -> str:
        return _require_title(value)

    @field_validator("category")
    @classmethod
    def validate_category(cls, value: str) -> str:
        return _require_object_id(value)


class PostUpdateRequest(BaseModel):
    """DTO for partial post update; only fields present in the body are applied"""
    title: Optional[str] = Field(default=None, max_length=TITLE_MAX_LENGTH)
    content: Optional[str] = None
    category: Optional[str] = None
    slug: Optional[str] = Field(default=None, max_length=TITLE_MAX_LENGTH)

    @field_validator("title", mode="before")
    @classmethod
    def validate_title(cls, value: Optional[str]) -> str:
        # Only runs for fields present in the body, so None here means explicit null
        return _require_title(value)

    @field_validator("category", mode="before")
    @classmethod
    def validate_category(cls, value: Optional[str]) -> str:
        return _require_object_id(value)


class PostResponse(BaseModel):
    """DTO for post response; references are serialized as ID strings"""
    id: str
    title: str
    content: Optional[str] = None
    author: str
    category: str
    slug: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class PostDeleteResponse(BaseModel):
    """DTO acknowledging a deletion"""
    message: str = "Post deleted"
    id: str
