"""Utility modules for the blog API application."""

from .datetime_utils import utc_now, ensure_utc
from .text_utils import slugify

__all__ = [
    "utc_now",
    "ensure_utc",
    "slugify",
]
