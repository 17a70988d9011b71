"""
Unit tests for domain models (Post, User) and slug derivation.
"""
import pytest

from blog_api.core.exceptions import ValidationError
from blog_api.domain.models.post import Post, TITLE_MAX_LENGTH
from blog_api.domain.models.user import User
from blog_api.utils.text_utils import slugify

AUTHOR = "507f1f77bcf86cd799439011"
CATEGORY = "507f191e810c19729de860ea"


class TestSlugify:
    def test_basic(self):
        assert slugify("Hello, World!") == "hello-world"

    def test_collapses_separators_and_trims(self):
        assert slugify("  --Python   3.12 -- tips  ") == "python-3-12-tips"

    def test_folds_accents(self):
        assert slugify("Café crème") == "cafe-creme"

    def test_empty_falls_back(self):
        assert slugify("") == "post"
        assert slugify("!!!") == "post"


class TestPost:
    def test_slug_derived_from_title(self):
        post = Post(id=None, title="My First Post", author=AUTHOR, category=CATEGORY)
        assert post.slug == "my-first-post"

    def test_supplied_slug_normalized(self):
        post = Post(id=None, title="Anything", author=AUTHOR, category=CATEGORY, slug="Custom Slug")
        assert post.slug == "custom-slug"

    @pytest.mark.parametrize("title", ["", "   "])
    def test_empty_title_rejected(self, title):
        with pytest.raises(ValidationError, match="Title is required"):
            Post(id=None, title=title, author=AUTHOR, category=CATEGORY)

    def test_overlong_title_rejected(self):
        with pytest.raises(ValidationError):
            Post(id=None, title="x" * (TITLE_MAX_LENGTH + 1), author=AUTHOR, category=CATEGORY)

    def test_author_required(self):
        with pytest.raises(ValidationError, match="Author"):
            Post(id=None, title="T", author="", category=CATEGORY)

    def test_category_required(self):
        with pytest.raises(ValidationError, match="Category"):
            Post(id=None, title="T", author=AUTHOR, category="")

    def test_is_authored_by(self):
        post = Post(id=None, title="T", author=AUTHOR, category=CATEGORY)
        assert post.is_authored_by(AUTHOR)
        assert not post.is_authored_by("someone-else")
        assert not post.is_authored_by("")


class TestUser:
    def test_valid_user(self):
        user = User(id=None, username="alice", email="alice@example.com", hashed_password="hash")
        assert user.username == "alice"

    def test_short_username_rejected(self):
        with pytest.raises(ValidationError):
            User(id=None, username="al", email="alice@example.com", hashed_password="hash")

    def test_bad_email_rejected(self):
        with pytest.raises(ValidationError, match="email"):
            User(id=None, username="alice", email="alice.example.com", hashed_password="hash")
