"""
Shared pytest fixtures for blog API tests.

Every test gets fresh in-memory repositories and a freshly wired container,
so no state leaks between tests.
"""
import os
from unittest.mock import MagicMock, patch

import pytest
from fastapi.testclient import TestClient

from blog_api.core.security import create_access_token
from blog_api.di.base_container import BaseContainer
from blog_api.di.providers import AuthProvider, PostProvider
from blog_api.domain.repositories.post_repository import PostRepository
from blog_api.domain.repositories.user_repository import UserRepository
from tests.fakes import InMemoryPostRepository, InMemoryUserRepository


@pytest.fixture
def mock_env():
    """Fixture to set common test environment variables."""
    env_vars = {
        "MONGO_URI": "mongodb://localhost:27017",
        "MONGO_DB_NAME": "test_blog_db",
        "JWT_SECRET_KEY": "test_secret_key_for_testing_only",
        "DEFAULT_PAGE_SIZE": "50",
        "MAX_PAGE_SIZE": "100",
    }
    with patch.dict(os.environ, env_vars, clear=False):
        yield env_vars


@pytest.fixture
def mock_settings():
    """Fixture replacing the settings singleton, so every get_settings() caller sees it."""
    mock = MagicMock()
    mock.mongo_uri = "mongodb://localhost:27017"
    mock.mongo_database_name = "test_db"
    mock.jwt_secret_key = "test_jwt_secret"
    mock.jwt_algorithm = "HS256"
    mock.access_token_expire_minutes = 60
    mock.default_page_size = 50
    mock.max_page_size = 100
    mock.cors_origins = ["http://localhost:3000"]
    mock.log_level = "INFO"

    with patch("blog_api.core.config._settings", mock):
        yield mock


@pytest.fixture
def user_repository():
    return InMemoryUserRepository()


@pytest.fixture
def post_repository():
    return InMemoryPostRepository()


@pytest.fixture
def container(user_repository, post_repository):
    """Container wired like DIContainer, but over in-memory repositories."""
    container = BaseContainer()
    container.register_singleton(UserRepository, user_repository)
    container.register_singleton(PostRepository, post_repository)
    AuthProvider.register(container)
    PostProvider.register(container)
    return container


@pytest.fixture
def client(container, mock_settings):
    """Test client for the full app (lifespan included) backed by the test container."""
    from blog_api.main import app

    with patch("blog_api.di.container._container", container):
        with TestClient(app) as c:
            yield c


@pytest.fixture
def make_user(user_repository, mock_settings):
    """Factory: seed a user and return (user, bearer headers)."""
    counter = {"n": 0}

    def _make(username=None, email=None):
        counter["n"] += 1
        username = username or f"user{counter['n']}"
        email = email or f"{username}@example.com"
        user = user_repository.add(username=username, email=email)
        headers = {"Authorization": f"Bearer {create_access_token(user.id)}"}
        return user, headers

    return _make
