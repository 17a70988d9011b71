"""
Unit tests for the DI container and providers.
"""
from unittest.mock import MagicMock, patch

import pytest

from blog_api.application.use_cases.auth.get_current_user import GetCurrentUserUseCase
from blog_api.application.use_cases.post.update_post import UpdatePostUseCase
from blog_api.core.security import JwtTokenVerifier, TokenVerifier
from blog_api.di.base_container import BaseContainer
from blog_api.di.container import DIContainer
from blog_api.di.providers import AuthProvider
from blog_api.domain.repositories.post_repository import PostRepository
from blog_api.domain.repositories.user_repository import UserRepository
from blog_api.infrastructure.db.mongo_post_repository import MongoPostRepository


class TestBaseContainer:
    def test_singleton_returns_same_instance(self):
        container = BaseContainer()
        instance = object()
        container.register_singleton("thing", instance)
        assert container.get("thing") is instance

    def test_factory_builds_per_call(self):
        container = BaseContainer()
        container.register_factory("thing", object)
        assert container.get("thing") is not container.get("thing")

    def test_unregistered_raises_value_error(self):
        with pytest.raises(ValueError, match="PostRepository"):
            BaseContainer().get(PostRepository)


class TestProviders:
    def test_post_use_cases_share_repository(self, container, post_repository):
        use_case = container.get(UpdatePostUseCase)
        assert isinstance(use_case, UpdatePostUseCase)
        assert use_case.post_repository is post_repository

    def test_default_token_verifier_is_jwt(self, container):
        assert isinstance(container.get(TokenVerifier), JwtTokenVerifier)

    def test_preregistered_verifier_kept(self, user_repository):
        container = BaseContainer()
        verifier = MagicMock(spec=TokenVerifier)
        container.register_singleton(TokenVerifier, verifier)
        container.register_singleton(UserRepository, user_repository)
        AuthProvider.register(container)
        assert container.get(GetCurrentUserUseCase).token_verifier is verifier


class TestDIContainer:
    def test_wires_mongo_repositories(self, mock_settings):
        collections = {"users": MagicMock(name="users"), "posts": MagicMock(name="posts")}
        with patch(
            "blog_api.di.providers.database_provider.get_user_collection", return_value=collections["users"]
        ), patch(
            "blog_api.di.providers.database_provider.get_post_collection", return_value=collections["posts"]
        ):
            container = DIContainer()

        repository = container.get(PostRepository)
        assert isinstance(repository, MongoPostRepository)
        assert repository.post_collection is collections["posts"]
        assert container.get(UpdatePostUseCase).post_repository is repository
        assert container.get("post_collection") is collections["posts"]
        assert not container.is_registered("database")
