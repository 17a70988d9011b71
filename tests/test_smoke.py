"""
Smoke test - verifies test infrastructure is working.
Run: pytest tests/test_smoke.py -v
"""


def test_import_app():
    """Verify app package can be imported."""
    from blog_api.core.config import get_settings

    settings = get_settings()
    assert settings is not None
    assert hasattr(settings, "mongo_uri")
    assert settings.default_page_size >= 1


def test_app_routes_registered():
    from blog_api.main import app

    paths = app.openapi()["paths"]
    assert "/api/posts" in paths
    assert "/api/posts/{post_id}" in paths
    assert "/api/auth/login" in paths
