"""Shared test fixtures."""

import pytest
from fastapi.testclient import TestClient

from inthegreen_proxy.app import app
from inthegreen_proxy.config import Settings, get_settings


@pytest.fixture
def settings() -> Settings:
    """Settings with test credentials and no .env lookup."""
    return Settings(
        _env_file=None,
        notion_client_id="client-123",
        notion_client_secret="secret-456",
        frontend_url="",
    )


@pytest.fixture
def client(settings: Settings):
    """TestClient with ``settings`` injected through dependency overrides."""
    app.dependency_overrides[get_settings] = lambda: settings
    yield TestClient(app)
    app.dependency_overrides.clear()
