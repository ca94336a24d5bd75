"""Root conftest — test infrastructure for all backend tests.

Provides:
- anyio backend pinned to asyncio
- Isolated Settings instance (no .env, no token)
- Fresh ActivityService with a mocked reader
- API client with the activity service dependency overridden
"""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest
from httpx import ASGITransport, AsyncClient

from app.config.settings import Settings
from app.services.activity.service import ActivityService
from app.services.github.read_operations import GitHubActivityReader


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture
def test_settings() -> Settings:
    """Settings that ignore the environment's .env file."""
    return Settings(
        _env_file=None,
        github_username="octocat",
        github_token="",
        refresh_on_startup=False,
        activity_cache_size=8,
    )


@pytest.fixture
def mock_reader() -> MagicMock:
    """A GitHubActivityReader whose fetch() is an AsyncMock."""
    reader = MagicMock(spec=GitHubActivityReader)
    reader.fetch = AsyncMock()
    return reader


@pytest.fixture
def activity_service(mock_reader: MagicMock, test_settings: Settings) -> ActivityService:
    return ActivityService(reader=mock_reader, config=test_settings)


@pytest.fixture
async def api_client(activity_service: ActivityService):
    """HTTP client wired to a fresh ActivityService.

    Lifespan events are not run, so no startup refresh hits the network.
    """
    from app.api.deps import get_activity_service
    from app.main import app

    app.dependency_overrides[get_activity_service] = lambda: activity_service

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()
