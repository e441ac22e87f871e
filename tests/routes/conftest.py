# tests/routes/conftest.py
"""Pytest fixtures for route tests."""

from collections.abc import AsyncGenerator, Generator
from datetime import timedelta
from unittest.mock import MagicMock

import pytest
from httpx import ASGITransport, AsyncClient

from app.dependencies import get_blog_service, get_comment_service, get_engagement_service
from app.main import app
from app.managers.rate_limiter import limiter
from app.managers.token_manager import create_access_token


@pytest.fixture
def access_token() -> str:
    """Token for user 1 ("alice")."""
    return create_access_token(user_id=1, username="alice", expires_delta=timedelta(minutes=30))


@pytest.fixture
def auth_headers(access_token: str) -> dict[str, str]:
    """Create auth headers with a valid access token."""
    return {"Authorization": f"Bearer {access_token}"}


@pytest.fixture
def engagement_service() -> Generator[MagicMock]:
    """Replace the engagement service for the duration of a test."""
    mock = MagicMock()
    app.dependency_overrides[get_engagement_service] = lambda: mock
    yield mock
    app.dependency_overrides.pop(get_engagement_service, None)


@pytest.fixture
def blog_service() -> Generator[MagicMock]:
    mock = MagicMock()
    app.dependency_overrides[get_blog_service] = lambda: mock
    yield mock
    app.dependency_overrides.pop(get_blog_service, None)


@pytest.fixture
def comment_service() -> Generator[MagicMock]:
    mock = MagicMock()
    app.dependency_overrides[get_comment_service] = lambda: mock
    yield mock
    app.dependency_overrides.pop(get_comment_service, None)


@pytest.fixture
async def client() -> AsyncGenerator[AsyncClient]:
    """Create async HTTP client for testing."""
    previous = limiter.enabled
    limiter.enabled = False
    async with AsyncClient(
        base_url="http://test",
        transport=ASGITransport(app=app),
    ) as ac:
        yield ac
    limiter.enabled = previous
