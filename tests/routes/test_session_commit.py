# tests/routes/test_session_commit.py
"""Tests for the request session committing before the response is sent."""

from collections.abc import AsyncGenerator, Generator
from unittest.mock import AsyncMock, patch

import pytest
from httpx import AsyncClient
from sqlalchemy.exc import OperationalError
from sqlalchemy.ext.asyncio import async_sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession

from app.db import get_session, transaction
from app.main import app
from app.repositories import FollowRepository, UserRepository


@pytest.fixture
async def users(session_maker: async_sessionmaker[AsyncSession]) -> tuple[int, int]:
    """Committed alice (id 1, the token holder) and bob."""
    async with session_maker() as seed:
        repo = UserRepository(seed)
        alice = await repo.create(username="alice", email="alice@example.com")
        bob = await repo.create(username="bob", email="bob@example.com")
        await seed.commit()
    return alice.id or 0, bob.id or 0


@pytest.fixture
def store(session_maker: async_sessionmaker[AsyncSession]) -> Generator[None]:
    """Serve requests from the test database through the real transaction helper."""

    async def override() -> AsyncGenerator[AsyncSession]:
        async with transaction(session_maker) as session:
            yield session

    app.dependency_overrides[get_session] = override
    yield
    app.dependency_overrides.pop(get_session, None)


async def count_follows(session_maker: async_sessionmaker[AsyncSession], follower_id: int) -> int:
    async with session_maker() as check:
        return await FollowRepository(check).count_matching(follower_id=follower_id)


@pytest.mark.usefixtures("store")
class TestSessionCommit:
    """The commit finishes before the client is answered."""

    @pytest.mark.asyncio
    async def test_follow_is_stored_when_answered(
        self,
        client: AsyncClient,
        auth_headers: dict[str, str],
        session_maker: async_sessionmaker[AsyncSession],
        users: tuple[int, int],
    ) -> None:
        alice, bob = users

        response = await client.post(f"/user/follow/{bob}", headers=auth_headers)

        assert response.status_code == 200
        assert response.json()["data"] == {"action": "follow", "followingId": bob}
        assert await count_follows(session_maker, alice) == 1

        again = await client.post(f"/user/follow/{bob}", headers=auth_headers)

        assert again.json()["data"] == {"action": "unfollow", "unfollowedId": bob}
        assert await count_follows(session_maker, alice) == 0

    @pytest.mark.asyncio
    async def test_commit_failure_is_reported(
        self,
        client: AsyncClient,
        auth_headers: dict[str, str],
        session_maker: async_sessionmaker[AsyncSession],
        users: tuple[int, int],
    ) -> None:
        alice, bob = users
        failure = OperationalError("COMMIT", {}, Exception("disk I/O error"))

        with patch.object(AsyncSession, "commit", AsyncMock(side_effect=failure)):
            response = await client.post(f"/user/follow/{bob}", headers=auth_headers)

        assert response.status_code == 500
        assert response.json() == {
            "success": False,
            "data": None,
            "message": "Internal Server Issue",
        }
        assert await count_follows(session_maker, alice) == 0

    @pytest.mark.asyncio
    async def test_rejected_request_stores_nothing(
        self,
        client: AsyncClient,
        auth_headers: dict[str, str],
        session_maker: async_sessionmaker[AsyncSession],
        users: tuple[int, int],
    ) -> None:
        alice, _ = users

        response = await client.post("/user/follow/99", headers=auth_headers)

        assert response.status_code == 404
        assert await count_follows(session_maker, alice) == 0
