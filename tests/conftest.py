# tests/conftest.py
"""Root pytest configuration and shared fixtures."""

import os

# Must happen before app is imported anywhere
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["ENVIRONMENT"] = "testing"
os.environ["SECRET_KEY"] = "test-secret-key-not-for-production"
os.environ["LIMITER_ENABLED"] = "false"
os.environ["LOG_TO_FILE"] = "false"

from collections.abc import AsyncGenerator  # noqa: E402
from dataclasses import dataclass  # noqa: E402
from pathlib import Path  # noqa: E402

import pytest  # noqa: E402
from sqlalchemy import event  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker, create_async_engine  # noqa: E402
from sqlmodel.ext.asyncio.session import AsyncSession  # noqa: E402

from app.context import CallerContext  # noqa: E402
from app.db.database import init_db  # noqa: E402
from app.models import BlogDB, CommentDB, UserDB  # noqa: E402
from app.repositories import (  # noqa: E402
    BlogLikeRepository,
    BlogRepository,
    CommentLikeRepository,
    CommentRepository,
    FollowRepository,
    UserRepository,
)
from app.services import BlogService, CommentService, EngagementService, OwnershipGuard  # noqa: E402


@dataclass
class World:
    """Seeded users and blogs shared by store-backed tests."""

    alice: UserDB
    bob: UserDB
    carol: UserDB
    alice_post: BlogDB
    alice_draft: BlogDB
    bob_post: BlogDB

    def caller(self, user: UserDB) -> CallerContext:
        return CallerContext(user_id=user.id or 0)


@pytest.fixture
async def engine(tmp_path: Path) -> AsyncGenerator[AsyncEngine]:
    """File-backed SQLite engine with real SAVEPOINT and foreign key support."""
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'inkwell.db'}")

    @event.listens_for(engine.sync_engine, "connect")
    def on_connect(dbapi_connection: object, connection_record: object) -> None:
        # Let SQLAlchemy emit BEGIN itself so nested transactions work
        dbapi_connection.isolation_level = None  # type: ignore[attr-defined]
        cursor = dbapi_connection.cursor()  # type: ignore[attr-defined]
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    @event.listens_for(engine.sync_engine, "begin")
    def on_begin(conn: object) -> None:
        conn.exec_driver_sql("BEGIN")  # type: ignore[attr-defined]

    await init_db(bind=engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_maker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Factory for independent sessions on the test database."""
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


@pytest.fixture
async def session(
    session_maker: async_sessionmaker[AsyncSession],
) -> AsyncGenerator[AsyncSession]:
    """One session per test, rolled back afterwards."""
    async with session_maker() as session:
        yield session
        await session.rollback()


@pytest.fixture
async def world(session: AsyncSession) -> World:
    """Three users; alice has a published blog and a draft, bob a published blog."""
    users = UserRepository(session)
    blogs = BlogRepository(session)

    alice = await users.create(username="alice", email="alice@example.com")
    bob = await users.create(username="bob", email="bob@example.com")
    carol = await users.create(username="carol", email="carol@example.com")

    alice_post = await blogs.create(
        author_id=alice.id or 0,
        title="Notes on Offset Pagination",
        content="Offsets drift when rows are inserted between requests.",
        tag="Databases",
        published=True,
    )
    alice_draft = await blogs.create(
        author_id=alice.id or 0,
        title="Unfinished thoughts",
        content="Not ready yet.",
    )
    bob_post = await blogs.create(
        author_id=bob.id or 0,
        title="Packing for Bali",
        content="Sunscreen, sandals and a good book.",
        tag="travel",
        published=True,
    )
    return World(alice, bob, carol, alice_post, alice_draft, bob_post)


@pytest.fixture
def guard(session: AsyncSession) -> OwnershipGuard:
    return OwnershipGuard(
        UserRepository(session),
        BlogRepository(session),
        CommentRepository(session),
    )


@pytest.fixture
def open_guard(session: AsyncSession) -> OwnershipGuard:
    """Guard with own-content restriction switched off."""
    return OwnershipGuard(
        UserRepository(session),
        BlogRepository(session),
        CommentRepository(session),
        own_content_only=False,
    )


def build_engagement(session: AsyncSession, guard: OwnershipGuard) -> EngagementService:
    return EngagementService(
        guard,
        FollowRepository(session),
        BlogLikeRepository(session),
        CommentLikeRepository(session),
        follow_page_size=5,
    )


@pytest.fixture
def engagement(session: AsyncSession, guard: OwnershipGuard) -> EngagementService:
    return build_engagement(session, guard)


@pytest.fixture
def open_engagement(session: AsyncSession, open_guard: OwnershipGuard) -> EngagementService:
    return build_engagement(session, open_guard)


@pytest.fixture
def blog_service(session: AsyncSession, guard: OwnershipGuard) -> BlogService:
    return BlogService(
        guard,
        BlogRepository(session),
        CommentRepository(session),
        BlogLikeRepository(session),
        CommentLikeRepository(session),
        page_size=10,
    )


@pytest.fixture
def comment_service(session: AsyncSession, guard: OwnershipGuard) -> CommentService:
    return CommentService(guard, CommentRepository(session))


@pytest.fixture
async def alice_comment(session: AsyncSession, world: World) -> CommentDB:
    """A comment by alice on her own published blog."""
    return await CommentRepository(session).create_comment(
        world.alice_post.id or 0,
        world.alice.id or 0,
        "Keyset pagination avoids the drift.",
    )
