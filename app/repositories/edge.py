"""
Edge repositories and the toggle engine.

An edge is a join row keyed by an ordered pair of ids (follow, blog like,
comment like). Its whole lifecycle is insert-then-later-delete, so every
state change goes through ``EdgeRepository.toggle``:

1. ``SELECT ... FOR UPDATE`` on the unique key, which serialises toggles of
   the same key inside the request transaction.
2. Present: delete the row.
3. Absent: insert inside a SAVEPOINT. If a concurrent request inserted the
   same key first, the unique constraint rejects the insert, only the
   savepoint is rolled back, and the outcome is ``ALREADY_EXISTS``.

Any other failure propagates and the surrounding transaction rolls back.
"""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from enum import StrEnum
from logging import getLogger

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlmodel import SQLModel

from app.configs import file_logger
from app.errors.database import DatabaseConnectionError, DatabaseError, DuplicateEntryError
from app.models.follow import FollowDB
from app.models.like import BlogLikeDB, CommentLikeDB
from app.models.user import UserDB
from app.repositories.base import BaseRepository, is_unique_violation

logger = file_logger(getLogger(__name__))

type EdgeKey = tuple[int, int]


class EdgeKind(StrEnum):
    FOLLOW = "follow"
    BLOG_LIKE = "blogLike"
    COMMENT_LIKE = "commentLike"


class ToggleOutcome(StrEnum):
    """State the edge ended up in after a toggle."""

    ADDED = "added"
    REMOVED = "removed"
    ALREADY_EXISTS = "already_exists"


@dataclass(frozen=True)
class ToggleResult:
    kind: EdgeKind
    key: EdgeKey
    outcome: ToggleOutcome

    @property
    def present(self) -> bool:
        """Whether the edge exists once the toggle has completed."""
        return self.outcome is not ToggleOutcome.REMOVED


class EdgeRepository[EdgeT: SQLModel](BaseRepository[EdgeT]):
    """
    Repository for one kind of edge table.

    Attributes:
        kind: Edge kind reported in toggle results.
        key_fields: Column names forming the unique key, in key order.
    """

    kind: EdgeKind
    key_fields: tuple[str, str]

    def _key_clause(self, key: EdgeKey) -> list:
        return [
            getattr(self.model, field) == value
            for field, value in zip(self.key_fields, key, strict=True)
        ]

    def _filter_clause(self, filters: Mapping[str, int]) -> list:
        return [getattr(self.model, field) == value for field, value in filters.items()]

    async def find_edge(self, key: EdgeKey, *, lock: bool = False) -> EdgeT | None:
        """
        Get the edge stored under ``key``.

        Args:
            key: Unique edge key
            lock: Take a row lock (``FOR UPDATE``) until the transaction ends

        Returns:
            EdgeT | None: Edge if present, None otherwise
        """
        statement = select(self.model).where(*self._key_clause(key))
        if lock:
            statement = statement.with_for_update()
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def create_edge(self, key: EdgeKey) -> EdgeT:
        """
        Insert the edge inside a savepoint.

        Args:
            key: Unique edge key

        Returns:
            EdgeT: The inserted edge

        Raises:
            DuplicateEntryError: If the key is already present
            DatabaseError: For other integrity errors
            DatabaseConnectionError: For any other store failure
        """
        edge = self.model(**dict(zip(self.key_fields, key, strict=True)))
        try:
            async with self.session.begin_nested():
                self.session.add(edge)
                await self.session.flush()
        except IntegrityError as e:
            error_msg = str(e.orig) if e.orig else str(e)
            if is_unique_violation(e):
                raise DuplicateEntryError(
                    detail=f"{self.kind} edge {key} already exists",
                ) from e
            raise DatabaseError(detail=f"Database integrity error: {error_msg}") from e
        except SQLAlchemyError as e:
            raise DatabaseConnectionError(detail=f"Failed to save {self.kind} edge: {e}") from e
        return edge

    async def delete_edge(self, key: EdgeKey) -> EdgeT | None:
        """
        Delete the edge stored under ``key``.

        Returns:
            EdgeT | None: The deleted edge, None if there was nothing to delete
        """
        edge = await self.find_edge(key, lock=True)
        if edge is not None:
            await self._remove(edge)
        return edge

    async def _remove(self, edge: EdgeT) -> None:
        await self.session.delete(edge)
        await self.session.flush()

    async def toggle(self, key: EdgeKey) -> ToggleResult:
        """
        Flip the existence of the edge stored under ``key``.

        Args:
            key: Unique edge key

        Returns:
            ToggleResult: Which state the edge ended up in
        """
        existing = await self.find_edge(key, lock=True)
        if existing is not None:
            await self._remove(existing)
            return ToggleResult(self.kind, key, ToggleOutcome.REMOVED)

        try:
            await self.create_edge(key)
        except DuplicateEntryError:
            logger.info(f"Concurrent insert won the race for {self.kind} edge {key}")
            return ToggleResult(self.kind, key, ToggleOutcome.ALREADY_EXISTS)
        return ToggleResult(self.kind, key, ToggleOutcome.ADDED)

    async def count_matching(self, **filters: int) -> int:
        """
        Count edges whose columns equal the given values.

        Example:
            ``await follows.count_matching(following_id=2)``
        """
        statement = select(func.count()).select_from(self.model).where(*self._filter_clause(filters))
        result = await self.session.execute(statement)
        count = result.scalar()
        return count if count is not None else 0

    async def list_page(
        self,
        filters: Mapping[str, int],
        skip: int,
        limit: int,
        order_key: str = "id",
    ) -> Sequence[EdgeT]:
        """
        Get one page of edges matching ``filters``.

        Args:
            filters: Column name to required value
            skip: Number of rows to skip
            limit: Maximum number of rows to return
            order_key: Column giving the stable page order

        Returns:
            Sequence[EdgeT]: Edges in ``order_key`` order
        """
        statement = (
            select(self.model)
            .where(*self._filter_clause(filters))
            .order_by(getattr(self.model, order_key))
            .offset(skip)
            .limit(limit)
        )
        result = await self.session.execute(statement)
        return result.scalars().all()


class FollowRepository(EdgeRepository[FollowDB]):
    """Follow edges ``(follower_id, following_id)``."""

    model = FollowDB
    kind = EdgeKind.FOLLOW
    key_fields = ("follower_id", "following_id")

    async def list_followers_page(self, user_id: int, skip: int, limit: int) -> list[UserDB]:
        """
        Get one page of the users following ``user_id``.

        Ordered by edge id, i.e. the order the follows were made.
        """
        statement = (
            select(UserDB)
            # pyrefly: ignore [bad-argument-type]
            .join(FollowDB, FollowDB.follower_id == UserDB.id)
            # pyrefly: ignore [bad-argument-type]
            .where(FollowDB.following_id == user_id)
            .order_by(FollowDB.id)
            .offset(skip)
            .limit(limit)
        )
        result = await self.session.execute(statement)
        return list(result.scalars().all())

    async def list_following_page(self, user_id: int, skip: int, limit: int) -> list[UserDB]:
        """Get one page of the users ``user_id`` follows."""
        statement = (
            select(UserDB)
            # pyrefly: ignore [bad-argument-type]
            .join(FollowDB, FollowDB.following_id == UserDB.id)
            # pyrefly: ignore [bad-argument-type]
            .where(FollowDB.follower_id == user_id)
            .order_by(FollowDB.id)
            .offset(skip)
            .limit(limit)
        )
        result = await self.session.execute(statement)
        return list(result.scalars().all())


class LikeRepository[LikeT: BlogLikeDB | CommentLikeDB](EdgeRepository[LikeT]):
    """
    Shared reads for like edges ``(liked_by_id, target_id)``.

    Attributes:
        target_field: Column naming the liked entity.
    """

    target_field: str

    async def list_with_users(self, target_id: int) -> list[tuple[LikeT, str]]:
        """
        Get every like of one target with the liker's username.

        Returns:
            list[tuple[LikeT, str]]: ``(like, username)`` pairs in like order
        """
        return await self.list_for_targets([target_id])

    async def list_for_targets(self, target_ids: Sequence[int]) -> list[tuple[LikeT, str]]:
        """Get the likes of several targets at once, with liker usernames."""
        if not target_ids:
            return []
        target = getattr(self.model, self.target_field)
        statement = (
            select(self.model, UserDB.username)
            # pyrefly: ignore [bad-argument-type]
            .join(UserDB, UserDB.id == self.model.liked_by_id)
            .where(target.in_(target_ids))
            .order_by(self.model.id)
        )
        result = await self.session.execute(statement)
        return [(like, username) for like, username in result.all()]


class BlogLikeRepository(LikeRepository[BlogLikeDB]):
    model = BlogLikeDB
    kind = EdgeKind.BLOG_LIKE
    key_fields = ("liked_by_id", "blog_id")
    target_field = "blog_id"


class CommentLikeRepository(LikeRepository[CommentLikeDB]):
    model = CommentLikeDB
    kind = EdgeKind.COMMENT_LIKE
    key_fields = ("liked_by_id", "comment_id")
    target_field = "comment_id"
