"""Comment repository for database operations."""

from collections.abc import Sequence

from sqlalchemy import select

from app.models.comment import CommentDB
from app.models.user import UserDB
from app.repositories.base import BaseRepository


class CommentRepository(BaseRepository[CommentDB]):
    """
    Repository for Comment database operations.

    A comment id is only meaningful together with the blog it belongs to,
    so lookups always take the blog id as well.
    """

    model = CommentDB

    async def find_comment(
        self,
        comment_id: int,
        scoped_blog_id: int,
        commented_by_id: int | None = None,
    ) -> CommentDB | None:
        """
        Get a comment that belongs to ``scoped_blog_id``.

        Args:
            comment_id: Comment ID
            scoped_blog_id: Blog the comment must belong to
            commented_by_id: Only match a comment written by this user

        Returns:
            CommentDB | None: Comment if found within the blog, None otherwise
        """
        query = select(CommentDB).where(
            # pyrefly: ignore [bad-argument-type]
            CommentDB.id == comment_id,
            # pyrefly: ignore [bad-argument-type]
            CommentDB.blog_id == scoped_blog_id,
        )
        if commented_by_id is not None:
            # pyrefly: ignore [bad-argument-type]
            query = query.where(CommentDB.commented_by_id == commented_by_id)
        result = await self.session.execute(query)
        return result.scalar_one_or_none()

    async def create_comment(self, blog_id: int, commented_by_id: int, text: str) -> CommentDB:
        """
        Create a comment on a blog.

        Args:
            blog_id: Blog being commented on
            commented_by_id: Author of the comment
            text: Comment text

        Returns:
            CommentDB: Created comment
        """
        return await self._add_and_refresh(
            CommentDB(blog_id=blog_id, commented_by_id=commented_by_id, comment=text),
        )

    async def delete_comment(self, comment: CommentDB) -> None:
        """Delete a comment; its likes go with it through the foreign key cascade."""
        await self.session.delete(comment)
        await self.session.flush()

    async def list_for_blog(self, blog_id: int) -> list[tuple[CommentDB, str]]:
        """
        Get the comments of one blog with their commenters.

        Returns:
            list[tuple[CommentDB, str]]: ``(comment, commenter username)`` in posting order
        """
        return await self.list_for_blogs([blog_id])

    async def list_for_blogs(self, blog_ids: Sequence[int]) -> list[tuple[CommentDB, str]]:
        """Get the comments of several blogs at once, in posting order."""
        if not blog_ids:
            return []
        query = (
            select(CommentDB, UserDB.username)
            # pyrefly: ignore [bad-argument-type]
            .join(UserDB, UserDB.id == CommentDB.commented_by_id)
            # pyrefly: ignore [missing-attribute]
            .where(CommentDB.blog_id.in_(blog_ids))
            .order_by(CommentDB.id)
        )
        result = await self.session.execute(query)
        return [(comment, username) for comment, username in result.all()]
