"""Blog repository for database operations."""

from logging import getLogger

from sqlalchemy import desc, func, or_, select

from app.configs import file_logger
from app.models.blog import BlogDB
from app.models.user import UserDB
from app.repositories.base import BaseRepository

logger = file_logger(getLogger(__name__))


class BlogRepository(BaseRepository[BlogDB]):
    """
    Repository for Blog database operations.

    Listing and search only ever return published blogs; drafts are
    reachable through ``find_blog`` by their author.
    """

    model = BlogDB

    async def create(
        self,
        author_id: int,
        title: str,
        content: str,
        tag: str = "",
        *,
        published: bool = False,
    ) -> BlogDB:
        """
        Create a new blog in the database.

        Args:
            author_id: ID of the blog author
            title: Blog title
            content: Blog content
            tag: Optional tag, stored lower-cased
            published: Publish immediately instead of saving a draft

        Returns:
            BlogDB: Created blog database model
        """
        return await self._add_and_refresh(
            BlogDB(
                author_id=author_id,
                title=title,
                content=content,
                tag=tag.strip().lower(),
                published=published,
            ),
        )

    async def find_blog(
        self,
        blog_id: int,
        *,
        author_id: int | None = None,
        published: bool | None = None,
    ) -> BlogDB | None:
        """
        Get a blog by ID, optionally constrained by author and state.

        Args:
            blog_id: Blog ID
            author_id: Only match a blog written by this user
            published: Only match a blog in this publication state

        Returns:
            BlogDB | None: Blog if found and matching, None otherwise
        """
        # pyrefly: ignore [bad-argument-type]
        query = select(BlogDB).where(BlogDB.id == blog_id)
        if author_id is not None:
            # pyrefly: ignore [bad-argument-type]
            query = query.where(BlogDB.author_id == author_id)
        if published is not None:
            # pyrefly: ignore [bad-argument-type]
            query = query.where(BlogDB.published == published)
        result = await self.session.execute(query)
        return result.scalar_one_or_none()

    async def count_published(self) -> int:
        """Count published blogs."""
        result = await self.session.execute(
            # pyrefly: ignore [bad-argument-type]
            select(func.count()).select_from(BlogDB).where(BlogDB.published.is_(True)),
        )
        return result.scalar() or 0

    async def list_published_page(self, skip: int, limit: int) -> list[tuple[BlogDB, str]]:
        """
        Get one page of published blogs, newest first.

        Args:
            skip: Number of blogs to skip
            limit: Maximum number of blogs to return

        Returns:
            list[tuple[BlogDB, str]]: ``(blog, author username)`` pairs
        """
        query = (
            select(BlogDB, UserDB.username)
            # pyrefly: ignore [bad-argument-type]
            .join(UserDB, UserDB.id == BlogDB.author_id)
            # pyrefly: ignore [bad-argument-type]
            .where(BlogDB.published.is_(True))
            .order_by(desc(BlogDB.id))
            .offset(skip)
            .limit(limit)
        )
        result = await self.session.execute(query)
        return [(blog, username) for blog, username in result.all()]

    async def search_published(self, query_text: str) -> list[tuple[BlogDB, str]]:
        """
        Search published blogs by title, content or tag.

        Matching is a case-insensitive substring match; ``%`` and ``_`` in
        the query are matched literally.

        Args:
            query_text: Text to search for

        Returns:
            list[tuple[BlogDB, str]]: ``(blog, author username)`` pairs, newest first
        """
        query = (
            select(BlogDB, UserDB.username)
            # pyrefly: ignore [bad-argument-type]
            .join(UserDB, UserDB.id == BlogDB.author_id)
            .where(
                # pyrefly: ignore [bad-argument-type]
                BlogDB.published.is_(True),
                or_(
                    # pyrefly: ignore [missing-attribute]
                    BlogDB.title.icontains(query_text, autoescape=True),
                    # pyrefly: ignore [missing-attribute]
                    BlogDB.content.icontains(query_text, autoescape=True),
                    # pyrefly: ignore [missing-attribute]
                    BlogDB.tag.icontains(query_text, autoescape=True),
                ),
            )
            .order_by(desc(BlogDB.id))
        )
        result = await self.session.execute(query)
        return [(blog, username) for blog, username in result.all()]

    async def get_with_author(self, blog_id: int) -> tuple[BlogDB, str] | None:
        """
        Get a blog together with its author's username.

        Returns:
            tuple[BlogDB, str] | None: ``(blog, author username)`` or None
        """
        query = (
            select(BlogDB, UserDB.username)
            # pyrefly: ignore [bad-argument-type]
            .join(UserDB, UserDB.id == BlogDB.author_id)
            # pyrefly: ignore [bad-argument-type]
            .where(BlogDB.id == blog_id)
        )
        result = await self.session.execute(query)
        row = result.one_or_none()
        if row is None:
            return None
        return row[0], row[1]

    async def list_drafts(self, author_id: int) -> list[tuple[BlogDB, str]]:
        """
        Get the unpublished blogs of one author, newest first.

        Args:
            author_id: Author whose drafts to return

        Returns:
            list[tuple[BlogDB, str]]: ``(blog, author username)`` pairs
        """
        query = (
            select(BlogDB, UserDB.username)
            # pyrefly: ignore [bad-argument-type]
            .join(UserDB, UserDB.id == BlogDB.author_id)
            .where(
                # pyrefly: ignore [bad-argument-type]
                BlogDB.author_id == author_id,
                # pyrefly: ignore [bad-argument-type]
                BlogDB.published.is_(False),
            )
            .order_by(desc(BlogDB.id))
        )
        result = await self.session.execute(query)
        return [(blog, username) for blog, username in result.all()]
