"""Like edge database models using SQLModel."""

from datetime import UTC, datetime
from typing import cast

from sqlalchemy import DateTime, Integer, UniqueConstraint
from sqlalchemy.orm import declared_attr
from sqlmodel import Column, Field, ForeignKey, SQLModel


class BlogLikeDB(SQLModel, table=True):
    """One like per (user, blog)."""

    __tablename__ = cast("declared_attr[str]", "blog_likes")

    __table_args__ = (UniqueConstraint("liked_by_id", "blog_id", name="uq_blog_likes_user_blog"),)

    id: int | None = Field(default=None, primary_key=True, description="Edge ID")

    liked_by_id: int = Field(
        sa_column=Column(
            "liked_by_id",
            Integer,
            ForeignKey("users.id", ondelete="CASCADE"),
            nullable=False,
        ),
        description="User who liked the blog",
    )
    blog_id: int = Field(
        sa_column=Column(
            "blog_id",
            Integer,
            ForeignKey("blogs.id", ondelete="CASCADE"),
            nullable=False,
            index=True,
        ),
        description="Liked blog",
    )

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(tz=UTC).replace(microsecond=0),
        sa_column=Column(DateTime(timezone=True), nullable=False),
        description="Creation timestamp",
    )


class CommentLikeDB(SQLModel, table=True):
    """One like per (user, comment)."""

    __tablename__ = cast("declared_attr[str]", "comment_likes")

    __table_args__ = (
        UniqueConstraint("liked_by_id", "comment_id", name="uq_comment_likes_user_comment"),
    )

    id: int | None = Field(default=None, primary_key=True, description="Edge ID")

    liked_by_id: int = Field(
        sa_column=Column(
            "liked_by_id",
            Integer,
            ForeignKey("users.id", ondelete="CASCADE"),
            nullable=False,
        ),
        description="User who liked the comment",
    )
    comment_id: int = Field(
        sa_column=Column(
            "comment_id",
            Integer,
            ForeignKey("comments.id", ondelete="CASCADE"),
            nullable=False,
            index=True,
        ),
        description="Liked comment",
    )

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(tz=UTC).replace(microsecond=0),
        sa_column=Column(DateTime(timezone=True), nullable=False),
        description="Creation timestamp",
    )
