"""Comment database model using SQLModel."""

from datetime import UTC, datetime
from typing import cast

from sqlalchemy import DateTime, Index, Integer, Text
from sqlalchemy.orm import declared_attr
from sqlmodel import Column, Field, ForeignKey, SQLModel


class CommentDB(SQLModel, table=True):
    """A comment belongs to exactly one blog and one commenting user."""

    __tablename__ = cast("declared_attr[str]", "comments")

    __table_args__ = (Index("ix_comments_blog_commenter", "blog_id", "commented_by_id"),)

    id: int | None = Field(default=None, primary_key=True, description="Comment ID")

    comment: str = Field(
        sa_column=Column(Text, nullable=False),
        description="Comment text",
    )
    blog_id: int = Field(
        sa_column=Column(
            "blog_id",
            Integer,
            ForeignKey("blogs.id", ondelete="CASCADE"),
            nullable=False,
            index=True,
        ),
        description="Blog the comment belongs to",
    )
    commented_by_id: int = Field(
        sa_column=Column(
            "commented_by_id",
            Integer,
            ForeignKey("users.id", ondelete="CASCADE"),
            nullable=False,
        ),
        description="Author of the comment",
    )

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(tz=UTC).replace(microsecond=0),
        sa_column=Column(DateTime(timezone=True), nullable=False),
        description="Creation timestamp",
    )
