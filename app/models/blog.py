"""Blog database model using SQLModel."""

from datetime import UTC, datetime
from typing import cast

from pydantic import ConfigDict
from sqlalchemy import Boolean, DateTime, Index, Integer, Text, false
from sqlalchemy.orm import declared_attr
from sqlmodel import Column, Field, ForeignKey, SQLModel, String


class BlogDB(SQLModel, table=True):
    """
    Blog database model.

    ``published`` separates drafts from public posts: only published blogs
    are visible to listing, search and detail reads for anyone but the author.
    """

    __tablename__ = cast("declared_attr[str]", "blogs")

    __table_args__ = (
        Index("ix_blogs_published_id", "published", "id"),
        Index("ix_blogs_author_published", "author_id", "published"),
    )

    id: int | None = Field(default=None, primary_key=True, description="Blog ID")

    author_id: int = Field(
        sa_column=Column(
            "author_id",
            Integer,
            ForeignKey("users.id", ondelete="CASCADE"),
            nullable=False,
            index=True,
        ),
        description="Author ID (foreign key to users.id)",
    )

    title: str = Field(
        sa_column=Column(String(200), nullable=False),
        description="Blog title",
    )
    content: str = Field(
        sa_column=Column(Text, nullable=False),
        description="Blog content",
    )
    tag: str = Field(
        default="",
        sa_column=Column(String(50), nullable=False, server_default=""),
        description="Lower-cased tag, empty when untagged",
    )
    published: bool = Field(
        default=False,
        sa_column=Column(Boolean, nullable=False, server_default=false()),
        description="Whether the blog is public",
    )

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(tz=UTC).replace(microsecond=0),
        sa_column=Column(DateTime(timezone=True), nullable=False),
        description="Creation timestamp",
    )
    updated_at: datetime | None = Field(
        default=None,
        sa_column=Column(DateTime(timezone=True)),
        description="Last update timestamp",
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": 7,
                "author_id": 1,
                "title": "Notes on offset pagination",
                "content": "Offsets drift when rows are inserted...",
                "tag": "databases",
                "published": True,
            },
        },
    )
