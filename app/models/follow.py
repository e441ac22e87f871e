"""Follow edge database model using SQLModel."""

from datetime import UTC, datetime
from typing import cast

from sqlalchemy import CheckConstraint, DateTime, Integer, UniqueConstraint
from sqlalchemy.orm import declared_attr
from sqlmodel import Column, Field, ForeignKey, SQLModel


class FollowDB(SQLModel, table=True):
    """
    Directed follow edge ``follower_id -> following_id``.

    At most one row per ordered pair and never a self-edge. Rows are only
    ever inserted or deleted by the toggle engine.
    """

    __tablename__ = cast("declared_attr[str]", "follows")

    __table_args__ = (
        UniqueConstraint("follower_id", "following_id", name="uq_follows_follower_following"),
        CheckConstraint("follower_id <> following_id", name="ck_follows_not_self"),
    )

    id: int | None = Field(default=None, primary_key=True, description="Edge ID")

    follower_id: int = Field(
        sa_column=Column(
            "follower_id",
            Integer,
            ForeignKey("users.id", ondelete="CASCADE"),
            nullable=False,
            index=True,
        ),
        description="User who follows",
    )
    following_id: int = Field(
        sa_column=Column(
            "following_id",
            Integer,
            ForeignKey("users.id", ondelete="CASCADE"),
            nullable=False,
            index=True,
        ),
        description="User being followed",
    )

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(tz=UTC).replace(microsecond=0),
        sa_column=Column(DateTime(timezone=True), nullable=False),
        description="Creation timestamp",
    )
