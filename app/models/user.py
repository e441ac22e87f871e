"""User database model using SQLModel."""

from datetime import UTC, datetime
from typing import cast

from pydantic import ConfigDict
from sqlalchemy import DateTime
from sqlalchemy.orm import declared_attr
from sqlmodel import Column, Field, SQLModel, String


class UserDB(SQLModel, table=True):
    """
    User database model.

    Users are created at signup and are never updated by the engagement
    layer; ``id`` is the ownership key referenced by blogs, comments and
    every edge table.
    """

    __tablename__ = cast("declared_attr[str]", "users")

    id: int | None = Field(default=None, primary_key=True, description="User ID")

    username: str = Field(
        sa_column=Column(String(50), unique=True, nullable=False, index=True),
        description="Username (unique)",
    )
    email: str = Field(
        sa_column=Column(String(255), unique=True, nullable=False, index=True),
        description="Email address (unique)",
    )
    password_hash: str | None = Field(
        default=None,
        sa_column=Column(String(255), nullable=True),
        description="Hashed password",
    )

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(tz=UTC).replace(microsecond=0),
        sa_column=Column(DateTime(timezone=True), nullable=False),
        description="Creation timestamp",
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": 1,
                "username": "sagar",
                "email": "sagar@example.com",
            },
        },
    )
