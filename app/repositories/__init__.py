"""Repository layer for database operations."""

from app.repositories.blog import BlogRepository
from app.repositories.comment import CommentRepository
from app.repositories.edge import (
    BlogLikeRepository,
    CommentLikeRepository,
    EdgeKind,
    EdgeRepository,
    FollowRepository,
    ToggleOutcome,
    ToggleResult,
)
from app.repositories.user import UserRepository

__all__ = [
    "BlogLikeRepository",
    "BlogRepository",
    "CommentLikeRepository",
    "CommentRepository",
    "EdgeKind",
    "EdgeRepository",
    "FollowRepository",
    "ToggleOutcome",
    "ToggleResult",
    "UserRepository",
]
