# app/dependencies/__init__.py

from app.dependencies.dependencies import (
    BlogIdPath,
    BlogServiceDep,
    CallerDep,
    CommentIdPath,
    CommentServiceDep,
    EngagementDep,
    PagePath,
    UserIdPath,
    get_blog_service,
    get_caller,
    get_comment_service,
    get_engagement_service,
    get_ownership_guard,
)

__all__ = [
    "BlogIdPath",
    "BlogServiceDep",
    "CallerDep",
    "CommentIdPath",
    "CommentServiceDep",
    "EngagementDep",
    "PagePath",
    "UserIdPath",
    "get_blog_service",
    "get_caller",
    "get_comment_service",
    "get_engagement_service",
    "get_ownership_guard",
]
