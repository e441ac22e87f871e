# app/dependencies/dependencies.py

"""Application dependencies: caller identity, repositories and services."""

from typing import Annotated

from fastapi import Depends, Path
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from app.configs import settings
from app.context import CallerContext
from app.db import get_session
from app.errors.auth import UnauthorizedError
from app.managers.token_manager import decode_access_token
from app.monitoring import bind_user_id
from app.repositories import (
    BlogLikeRepository,
    BlogRepository,
    CommentLikeRepository,
    CommentRepository,
    FollowRepository,
    UserRepository,
)
from app.services import BlogService, CommentService, EngagementService, OwnershipGuard

bearer_scheme = HTTPBearer(auto_error=False, description="Access token issued at signin")

# Commits before the response goes out
SessionDep = Annotated[AsyncSession, Depends(get_session, scope="function")]


async def get_caller(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)],
) -> CallerContext:
    """
    Resolve the bearer credential to the calling user.

    Parameters
    ----------
    credentials : HTTPAuthorizationCredentials | None
        ``Authorization: Bearer <token>`` header, if sent.

    Returns
    -------
    CallerContext
        Identity handed to every core operation.

    Raises
    ------
    UnauthorizedError
        If the header is missing or the token does not verify.
    """
    if credentials is None:
        raise UnauthorizedError

    token_data = decode_access_token(credentials.credentials)
    if token_data is None:
        raise UnauthorizedError

    bind_user_id(token_data.user_id)
    return CallerContext(user_id=token_data.user_id)


CallerDep = Annotated[CallerContext, Depends(get_caller)]


def get_user_repository(session: SessionDep) -> UserRepository:
    """
    Resolve the `UserRepository` dependency.

    Parameters
    ----------
    session : AsyncSession
        Database session.

    Returns
    -------
    UserRepository
        Repository instance bound to the session.
    """
    return UserRepository(session)


def get_blog_repository(session: SessionDep) -> BlogRepository:
    return BlogRepository(session)


def get_comment_repository(session: SessionDep) -> CommentRepository:
    return CommentRepository(session)


def get_follow_repository(session: SessionDep) -> FollowRepository:
    return FollowRepository(session)


def get_blog_like_repository(session: SessionDep) -> BlogLikeRepository:
    return BlogLikeRepository(session)


def get_comment_like_repository(session: SessionDep) -> CommentLikeRepository:
    return CommentLikeRepository(session)


UserRepoDep = Annotated[UserRepository, Depends(get_user_repository)]
BlogRepoDep = Annotated[BlogRepository, Depends(get_blog_repository)]
CommentRepoDep = Annotated[CommentRepository, Depends(get_comment_repository)]
FollowRepoDep = Annotated[FollowRepository, Depends(get_follow_repository)]
BlogLikeRepoDep = Annotated[BlogLikeRepository, Depends(get_blog_like_repository)]
CommentLikeRepoDep = Annotated[CommentLikeRepository, Depends(get_comment_like_repository)]


def get_ownership_guard(
    users: UserRepoDep,
    blogs: BlogRepoDep,
    comments: CommentRepoDep,
) -> OwnershipGuard:
    """
    Build the ownership guard for this request.

    Parameters
    ----------
    users, blogs, comments
        Repositories sharing the request session.

    Returns
    -------
    OwnershipGuard
        Guard honouring ``ENGAGEMENT_OWN_CONTENT_ONLY``.
    """
    return OwnershipGuard(
        users,
        blogs,
        comments,
        own_content_only=settings.ENGAGEMENT_OWN_CONTENT_ONLY,
    )


GuardDep = Annotated[OwnershipGuard, Depends(get_ownership_guard)]


def get_engagement_service(
    guard: GuardDep,
    follows: FollowRepoDep,
    blog_likes: BlogLikeRepoDep,
    comment_likes: CommentLikeRepoDep,
) -> EngagementService:
    return EngagementService(
        guard,
        follows,
        blog_likes,
        comment_likes,
        follow_page_size=settings.FOLLOW_PAGE_SIZE,
    )


def get_blog_service(
    guard: GuardDep,
    blogs: BlogRepoDep,
    comments: CommentRepoDep,
    blog_likes: BlogLikeRepoDep,
    comment_likes: CommentLikeRepoDep,
) -> BlogService:
    return BlogService(
        guard,
        blogs,
        comments,
        blog_likes,
        comment_likes,
        page_size=settings.BLOG_PAGE_SIZE,
    )


def get_comment_service(guard: GuardDep, comments: CommentRepoDep) -> CommentService:
    return CommentService(guard, comments)


EngagementDep = Annotated[EngagementService, Depends(get_engagement_service)]
BlogServiceDep = Annotated[BlogService, Depends(get_blog_service)]
CommentServiceDep = Annotated[CommentService, Depends(get_comment_service)]

# Path ids are positive; anything else fails validation with a 400 envelope
BlogIdPath = Annotated[int, Path(ge=1, description="Blog ID")]
CommentIdPath = Annotated[int, Path(ge=1, description="Comment ID")]
UserIdPath = Annotated[int, Path(ge=1, description="User ID")]
PagePath = Annotated[int, Path(description="Page number, starting at 1")]
