"""Follow and like operations over the edge toggle engine."""

from collections.abc import Sequence
from dataclasses import dataclass

from app.configs import settings
from app.context import CallerContext
from app.models.like import BlogLikeDB, CommentLikeDB
from app.monitoring import get_logger
from app.repositories.edge import (
    BlogLikeRepository,
    CommentLikeRepository,
    EdgeKey,
    EdgeKind,
    EdgeRepository,
    FollowRepository,
    ToggleOutcome,
    ToggleResult,
)
from app.schemas.follow import FollowersPage, FollowingPage, FollowUser
from app.schemas.like import LikeEntry, LikeListData, LikeUser
from app.services.guard import OwnershipGuard
from app.services.pagination import paginate
from app.utils.helpers import display_datetime

logger = get_logger(__name__)


@dataclass(frozen=True)
class LikeToggle:
    """A like toggle together with the target's like count afterwards."""

    result: ToggleResult
    total_likes: int


def _like_entries(rows: Sequence[tuple[BlogLikeDB | CommentLikeDB, str]]) -> list[LikeEntry]:
    return [
        LikeEntry(created_at=display_datetime(like.created_at), user=LikeUser(username=username))
        for like, username in rows
    ]


class EngagementService:
    """
    Follow graph and like operations for one request.

    Every mutating operation runs its guard checks first, then a single
    toggle; both happen inside the request transaction owned by the
    session dependency.
    """

    def __init__(
        self,
        guard: OwnershipGuard,
        follows: FollowRepository,
        blog_likes: BlogLikeRepository,
        comment_likes: CommentLikeRepository,
        *,
        follow_page_size: int = settings.FOLLOW_PAGE_SIZE,
    ) -> None:
        self.guard = guard
        self.follows = follows
        self.blog_likes = blog_likes
        self.comment_likes = comment_likes
        self.follow_page_size = follow_page_size
        self._edges: dict[EdgeKind, EdgeRepository] = {
            EdgeKind.FOLLOW: follows,
            EdgeKind.BLOG_LIKE: blog_likes,
            EdgeKind.COMMENT_LIKE: comment_likes,
        }

    async def toggle_edge(self, kind: EdgeKind, key: EdgeKey) -> ToggleResult:
        """
        Flip one edge of the given kind.

        Args:
            kind: Which edge table the key belongs to
            key: Unique edge key, e.g. ``(follower_id, following_id)``

        Returns:
            ToggleResult: The state the edge ended up in
        """
        result = await self._edges[kind].toggle(key)
        if result.outcome is ToggleOutcome.ALREADY_EXISTS:
            logger.warning("Edge insert lost a race", kind=str(kind), key=list(key))
        else:
            logger.info("Edge toggled", kind=str(kind), key=list(key), outcome=str(result.outcome))
        return result

    async def toggle_follow(self, caller: CallerContext, target_id: int) -> ToggleResult:
        """
        Follow ``target_id``, or unfollow if already following.

        Raises:
            SelfFollowError: If the caller targets themselves
            UserNotFoundError: If either user does not exist
        """
        self.guard.require_not_self(caller, target_id)
        await self.guard.require_users(caller.user_id, target_id)
        return await self.toggle_edge(EdgeKind.FOLLOW, (caller.user_id, target_id))

    async def toggle_blog_like(self, caller: CallerContext, blog_id: int) -> LikeToggle:
        """
        Like a blog, or remove the caller's like.

        Raises:
            BlogNotFoundError: If the blog is missing or out of reach
        """
        await self.guard.require_blog_for_engagement(caller, blog_id)
        result = await self.toggle_edge(EdgeKind.BLOG_LIKE, (caller.user_id, blog_id))
        total = await self.blog_likes.count_matching(blog_id=blog_id)
        return LikeToggle(result=result, total_likes=total)

    async def toggle_comment_like(
        self,
        caller: CallerContext,
        blog_id: int,
        comment_id: int,
    ) -> LikeToggle:
        """
        Like a comment, or remove the caller's like.

        The comment must belong to ``blog_id``; in own-content mode it must
        also have been written by the caller.

        Raises:
            BlogNotFoundError: If the blog is missing or out of reach
            CommentNotFoundError: If the comment is missing or on another blog
        """
        await self.guard.require_blog_for_engagement(caller, blog_id)
        await self.guard.require_comment(
            caller,
            blog_id,
            comment_id,
            must_own=self.guard.own_content_only,
        )
        result = await self.toggle_edge(EdgeKind.COMMENT_LIKE, (caller.user_id, comment_id))
        total = await self.comment_likes.count_matching(comment_id=comment_id)
        return LikeToggle(result=result, total_likes=total)

    async def list_followers(self, caller: CallerContext, page: int) -> FollowersPage:
        """
        Get one page of the caller's followers, in the order they followed.

        Raises:
            PaginationError: If there are no followers or ``page`` is out of range
        """
        total = await self.follows.count_matching(following_id=caller.user_id)
        window = paginate(
            page,
            total,
            page_size=self.follow_page_size,
            empty_message="No followers found",
        )
        users = await self.follows.list_followers_page(caller.user_id, window.skip, window.limit)
        return FollowersPage(
            followers=[FollowUser.model_validate(user) for user in users],
            total_pages=window.total_pages,
            current_page=window.current_page,
            has_next_page=window.has_next_page,
            has_previous_page=window.has_previous_page,
        )

    async def list_following(self, caller: CallerContext, page: int) -> FollowingPage:
        """
        Get one page of the users the caller follows.

        Raises:
            PaginationError: If the caller follows nobody or ``page`` is out of range
        """
        total = await self.follows.count_matching(follower_id=caller.user_id)
        window = paginate(
            page,
            total,
            page_size=self.follow_page_size,
            empty_message="You are not following anyone",
        )
        users = await self.follows.list_following_page(caller.user_id, window.skip, window.limit)
        return FollowingPage(
            following=[FollowUser.model_validate(user) for user in users],
            total_pages=window.total_pages,
            current_page=window.current_page,
            has_next_page=window.has_next_page,
            has_previous_page=window.has_previous_page,
        )

    async def list_blog_likes(self, caller: CallerContext, blog_id: int) -> LikeListData:
        """Get everyone who liked a blog, with the time of each like."""
        await self.guard.require_blog_for_engagement(caller, blog_id)
        rows = await self.blog_likes.list_with_users(blog_id)
        return LikeListData(likes=_like_entries(rows), total_likes=len(rows))

    async def list_comment_likes(
        self,
        caller: CallerContext,
        blog_id: int,
        comment_id: int,
    ) -> LikeListData:
        """Get everyone who liked a comment, scoped to the comment's blog."""
        await self.guard.require_blog_for_engagement(caller, blog_id)
        await self.guard.require_comment(
            caller,
            blog_id,
            comment_id,
            must_own=self.guard.own_content_only,
        )
        rows = await self.comment_likes.list_with_users(comment_id)
        return LikeListData(likes=_like_entries(rows), total_likes=len(rows))
