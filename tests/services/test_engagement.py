"""Tests for app/services/engagement.py module."""

from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlmodel.ext.asyncio.session import AsyncSession

from app.context import CallerContext
from app.errors import (
    BlogNotFoundError,
    CommentNotFoundError,
    PaginationError,
    SelfFollowError,
    UserNotFoundError,
)
from app.models import CommentDB
from app.repositories import CommentRepository, EdgeKind, FollowRepository, ToggleOutcome
from app.services import EngagementService, OwnershipGuard


class TestToggleFollow:
    """Tests for follow toggles and follow listings."""

    @pytest.mark.asyncio
    async def test_follow_unfollow_scenario(self, engagement: EngagementService, world) -> None:
        alice = world.caller(world.alice)
        bob = world.caller(world.bob)

        followed = await engagement.toggle_follow(alice, world.bob.id)
        assert followed.outcome is ToggleOutcome.ADDED

        following = await engagement.list_following(alice, 1)
        assert [user.username for user in following.following] == ["bob"]
        assert following.total_pages == 1
        assert following.has_next_page is False

        followers = await engagement.list_followers(bob, 1)
        assert [user.id for user in followers.followers] == [world.alice.id]

        unfollowed = await engagement.toggle_follow(alice, world.bob.id)
        assert unfollowed.outcome is ToggleOutcome.REMOVED

        with pytest.raises(PaginationError, match="You are not following anyone"):
            await engagement.list_following(alice, 1)
        with pytest.raises(PaginationError, match="No followers found"):
            await engagement.list_followers(bob, 1)

    @pytest.mark.asyncio
    async def test_self_follow_rejected_before_store_access(self) -> None:
        users = MagicMock()
        users.get_many = AsyncMock()
        follows = MagicMock()
        follows.toggle = AsyncMock()
        guard = OwnershipGuard(users, MagicMock(), MagicMock())
        engagement = EngagementService(guard, follows, MagicMock(), MagicMock())

        with pytest.raises(SelfFollowError) as exc_info:
            await engagement.toggle_follow(CallerContext(user_id=3), 3)

        assert exc_info.value.detail == "You cannot follow yourself"
        users.get_many.assert_not_awaited()
        follows.toggle.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_follow_missing_user(
        self,
        session: AsyncSession,
        engagement: EngagementService,
        world,
    ) -> None:
        with pytest.raises(UserNotFoundError, match="User Not Found"):
            await engagement.toggle_follow(world.caller(world.alice), 999)

        assert await FollowRepository(session).count_matching() == 0

    @pytest.mark.asyncio
    async def test_follower_page_bounds(
        self,
        session: AsyncSession,
        engagement: EngagementService,
        world,
    ) -> None:
        follows = FollowRepository(session)
        users = [world.bob, world.carol]
        for user in users:
            await follows.toggle((user.id, world.alice.id))
        alice = world.caller(world.alice)

        page = await engagement.list_followers(alice, 1)
        assert page.total_pages == 1
        assert page.current_page == 1
        assert page.has_previous_page is False

        with pytest.raises(PaginationError, match="Final Page is 1"):
            await engagement.list_followers(alice, 2)
        with pytest.raises(PaginationError, match="Starting Page is 1"):
            await engagement.list_followers(alice, 0)

    @pytest.mark.asyncio
    async def test_toggle_edge_passes_lost_race_through(self) -> None:
        follows = MagicMock()
        follows.toggle = AsyncMock(
            return_value=MagicMock(outcome=ToggleOutcome.ALREADY_EXISTS),
        )
        engagement = EngagementService(MagicMock(), follows, MagicMock(), MagicMock())

        result = await engagement.toggle_edge(EdgeKind.FOLLOW, (1, 2))

        assert result.outcome is ToggleOutcome.ALREADY_EXISTS
        follows.toggle.assert_awaited_once_with((1, 2))


class TestToggleBlogLike:
    """Tests for blog like toggles."""

    @pytest.mark.asyncio
    async def test_like_own_blog_then_unlike(self, engagement: EngagementService, world) -> None:
        alice = world.caller(world.alice)

        liked = await engagement.toggle_blog_like(alice, world.alice_post.id)
        assert liked.result.outcome is ToggleOutcome.ADDED
        assert liked.total_likes == 1

        unliked = await engagement.toggle_blog_like(alice, world.alice_post.id)
        assert unliked.result.outcome is ToggleOutcome.REMOVED
        assert unliked.total_likes == 0

    @pytest.mark.asyncio
    async def test_other_authors_blog_is_not_found(
        self,
        engagement: EngagementService,
        world,
    ) -> None:
        """With own-content mode on, someone else's blog looks missing."""
        with pytest.raises(BlogNotFoundError, match="Blog Not Found"):
            await engagement.toggle_blog_like(world.caller(world.bob), world.alice_post.id)

    @pytest.mark.asyncio
    async def test_missing_blog(self, engagement: EngagementService, world) -> None:
        with pytest.raises(BlogNotFoundError):
            await engagement.toggle_blog_like(world.caller(world.alice), 999)

    @pytest.mark.asyncio
    async def test_open_mode_allows_published_blogs_of_others(
        self,
        open_engagement: EngagementService,
        world,
    ) -> None:
        bob = world.caller(world.bob)

        liked = await open_engagement.toggle_blog_like(bob, world.alice_post.id)
        assert liked.result.outcome is ToggleOutcome.ADDED

        with pytest.raises(BlogNotFoundError):
            await open_engagement.toggle_blog_like(bob, world.alice_draft.id)

    @pytest.mark.asyncio
    async def test_list_blog_likes(self, open_engagement: EngagementService, world) -> None:
        await open_engagement.toggle_blog_like(world.caller(world.bob), world.alice_post.id)
        await open_engagement.toggle_blog_like(world.caller(world.carol), world.alice_post.id)

        listing = await open_engagement.list_blog_likes(
            world.caller(world.alice),
            world.alice_post.id,
        )

        assert listing.total_likes == 2
        assert [entry.user.username for entry in listing.likes] == ["bob", "carol"]
        assert listing.likes[0].created_at


class TestToggleCommentLike:
    """Tests for comment like toggles."""

    @pytest.mark.asyncio
    async def test_like_own_comment_then_unlike(
        self,
        engagement: EngagementService,
        world,
        alice_comment: CommentDB,
    ) -> None:
        alice = world.caller(world.alice)

        liked = await engagement.toggle_comment_like(alice, world.alice_post.id, alice_comment.id)
        assert liked.result.kind is EdgeKind.COMMENT_LIKE
        assert liked.result.outcome is ToggleOutcome.ADDED
        assert liked.total_likes == 1

        listing = await engagement.list_comment_likes(
            alice,
            world.alice_post.id,
            alice_comment.id,
        )
        assert [entry.user.username for entry in listing.likes] == ["alice"]

        unliked = await engagement.toggle_comment_like(
            alice,
            world.alice_post.id,
            alice_comment.id,
        )
        assert unliked.result.outcome is ToggleOutcome.REMOVED
        assert unliked.total_likes == 0

    @pytest.mark.asyncio
    async def test_comment_addressed_through_another_blog(
        self,
        engagement: EngagementService,
        world,
        alice_comment: CommentDB,
    ) -> None:
        """A comment id is only valid under the blog it belongs to."""
        with pytest.raises(CommentNotFoundError, match="Comment Not Found"):
            await engagement.toggle_comment_like(
                world.caller(world.alice),
                world.alice_draft.id,
                alice_comment.id,
            )

    @pytest.mark.asyncio
    async def test_open_mode_allows_liking_others_comments(
        self,
        open_engagement: EngagementService,
        world,
        alice_comment: CommentDB,
    ) -> None:
        liked = await open_engagement.toggle_comment_like(
            world.caller(world.bob),
            world.alice_post.id,
            alice_comment.id,
        )
        assert liked.result.outcome is ToggleOutcome.ADDED
        assert liked.total_likes == 1

    @pytest.mark.asyncio
    async def test_own_mode_rejects_others_comments(
        self,
        session: AsyncSession,
        engagement: EngagementService,
        world,
        alice_comment: CommentDB,
    ) -> None:
        """In own-content mode the comment must also be the caller's."""
        bob_comment = await CommentRepository(session).create_comment(
            world.alice_post.id,
            world.bob.id,
            "Nice post",
        )

        with pytest.raises(CommentNotFoundError):
            await engagement.toggle_comment_like(
                world.caller(world.alice),
                world.alice_post.id,
                bob_comment.id,
            )
