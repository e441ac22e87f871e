"""Tests for the follow and like routes."""

from unittest.mock import AsyncMock, MagicMock

import pytest
from httpx import AsyncClient

from app.context import CallerContext
from app.errors import BlogNotFoundError, PaginationError, SelfFollowError
from app.repositories import EdgeKind, ToggleOutcome, ToggleResult
from app.schemas.follow import FollowersPage, FollowUser
from app.schemas.like import LikeEntry, LikeListData, LikeUser
from app.services import LikeToggle


class TestFollowRoutes:
    """Tests for /user/follow endpoints."""

    @pytest.mark.asyncio
    async def test_follow(
        self,
        client: AsyncClient,
        auth_headers: dict[str, str],
        engagement_service: MagicMock,
    ) -> None:
        engagement_service.toggle_follow = AsyncMock(
            return_value=ToggleResult(EdgeKind.FOLLOW, (1, 2), ToggleOutcome.ADDED),
        )

        response = await client.post("/user/follow/2", headers=auth_headers)

        assert response.status_code == 200
        assert response.json() == {
            "success": True,
            "data": {"action": "follow", "followingId": 2},
            "message": "You're now following this author",
        }
        engagement_service.toggle_follow.assert_awaited_once_with(CallerContext(user_id=1), 2)

    @pytest.mark.asyncio
    async def test_unfollow(
        self,
        client: AsyncClient,
        auth_headers: dict[str, str],
        engagement_service: MagicMock,
    ) -> None:
        engagement_service.toggle_follow = AsyncMock(
            return_value=ToggleResult(EdgeKind.FOLLOW, (1, 2), ToggleOutcome.REMOVED),
        )

        response = await client.post("/user/follow/2", headers=auth_headers)

        assert response.json()["data"] == {"action": "unfollow", "unfollowedId": 2}
        assert response.json()["message"] == "Unfollowed"

    @pytest.mark.asyncio
    async def test_follow_lost_race_is_success(
        self,
        client: AsyncClient,
        auth_headers: dict[str, str],
        engagement_service: MagicMock,
    ) -> None:
        engagement_service.toggle_follow = AsyncMock(
            return_value=ToggleResult(EdgeKind.FOLLOW, (1, 2), ToggleOutcome.ALREADY_EXISTS),
        )

        response = await client.post("/user/follow/2", headers=auth_headers)

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["data"] == {"action": "follow", "followingId": 2}
        assert body["message"] == "Already following this user"

    @pytest.mark.asyncio
    async def test_self_follow(
        self,
        client: AsyncClient,
        auth_headers: dict[str, str],
        engagement_service: MagicMock,
    ) -> None:
        engagement_service.toggle_follow = AsyncMock(side_effect=SelfFollowError())

        response = await client.post("/user/follow/1", headers=auth_headers)

        assert response.status_code == 400
        assert response.json() == {
            "success": False,
            "data": None,
            "message": "You cannot follow yourself",
        }

    @pytest.mark.asyncio
    @pytest.mark.parametrize("following_id", ["abc", "0"])
    async def test_invalid_user_id(
        self,
        client: AsyncClient,
        auth_headers: dict[str, str],
        engagement_service: MagicMock,
        following_id: str,
    ) -> None:
        engagement_service.toggle_follow = AsyncMock()

        response = await client.post(f"/user/follow/{following_id}", headers=auth_headers)

        assert response.status_code == 400
        body = response.json()
        assert body["success"] is False
        assert body["message"].startswith("Following Id : ")
        engagement_service.toggle_follow.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_followers_page(
        self,
        client: AsyncClient,
        auth_headers: dict[str, str],
        engagement_service: MagicMock,
    ) -> None:
        engagement_service.list_followers = AsyncMock(
            return_value=FollowersPage(
                followers=[FollowUser(id=2, username="bob")],
                total_pages=1,
                current_page=1,
                has_next_page=False,
                has_previous_page=False,
            ),
        )

        response = await client.get("/user/follow/followers/1", headers=auth_headers)

        assert response.status_code == 200
        assert response.json() == {
            "success": True,
            "data": {
                "followers": [{"id": 2, "username": "bob"}],
                "totalPages": 1,
                "currentPage": 1,
                "hasNextPage": False,
                "hasPreviousPage": False,
            },
            "message": "Your Followers",
        }

    @pytest.mark.asyncio
    async def test_following_empty(
        self,
        client: AsyncClient,
        auth_headers: dict[str, str],
        engagement_service: MagicMock,
    ) -> None:
        engagement_service.list_following = AsyncMock(
            side_effect=PaginationError("You are not following anyone"),
        )

        response = await client.get("/user/follow/following/1", headers=auth_headers)

        assert response.status_code == 400
        assert response.json()["message"] == "You are not following anyone"


class TestLikeRoutes:
    """Tests for /blog/like endpoints."""

    @pytest.mark.asyncio
    async def test_like_blog_created(
        self,
        client: AsyncClient,
        auth_headers: dict[str, str],
        engagement_service: MagicMock,
    ) -> None:
        engagement_service.toggle_blog_like = AsyncMock(
            return_value=LikeToggle(
                result=ToggleResult(EdgeKind.BLOG_LIKE, (1, 7), ToggleOutcome.ADDED),
                total_likes=3,
            ),
        )

        response = await client.post("/blog/like/blogLikes/7", headers=auth_headers)

        assert response.status_code == 201
        assert response.json() == {
            "success": True,
            "data": {"action": "like", "blogId": 7, "totalLikes": 3},
            "message": "You've Liked this Blog",
        }

    @pytest.mark.asyncio
    async def test_unlike_blog(
        self,
        client: AsyncClient,
        auth_headers: dict[str, str],
        engagement_service: MagicMock,
    ) -> None:
        engagement_service.toggle_blog_like = AsyncMock(
            return_value=LikeToggle(
                result=ToggleResult(EdgeKind.BLOG_LIKE, (1, 7), ToggleOutcome.REMOVED),
                total_likes=0,
            ),
        )

        response = await client.post("/blog/like/blogLikes/7", headers=auth_headers)

        assert response.status_code == 200
        assert response.json()["data"] == {"action": "unlike", "blogId": 7, "totalLikes": 0}
        assert response.json()["message"] == "Like Removed"

    @pytest.mark.asyncio
    async def test_already_liked_is_ok(
        self,
        client: AsyncClient,
        auth_headers: dict[str, str],
        engagement_service: MagicMock,
    ) -> None:
        engagement_service.toggle_blog_like = AsyncMock(
            return_value=LikeToggle(
                result=ToggleResult(EdgeKind.BLOG_LIKE, (1, 7), ToggleOutcome.ALREADY_EXISTS),
                total_likes=1,
            ),
        )

        response = await client.post("/blog/like/blogLikes/7", headers=auth_headers)

        assert response.status_code == 200
        assert response.json()["data"]["action"] == "like"
        assert response.json()["message"] == "You've already liked this Blog"

    @pytest.mark.asyncio
    async def test_like_comment(
        self,
        client: AsyncClient,
        auth_headers: dict[str, str],
        engagement_service: MagicMock,
    ) -> None:
        engagement_service.toggle_comment_like = AsyncMock(
            return_value=LikeToggle(
                result=ToggleResult(EdgeKind.COMMENT_LIKE, (1, 4), ToggleOutcome.ADDED),
                total_likes=1,
            ),
        )

        response = await client.post("/blog/like/commentLikes/7/4", headers=auth_headers)

        assert response.status_code == 201
        assert response.json()["data"] == {
            "action": "like",
            "blogId": 7,
            "commentId": 4,
            "totalLikes": 1,
        }
        engagement_service.toggle_comment_like.assert_awaited_once_with(
            CallerContext(user_id=1),
            7,
            4,
        )

    @pytest.mark.asyncio
    async def test_like_missing_blog(
        self,
        client: AsyncClient,
        auth_headers: dict[str, str],
        engagement_service: MagicMock,
    ) -> None:
        engagement_service.toggle_blog_like = AsyncMock(side_effect=BlogNotFoundError())

        response = await client.post("/blog/like/blogLikes/99", headers=auth_headers)

        assert response.status_code == 404
        assert response.json() == {"success": False, "data": None, "message": "Blog Not Found"}

    @pytest.mark.asyncio
    async def test_list_blog_likes(
        self,
        client: AsyncClient,
        auth_headers: dict[str, str],
        engagement_service: MagicMock,
    ) -> None:
        engagement_service.list_blog_likes = AsyncMock(
            return_value=LikeListData(
                likes=[
                    LikeEntry(created_at="Mon Jan 05 2026 14:03", user=LikeUser(username="bob")),
                ],
                total_likes=1,
            ),
        )

        response = await client.get("/blog/like/blogLikes/7", headers=auth_headers)

        assert response.status_code == 200
        assert response.json() == {
            "success": True,
            "data": {
                "likes": [{"createdAt": "Mon Jan 05 2026 14:03", "user": {"username": "bob"}}],
                "totalLikes": 1,
            },
            "message": "Blog Likes",
        }


class TestAuthentication:
    """Every engagement endpoint needs a verified bearer token."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("method", "path"),
        [
            ("POST", "/user/follow/2"),
            ("GET", "/user/follow/followers/1"),
            ("POST", "/blog/like/blogLikes/7"),
            ("GET", "/blog/like/commentLikes/7/4"),
            ("POST", "/blog/comment/postComment/7"),
            ("GET", "/blog/bulk/1"),
            ("GET", "/blog/7"),
        ],
    )
    async def test_missing_token(
        self,
        client: AsyncClient,
        engagement_service: MagicMock,
        method: str,
        path: str,
    ) -> None:
        response = await client.request(method, path)

        assert response.status_code == 401
        assert response.json() == {"success": False, "data": None, "message": "Unauthorized User"}

    @pytest.mark.asyncio
    async def test_forged_token(self, client: AsyncClient, engagement_service: MagicMock) -> None:
        response = await client.post(
            "/user/follow/2",
            headers={"Authorization": "Bearer not.a.token"},
        )

        assert response.status_code == 401
        assert response.json()["message"] == "Unauthorized User"
