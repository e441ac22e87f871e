from app.schemas.auth import TokenData
from app.schemas.blog import (
    BlogAuthor,
    BlogComment,
    BlogDetail,
    BlogDetailData,
    BlogDrafts,
    BlogListItem,
    BlogPage,
    BlogSearchItem,
    BlogSearchResult,
    LikeBrief,
)
from app.schemas.comment import (
    CommentBrief,
    CommentCreate,
    CommentCreated,
    CommentDeleted,
    CommentList,
)
from app.schemas.follow import (
    FollowersPage,
    FollowingPage,
    FollowPageMeta,
    FollowToggleData,
    FollowUser,
)
from app.schemas.health import HealthCheckResponse
from app.schemas.like import LikeEntry, LikeListData, LikeToggleData, LikeUser
from app.schemas.response import ApiResponse, error_responses

__all__ = [
    "ApiResponse",
    "BlogAuthor",
    "BlogComment",
    "BlogDetail",
    "BlogDetailData",
    "BlogDrafts",
    "BlogListItem",
    "BlogPage",
    "BlogSearchItem",
    "BlogSearchResult",
    "CommentBrief",
    "CommentCreate",
    "CommentCreated",
    "CommentDeleted",
    "CommentList",
    "FollowPageMeta",
    "FollowToggleData",
    "FollowUser",
    "FollowersPage",
    "FollowingPage",
    "HealthCheckResponse",
    "LikeBrief",
    "LikeEntry",
    "LikeListData",
    "LikeToggleData",
    "LikeUser",
    "TokenData",
    "error_responses",
]
