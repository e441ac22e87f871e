# app/routes/like.py

"""
Like Routes.

Like toggles and like listings for blogs and for comments. A comment is
always addressed through the blog it belongs to.

Summary
-------
Endpoints include:
  - Like / unlike a blog (toggle)
  - Like / unlike a comment (toggle)
  - List the likes of a blog
  - List the likes of a comment
"""

from logging import getLogger

from fastapi import APIRouter, Request
from fastapi.responses import ORJSONResponse
from starlette.responses import Response
from starlette.status import HTTP_200_OK, HTTP_201_CREATED

from app.configs import file_logger
from app.dependencies import BlogIdPath, CallerDep, CommentIdPath, EngagementDep
from app.managers import limiter
from app.repositories import ToggleOutcome
from app.schemas.like import LikeListData, LikeToggleData
from app.schemas.response import ApiResponse, error_responses
from app.services import LikeToggle

router = APIRouter(prefix="/blog/like", tags=["❤️ Likes"])

logger = file_logger(getLogger(__name__))

BLOG_LIKE_MESSAGES = {
    ToggleOutcome.ADDED: "You've Liked this Blog",
    ToggleOutcome.REMOVED: "Like Removed",
    ToggleOutcome.ALREADY_EXISTS: "You've already liked this Blog",
}
COMMENT_LIKE_MESSAGES = {
    ToggleOutcome.ADDED: "You've Liked this Comment",
    ToggleOutcome.REMOVED: "Like Removed",
    ToggleOutcome.ALREADY_EXISTS: "You've already liked this Comment",
}


def toggle_response(
    response: Response,
    toggle: LikeToggle,
    messages: dict[ToggleOutcome, str],
    blog_id: int,
    comment_id: int | None = None,
) -> ApiResponse[LikeToggleData]:
    """
    Build the envelope for a like toggle.

    A new like answers ``201``; removing a like, or finding it already in
    place, answers ``200``.
    """
    outcome = toggle.result.outcome
    response.status_code = HTTP_201_CREATED if outcome is ToggleOutcome.ADDED else HTTP_200_OK
    return ApiResponse(
        data=LikeToggleData(
            action="like" if toggle.result.present else "unlike",
            blog_id=blog_id,
            comment_id=comment_id,
            total_likes=toggle.total_likes,
        ),
        message=messages[outcome],
    )


@router.post(
    "/blogLikes/{blog_id}",
    response_class=ORJSONResponse,
    response_model=ApiResponse[LikeToggleData],
    response_model_exclude_none=True,
    status_code=HTTP_201_CREATED,
    summary="Like or unlike a blog",
    responses=error_responses(400, 404),
    operation_id="like_blog_toggle",
)
@limiter.limit("30/minute")
async def toggle_blog_like(
    request: Request,
    response: Response,
    blog_id: BlogIdPath,
    caller: CallerDep,
    engagement: EngagementDep,
) -> ApiResponse[LikeToggleData]:
    """
    Toggle the caller's like on a blog.

    Parameters
    ----------
    request : Request
        Current request context (used by the rate limiter).
    response : Response
        Response object; its status is set from the toggle outcome.
    blog_id : int
        Blog to like or unlike.
    caller : CallerContext
        Authenticated caller.
    engagement : EngagementService
        Engagement service bound to the request session.

    Returns
    -------
    ApiResponse[LikeToggleData]
        Action taken and the blog's like count afterwards.

    Raises
    ------
    BlogNotFoundError
        If the blog is missing or out of reach (404).
    """
    toggle = await engagement.toggle_blog_like(caller, blog_id)
    return toggle_response(response, toggle, BLOG_LIKE_MESSAGES, blog_id)


@router.post(
    "/commentLikes/{blog_id}/{comment_id}",
    response_class=ORJSONResponse,
    response_model=ApiResponse[LikeToggleData],
    response_model_exclude_none=True,
    status_code=HTTP_201_CREATED,
    summary="Like or unlike a comment",
    responses=error_responses(400, 404),
    operation_id="like_comment_toggle",
)
@limiter.limit("30/minute")
async def toggle_comment_like(
    request: Request,
    response: Response,
    blog_id: BlogIdPath,
    comment_id: CommentIdPath,
    caller: CallerDep,
    engagement: EngagementDep,
) -> ApiResponse[LikeToggleData]:
    """
    Toggle the caller's like on a comment of ``blog_id``.

    Raises
    ------
    BlogNotFoundError
        If the blog is missing or out of reach (404).
    CommentNotFoundError
        If the comment is missing or belongs to another blog (404).
    """
    toggle = await engagement.toggle_comment_like(caller, blog_id, comment_id)
    return toggle_response(response, toggle, COMMENT_LIKE_MESSAGES, blog_id, comment_id)


@router.get(
    "/blogLikes/{blog_id}",
    response_class=ORJSONResponse,
    response_model=ApiResponse[LikeListData],
    summary="List the likes of a blog",
    responses=error_responses(400, 404),
    operation_id="like_blog_list",
)
@limiter.limit("60/minute")
async def list_blog_likes(
    request: Request,
    response: Response,
    blog_id: BlogIdPath,
    caller: CallerDep,
    engagement: EngagementDep,
) -> ApiResponse[LikeListData]:
    return ApiResponse(
        data=await engagement.list_blog_likes(caller, blog_id),
        message="Blog Likes",
    )


@router.get(
    "/commentLikes/{blog_id}/{comment_id}",
    response_class=ORJSONResponse,
    response_model=ApiResponse[LikeListData],
    summary="List the likes of a comment",
    responses=error_responses(400, 404),
    operation_id="like_comment_list",
)
@limiter.limit("60/minute")
async def list_comment_likes(
    request: Request,
    response: Response,
    blog_id: BlogIdPath,
    comment_id: CommentIdPath,
    caller: CallerDep,
    engagement: EngagementDep,
) -> ApiResponse[LikeListData]:
    return ApiResponse(
        data=await engagement.list_comment_likes(caller, blog_id, comment_id),
        message="Comment Likes",
    )
