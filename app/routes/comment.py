# app/routes/comment.py

"""
Comment Routes.

Post, list and delete comments. Comment ids are only valid under the blog
they belong to.
"""

from logging import getLogger
from typing import Annotated

from fastapi import APIRouter, Body, Request
from fastapi.responses import ORJSONResponse
from starlette.responses import Response
from starlette.status import HTTP_201_CREATED

from app.configs import file_logger
from app.dependencies import BlogIdPath, CallerDep, CommentIdPath, CommentServiceDep
from app.managers import limiter
from app.schemas.comment import CommentCreate, CommentCreated, CommentDeleted, CommentList
from app.schemas.response import ApiResponse, error_responses

router = APIRouter(prefix="/blog/comment", tags=["💬 Comments"])

logger = file_logger(getLogger(__name__))


@router.post(
    "/postComment/{blog_id}",
    response_class=ORJSONResponse,
    response_model=ApiResponse[CommentCreated],
    status_code=HTTP_201_CREATED,
    summary="Comment on a blog",
    responses=error_responses(400, 404),
    operation_id="comment_post",
)
@limiter.limit("20/minute")
async def post_comment(
    request: Request,
    response: Response,
    blog_id: BlogIdPath,
    body: Annotated[
        CommentCreate,
        Body(
            examples={
                "basic": {
                    "summary": "Plain comment",
                    "value": {"comment": "Offsets drift, keyset pagination does not."},
                },
            },
        ),
    ],
    caller: CallerDep,
    comments: CommentServiceDep,
) -> ApiResponse[CommentCreated]:
    """
    Post a comment on a published blog.

    Parameters
    ----------
    request : Request
        Current request context (used by the rate limiter).
    response : Response
        Response object.
    blog_id : int
        Blog to comment on.
    body : CommentCreate
        Comment text.
    caller : CallerContext
        Authenticated caller.
    comments : CommentService
        Comment service bound to the request session.

    Returns
    -------
    ApiResponse[CommentCreated]
        Id of the new comment.

    Raises
    ------
    BlogNotFoundError
        ``Invalid Blog ID`` if the blog cannot be commented on (404).
    """
    created = await comments.post_comment(caller, blog_id, body.comment)
    return ApiResponse(data=created, message="Comment added successfully")


@router.get(
    "/getComments/{blog_id}",
    response_class=ORJSONResponse,
    response_model=ApiResponse[CommentList],
    summary="List the comments of a blog",
    responses=error_responses(400, 404),
    operation_id="comment_list",
)
@limiter.limit("60/minute")
async def get_comments(
    request: Request,
    response: Response,
    blog_id: BlogIdPath,
    caller: CallerDep,
    comments: CommentServiceDep,
) -> ApiResponse[CommentList]:
    listing = await comments.list_comments(caller, blog_id)
    message = "All Comments" if listing.comments else "No Comments under this Blog"
    return ApiResponse(data=listing, message=message)


@router.delete(
    "/deleteComment/{blog_id}/{comment_id}",
    response_class=ORJSONResponse,
    response_model=ApiResponse[CommentDeleted],
    summary="Delete one of your comments",
    responses=error_responses(400, 404),
    operation_id="comment_delete",
)
@limiter.limit("20/minute")
async def delete_comment(
    request: Request,
    response: Response,
    blog_id: BlogIdPath,
    comment_id: CommentIdPath,
    caller: CallerDep,
    comments: CommentServiceDep,
) -> ApiResponse[CommentDeleted]:
    """
    Delete a comment the caller wrote on ``blog_id``.

    Raises
    ------
    BlogNotFoundError
        If the blog does not exist (404).
    CommentNotFoundError
        If the comment is missing, on another blog, or someone else's (404).
    """
    deleted = await comments.delete_comment(caller, blog_id, comment_id)
    return ApiResponse(data=deleted, message="Comment Deleted Successfully")
