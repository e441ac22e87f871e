# app/routes/blog.py

"""
Blog Routes.

Read endpoints for blogs. Writing blogs belongs to the authoring service;
here blogs are listed, searched and fetched.

Summary
-------
Endpoints include:
  - List published blogs, ten per page, newest first
  - Search published blogs by title, content or tag
  - List the caller's drafts
  - Get one blog with its comments

Rate Limiting
-------------
All endpoints define explicit limits and include `429` response examples.
"""

from logging import getLogger
from typing import Annotated

from fastapi import APIRouter, Path, Request
from fastapi.responses import ORJSONResponse
from starlette.responses import Response

from app.configs import file_logger
from app.configs.settings import MAX_SEARCH_QUERY_LENGTH
from app.dependencies import BlogIdPath, BlogServiceDep, CallerDep, PagePath
from app.managers import limiter
from app.schemas.blog import BlogDetailData, BlogDrafts, BlogPage, BlogSearchResult
from app.schemas.response import ApiResponse, error_responses

router = APIRouter(prefix="/blog", tags=["📝 Blogs"])

logger = file_logger(getLogger(__name__))


@router.get(
    "/bulk/{page}",
    response_class=ORJSONResponse,
    response_model=ApiResponse[BlogPage],
    summary="List published blogs",
    description="Published blogs with author, comments and likes, ten per page, newest first.",
    responses=error_responses(400),
    operation_id="blogs_bulk",
)
@limiter.limit("60/minute")
async def list_blogs(
    request: Request,
    response: Response,
    page: PagePath,
    caller: CallerDep,
    blogs: BlogServiceDep,
) -> ApiResponse[BlogPage]:
    """
    Get one page of published blogs.

    Parameters
    ----------
    request : Request
        Current request context (used by the rate limiter).
    response : Response
        Response object.
    page : int
        Page number, starting at 1.
    caller : CallerContext
        Authenticated caller.
    blogs : BlogService
        Blog service bound to the request session.

    Returns
    -------
    ApiResponse[BlogPage]
        Blogs of the page with navigation metadata.

    Raises
    ------
    PaginationError
        ``No Blogs Found``, ``Starting Page Number is 1`` or
        ``Final Page Number is N`` (400).
    """
    return ApiResponse(data=await blogs.list_published(page), message="Multiple Blogs")


@router.get(
    "/search/{query}",
    response_class=ORJSONResponse,
    response_model=ApiResponse[BlogSearchResult],
    summary="Search published blogs",
    description="Case-insensitive substring match on title, content and tag.",
    responses=error_responses(400),
    operation_id="blogs_search",
)
@limiter.limit("30/minute")
async def search_blogs(
    request: Request,
    response: Response,
    query: Annotated[
        str,
        Path(min_length=1, max_length=MAX_SEARCH_QUERY_LENGTH, description="Search text"),
    ],
    caller: CallerDep,
    blogs: BlogServiceDep,
) -> ApiResponse[BlogSearchResult]:
    return ApiResponse(data=await blogs.search(query), message="Filtered Blogs Successfully")


@router.get(
    "/drafts",
    response_class=ORJSONResponse,
    response_model=ApiResponse[BlogDrafts],
    summary="List my drafts",
    description="The caller's unpublished blogs, newest first.",
    responses=error_responses(),
    operation_id="blogs_drafts",
)
@limiter.limit("60/minute")
async def list_drafts(
    request: Request,
    response: Response,
    caller: CallerDep,
    blogs: BlogServiceDep,
) -> ApiResponse[BlogDrafts]:
    """
    Get the caller's drafts.

    Declared before ``/{blog_id}`` so the literal path wins.

    Returns
    -------
    ApiResponse[BlogDrafts]
        Drafts with ``Your Drafts``, or an empty list with ``No Drafts``.
    """
    data = await blogs.list_drafts(caller)
    return ApiResponse(data=data, message="Your Drafts" if data.drafts else "No Drafts")


@router.get(
    "/{blog_id}",
    response_class=ORJSONResponse,
    response_model=ApiResponse[BlogDetailData],
    summary="Get a blog",
    description="A published blog, or one of the caller's drafts, with its comments.",
    responses=error_responses(400, 404),
    operation_id="blogs_get",
)
@limiter.limit("60/minute")
async def get_blog(
    request: Request,
    response: Response,
    blog_id: BlogIdPath,
    caller: CallerDep,
    blogs: BlogServiceDep,
) -> ApiResponse[BlogDetailData]:
    """
    Get one blog by id.

    Raises
    ------
    BlogNotFoundError
        If the blog is missing or a draft of another user (404).
    """
    return ApiResponse(data=await blogs.get_blog(caller, blog_id), message="Found the Blog")
