# app/routes/follow.py

"""
Follow Routes.

Follow graph between users: toggle a follow and page through followers and
followed users.

Summary
-------
Endpoints include:
  - Follow / unfollow a user (toggle)
  - List the caller's followers
  - List the users the caller follows

Rate Limiting
-------------
Toggles are limited more tightly than listings.
"""

from logging import getLogger

from fastapi import APIRouter, Request
from fastapi.responses import ORJSONResponse
from starlette.responses import Response

from app.configs import file_logger
from app.dependencies import CallerDep, EngagementDep, PagePath, UserIdPath
from app.managers import limiter
from app.repositories import ToggleOutcome
from app.schemas.follow import FollowersPage, FollowingPage, FollowToggleData
from app.schemas.response import ApiResponse, error_responses

router = APIRouter(prefix="/user/follow", tags=["👥 Follow"])

logger = file_logger(getLogger(__name__))

FOLLOW_MESSAGES = {
    ToggleOutcome.ADDED: "You're now following this author",
    ToggleOutcome.REMOVED: "Unfollowed",
    ToggleOutcome.ALREADY_EXISTS: "Already following this user",
}


@router.post(
    "/{following_id}",
    response_class=ORJSONResponse,
    response_model=ApiResponse[FollowToggleData],
    response_model_exclude_none=True,
    summary="Follow or unfollow a user",
    description="Follows the user when not yet followed, unfollows otherwise.",
    responses=error_responses(400, 404),
    operation_id="follow_toggle",
)
@limiter.limit("30/minute")
async def toggle_follow(
    request: Request,
    response: Response,
    following_id: UserIdPath,
    caller: CallerDep,
    engagement: EngagementDep,
) -> ApiResponse[FollowToggleData]:
    """
    Toggle the follow edge from the caller to ``following_id``.

    Parameters
    ----------
    request : Request
        Current request context (used by the rate limiter).
    response : Response
        Response object.
    following_id : int
        User to follow or unfollow.
    caller : CallerContext
        Authenticated caller.
    engagement : EngagementService
        Engagement service bound to the request session.

    Returns
    -------
    ApiResponse[FollowToggleData]
        ``followingId`` after a follow, ``unfollowedId`` after an unfollow.

    Raises
    ------
    SelfFollowError
        If the caller targets themselves (400).
    UserNotFoundError
        If either user does not exist (404).
    """
    result = await engagement.toggle_follow(caller, following_id)
    data = (
        FollowToggleData(action="follow", following_id=following_id)
        if result.present
        else FollowToggleData(action="unfollow", unfollowed_id=following_id)
    )
    return ApiResponse(data=data, message=FOLLOW_MESSAGES[result.outcome])


@router.get(
    "/followers/{page}",
    response_class=ORJSONResponse,
    response_model=ApiResponse[FollowersPage],
    summary="List followers",
    description="Users following the caller, five per page, in the order they followed.",
    responses=error_responses(400),
    operation_id="follow_followers",
)
@limiter.limit("60/minute")
async def list_followers(
    request: Request,
    response: Response,
    page: PagePath,
    caller: CallerDep,
    engagement: EngagementDep,
) -> ApiResponse[FollowersPage]:
    """
    Page through the caller's followers.

    Raises
    ------
    PaginationError
        If nobody follows the caller or ``page`` is out of range (400).
    """
    return ApiResponse(data=await engagement.list_followers(caller, page), message="Your Followers")


@router.get(
    "/following/{page}",
    response_class=ORJSONResponse,
    response_model=ApiResponse[FollowingPage],
    summary="List followed users",
    description="Users the caller follows, five per page.",
    responses=error_responses(400),
    operation_id="follow_following",
)
@limiter.limit("60/minute")
async def list_following(
    request: Request,
    response: Response,
    page: PagePath,
    caller: CallerDep,
    engagement: EngagementDep,
) -> ApiResponse[FollowingPage]:
    return ApiResponse(
        data=await engagement.list_following(caller, page),
        message="Authors/Users You're Following",
    )
