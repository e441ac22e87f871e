"""Follow graph request and response models."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class FollowToggleData(BaseModel):
    """
    Result of a follow toggle.

    ``followingId`` is set while the edge exists afterwards, ``unfollowedId``
    once it was removed.
    """

    model_config = ConfigDict(populate_by_name=True)

    action: Literal["follow", "unfollow"]
    following_id: int | None = Field(default=None, alias="followingId")
    unfollowed_id: int | None = Field(default=None, alias="unfollowedId")


class FollowUser(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str


class FollowPageMeta(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    total_pages: int = Field(alias="totalPages")
    current_page: int = Field(alias="currentPage")
    has_next_page: bool = Field(alias="hasNextPage")
    has_previous_page: bool = Field(alias="hasPreviousPage")


class FollowersPage(FollowPageMeta):
    followers: list[FollowUser]


class FollowingPage(FollowPageMeta):
    following: list[FollowUser]
