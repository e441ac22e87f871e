"""Like request and response models."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class LikeToggleData(BaseModel):
    """Result of a blog or comment like toggle."""

    model_config = ConfigDict(populate_by_name=True)

    action: Literal["like", "unlike"]
    blog_id: int = Field(alias="blogId")
    comment_id: int | None = Field(default=None, alias="commentId")
    total_likes: int = Field(alias="totalLikes", ge=0)


class LikeUser(BaseModel):
    username: str


class LikeEntry(BaseModel):
    """One like as shown in a like listing."""

    model_config = ConfigDict(populate_by_name=True)

    created_at: str = Field(alias="createdAt", examples=["Mon Jan 05 2026 14:03"])
    user: LikeUser


class LikeListData(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    likes: list[LikeEntry]
    total_likes: int = Field(alias="totalLikes", ge=0)
