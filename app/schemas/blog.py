"""
Blog read models.

Blogs are only read through this service, so there are no create or update
bodies here; every model describes a response shape.
"""

from pydantic import BaseModel, ConfigDict, Field

from app.schemas.comment import CommentBrief
from app.schemas.like import LikeUser


class BlogAuthor(BaseModel):
    """Author information for blog responses (without sensitive data)."""

    username: str


class LikeBrief(BaseModel):
    id: int
    user: LikeUser


class BlogComment(BaseModel):
    """A comment as embedded in a blog listing, with its likes."""

    id: int
    comment: str
    commenter: LikeUser
    likes: list[LikeBrief] = Field(default_factory=list)


class BlogSearchItem(BaseModel):
    id: int
    title: str
    content: str
    tag: str
    author: BlogAuthor


class BlogListItem(BlogSearchItem):
    """A published blog in the paged listing."""

    model_config = ConfigDict(populate_by_name=True)

    created_at: str = Field(alias="createdAt", examples=["Mon Jan 05 2026 14:03"])
    comments: list[BlogComment] = Field(default_factory=list)
    likes: list[LikeBrief] = Field(default_factory=list)


class BlogDetail(BlogSearchItem):
    model_config = ConfigDict(populate_by_name=True)

    created_at: str = Field(alias="createdAt")
    comments: list[CommentBrief] = Field(default_factory=list)


class BlogPage(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    blogs: list[BlogListItem]
    total_pages: int = Field(alias="totalPages")
    current_page: int = Field(alias="currentPage")
    has_next_page: bool = Field(alias="hasNextPage")
    has_previous_page: bool = Field(alias="hasPreviousPage")


class BlogSearchResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    filtered_blogs: list[BlogSearchItem] = Field(alias="filteredBlogs")


class BlogDetailData(BaseModel):
    blog: BlogDetail


class BlogDrafts(BaseModel):
    """The caller's unpublished blogs."""

    drafts: list[BlogSearchItem]
