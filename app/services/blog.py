"""Read side of blogs: paged listing, search, drafts and detail."""

from collections import defaultdict

from app.configs import settings
from app.context import CallerContext
from app.errors.database import BlogNotFoundError
from app.models import BlogDB
from app.repositories.blog import BlogRepository
from app.repositories.comment import CommentRepository
from app.repositories.edge import BlogLikeRepository, CommentLikeRepository
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
from app.schemas.comment import CommentBrief
from app.schemas.like import LikeUser
from app.services.guard import OwnershipGuard
from app.services.pagination import paginate
from app.utils.helpers import display_datetime


def _summaries(rows: list[tuple[BlogDB, str]]) -> list[BlogSearchItem]:
    return [
        BlogSearchItem(
            id=blog.id or 0,
            title=blog.title,
            content=blog.content,
            tag=blog.tag,
            author=BlogAuthor(username=author),
        )
        for blog, author in rows
    ]


class BlogService:
    """Service for reading published blogs and the caller's own drafts."""

    def __init__(
        self,
        guard: OwnershipGuard,
        blogs: BlogRepository,
        comments: CommentRepository,
        blog_likes: BlogLikeRepository,
        comment_likes: CommentLikeRepository,
        *,
        page_size: int = settings.BLOG_PAGE_SIZE,
    ) -> None:
        self.guard = guard
        self.blogs = blogs
        self.comments = comments
        self.blog_likes = blog_likes
        self.comment_likes = comment_likes
        self.page_size = page_size

    async def list_published(self, page: int) -> BlogPage:
        """
        Get one page of published blogs, newest first.

        Each blog carries its author, its comments (with commenter and
        comment likes) and its likes. Related rows are loaded with one query
        per table for the whole page.

        Args:
            page: Requested page, starting at 1

        Returns:
            BlogPage: Blogs and navigation metadata

        Raises:
            PaginationError: If nothing is published or ``page`` is out of range
        """
        total = await self.blogs.count_published()
        window = paginate(
            page,
            total,
            page_size=self.page_size,
            empty_message="No Blogs Found",
            label="Page Number",
        )
        rows = await self.blogs.list_published_page(window.skip, window.limit)
        blog_ids = [blog.id for blog, _ in rows if blog.id is not None]

        comment_rows = await self.comments.list_for_blogs(blog_ids)
        comment_ids = [comment.id for comment, _ in comment_rows if comment.id is not None]

        comment_likes: defaultdict[int, list[LikeBrief]] = defaultdict(list)
        for like, username in await self.comment_likes.list_for_targets(comment_ids):
            comment_likes[like.comment_id].append(
                LikeBrief(id=like.id or 0, user=LikeUser(username=username)),
            )

        comments: defaultdict[int, list[BlogComment]] = defaultdict(list)
        for comment, username in comment_rows:
            comments[comment.blog_id].append(
                BlogComment(
                    id=comment.id or 0,
                    comment=comment.comment,
                    commenter=LikeUser(username=username),
                    likes=comment_likes[comment.id or 0],
                ),
            )

        blog_likes: defaultdict[int, list[LikeBrief]] = defaultdict(list)
        for like, username in await self.blog_likes.list_for_targets(blog_ids):
            blog_likes[like.blog_id].append(
                LikeBrief(id=like.id or 0, user=LikeUser(username=username)),
            )

        return BlogPage(
            blogs=[
                BlogListItem(
                    id=blog.id or 0,
                    title=blog.title,
                    content=blog.content,
                    tag=blog.tag,
                    created_at=display_datetime(blog.created_at),
                    author=BlogAuthor(username=author),
                    comments=comments[blog.id or 0],
                    likes=blog_likes[blog.id or 0],
                )
                for blog, author in rows
            ],
            total_pages=window.total_pages,
            current_page=window.current_page,
            has_next_page=window.has_next_page,
            has_previous_page=window.has_previous_page,
        )

    async def search(self, query: str) -> BlogSearchResult:
        """Find published blogs whose title, content or tag contains ``query``."""
        rows = await self.blogs.search_published(query.strip())
        return BlogSearchResult(filtered_blogs=_summaries(rows))

    async def list_drafts(self, caller: CallerContext) -> BlogDrafts:
        """Get the caller's unpublished blogs, newest first."""
        return BlogDrafts(drafts=_summaries(await self.blogs.list_drafts(caller.user_id)))

    async def get_blog(self, caller: CallerContext, blog_id: int) -> BlogDetailData:
        """
        Get one blog with its comments.

        Published blogs are visible to everyone, drafts only to their author.

        Raises:
            BlogNotFoundError: If missing or a draft of another user
        """
        await self.guard.require_visible_blog(caller, blog_id)
        found = await self.blogs.get_with_author(blog_id)
        if found is None:
            raise BlogNotFoundError
        blog, author = found
        comment_rows = await self.comments.list_for_blog(blog_id)
        return BlogDetailData(
            blog=BlogDetail(
                id=blog.id or 0,
                title=blog.title,
                content=blog.content,
                tag=blog.tag,
                created_at=display_datetime(blog.created_at),
                author=BlogAuthor(username=author),
                comments=[CommentBrief.model_validate(comment) for comment, _ in comment_rows],
            ),
        )
