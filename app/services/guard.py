"""
Ownership guard: precondition checks run before any write.

Every failure is a not-found or bad-request error raised before the toggle
engine or a comment write touches the store. Entities the caller may not act
on are reported exactly like missing ones.
"""

from app.context import CallerContext
from app.errors.database import BlogNotFoundError, CommentNotFoundError, UserNotFoundError
from app.errors.validation import SelfFollowError
from app.models.blog import BlogDB
from app.models.comment import CommentDB
from app.repositories.blog import BlogRepository
from app.repositories.comment import CommentRepository
from app.repositories.user import UserRepository

BLOG_NOT_FOUND_MESSAGE = "Blog Not Found"
INVALID_BLOG_MESSAGE = "Invalid Blog ID"


class OwnershipGuard:
    """
    Existence, scoping and ownership checks for engagement operations.

    Args:
        users: User repository
        blogs: Blog repository
        comments: Comment repository
        own_content_only: Restrict likes and comments to the caller's own
            blogs (and comment likes to the caller's own comments)
    """

    def __init__(
        self,
        users: UserRepository,
        blogs: BlogRepository,
        comments: CommentRepository,
        *,
        own_content_only: bool = True,
    ) -> None:
        self.users = users
        self.blogs = blogs
        self.comments = comments
        self.own_content_only = own_content_only

    @staticmethod
    def require_not_self(caller: CallerContext, target_id: int) -> None:
        """
        Reject a follow of oneself without consulting the store.

        Raises:
            SelfFollowError: If ``target_id`` is the caller
        """
        if caller.owns(target_id):
            raise SelfFollowError

    async def require_users(self, *user_ids: int) -> None:
        """
        Require every user id to exist.

        Raises:
            UserNotFoundError: If any of them is missing
        """
        found = await self.users.get_many(user_ids)
        if any(user_id not in found for user_id in user_ids):
            raise UserNotFoundError

    async def require_blog_for_engagement(self, caller: CallerContext, blog_id: int) -> BlogDB:
        """
        Resolve the blog a like is aimed at.

        In own-content mode the blog must be written by the caller. Otherwise
        it must be published, or be the caller's own draft.

        Raises:
            BlogNotFoundError: If the blog is missing or out of reach
        """
        if self.own_content_only:
            blog = await self.blogs.find_blog(blog_id, author_id=caller.user_id)
        else:
            blog = await self.require_visible_blog(caller, blog_id)
        if blog is None:
            raise BlogNotFoundError
        return blog

    async def require_blog_for_comment(self, caller: CallerContext, blog_id: int) -> BlogDB:
        """
        Resolve the blog a new comment is posted on; it must be published.

        Raises:
            BlogNotFoundError: ``"Invalid Blog ID"`` if missing or out of reach
        """
        author_id = caller.user_id if self.own_content_only else None
        blog = await self.blogs.find_blog(blog_id, author_id=author_id, published=True)
        if blog is None:
            raise BlogNotFoundError(INVALID_BLOG_MESSAGE)
        return blog

    async def require_blog(self, blog_id: int) -> BlogDB:
        """Resolve a blog by id alone, for comment deletes."""
        blog = await self.blogs.find_blog(blog_id)
        if blog is None:
            raise BlogNotFoundError(INVALID_BLOG_MESSAGE)
        return blog

    async def require_visible_blog(
        self,
        caller: CallerContext,
        blog_id: int,
        detail: str = BLOG_NOT_FOUND_MESSAGE,
    ) -> BlogDB:
        """
        Resolve a blog the caller may read: published, or their own draft.

        Args:
            caller: Acting user
            blog_id: Blog ID
            detail: Message of the not-found error

        Raises:
            BlogNotFoundError: If missing or an unpublished blog of someone else
        """
        blog = await self.blogs.find_blog(blog_id)
        if blog is None or not (blog.published or caller.owns(blog.author_id)):
            raise BlogNotFoundError(detail)
        return blog

    async def require_comment(
        self,
        caller: CallerContext,
        blog_id: int,
        comment_id: int,
        *,
        must_own: bool,
    ) -> CommentDB:
        """
        Resolve a comment within the blog named in the request.

        A comment that exists but belongs to another blog is not found.

        Args:
            caller: Acting user
            blog_id: Blog the comment must belong to
            comment_id: Comment ID
            must_own: Also require the caller to be the commenter

        Raises:
            CommentNotFoundError: If missing, on another blog, or not the caller's
        """
        commented_by_id = caller.user_id if must_own else None
        comment = await self.comments.find_comment(comment_id, blog_id, commented_by_id)
        if comment is None:
            raise CommentNotFoundError
        return comment
