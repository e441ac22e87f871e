"""Comment posting, listing and deletion."""

from app.context import CallerContext
from app.monitoring import get_logger
from app.repositories.comment import CommentRepository
from app.schemas.comment import CommentBrief, CommentCreated, CommentDeleted, CommentList
from app.services.guard import INVALID_BLOG_MESSAGE, OwnershipGuard

logger = get_logger(__name__)


class CommentService:
    """Service for comments; every comment id is resolved within its blog."""

    def __init__(self, guard: OwnershipGuard, comments: CommentRepository) -> None:
        self.guard = guard
        self.comments = comments

    async def post_comment(self, caller: CallerContext, blog_id: int, text: str) -> CommentCreated:
        """
        Post a comment on a published blog.

        Raises:
            BlogNotFoundError: ``"Invalid Blog ID"`` if the blog cannot be commented on
        """
        await self.guard.require_blog_for_comment(caller, blog_id)
        comment = await self.comments.create_comment(blog_id, caller.user_id, text)
        logger.info("Comment posted", blog_id=blog_id, comment_id=comment.id)
        return CommentCreated(comment_id=comment.id or 0)

    async def list_comments(self, caller: CallerContext, blog_id: int) -> CommentList:
        """List the comments of a blog the caller can read, in posting order."""
        await self.guard.require_visible_blog(caller, blog_id, INVALID_BLOG_MESSAGE)
        rows = await self.comments.list_for_blog(blog_id)
        return CommentList(comments=[CommentBrief.model_validate(comment) for comment, _ in rows])

    async def delete_comment(
        self,
        caller: CallerContext,
        blog_id: int,
        comment_id: int,
    ) -> CommentDeleted:
        """
        Delete one of the caller's comments.

        Raises:
            BlogNotFoundError: If the blog does not exist
            CommentNotFoundError: If the comment is missing, on another blog,
                or written by someone else
        """
        await self.guard.require_blog(blog_id)
        comment = await self.guard.require_comment(caller, blog_id, comment_id, must_own=True)
        await self.comments.delete_comment(comment)
        logger.info("Comment deleted", blog_id=blog_id, comment_id=comment_id)
        return CommentDeleted(comment_id=comment_id)
