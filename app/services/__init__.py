from app.services.blog import BlogService
from app.services.comment import CommentService
from app.services.engagement import EngagementService, LikeToggle
from app.services.guard import OwnershipGuard
from app.services.pagination import PageWindow, paginate

__all__ = [
    "BlogService",
    "CommentService",
    "EngagementService",
    "LikeToggle",
    "OwnershipGuard",
    "PageWindow",
    "paginate",
]
