from app.routes.blog import router as blog_router
from app.routes.comment import router as comment_router
from app.routes.follow import router as follow_router
from app.routes.like import router as like_router

__all__ = [
    "blog_router",
    "comment_router",
    "follow_router",
    "like_router",
]
