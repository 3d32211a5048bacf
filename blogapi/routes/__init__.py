from blogapi.routes.blog import router as blog_router
from blogapi.routes.user import router as user_router

__all__ = [
    "blog_router",
    "user_router",
]
