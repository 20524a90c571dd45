from app.routes.categories import router as categories_router
from app.routes.posts import router as posts_router

__all__ = ["categories_router", "posts_router"]
