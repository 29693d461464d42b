"""API routers."""

from .auth import router as auth_router
from .categories import router as categories_router
from .courses import router as courses_router
from .enrollments import router as enrollments_router
from .health import router as health_router
from .lectures import router as lectures_router
from .sections import router as sections_router
from .wishlist import router as wishlist_router

__all__ = [
    "auth_router",
    "categories_router",
    "courses_router",
    "enrollments_router",
    "health_router",
    "lectures_router",
    "sections_router",
    "wishlist_router",
]
