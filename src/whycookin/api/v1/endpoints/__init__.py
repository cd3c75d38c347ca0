# src/whycookin/api/v1/endpoints/__init__.py
"""API endpoint modules for version 1."""

from .auth import router as auth_router
from .comments import router as comments_router
from .discount_events import router as discount_events_router
from .posts import router as posts_router
from .profile import router as profile_router
from .restaurants import router as restaurants_router
from .stores import router as stores_router
from .subcategories import router as subcategories_router
from .users import router as users_router
from .votes import router as votes_router

__all__ = [
    "auth_router",
    "comments_router",
    "discount_events_router",
    "posts_router",
    "profile_router",
    "restaurants_router",
    "stores_router",
    "subcategories_router",
    "users_router",
    "votes_router",
]
