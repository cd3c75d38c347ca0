# src/whycookin/api/v1/__init__.py
"""Version 1 API endpoints."""

from .endpoints import (
    auth_router,
    comments_router,
    discount_events_router,
    posts_router,
    profile_router,
    restaurants_router,
    stores_router,
    subcategories_router,
    users_router,
    votes_router,
)

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
