# src/whycookin/models/__init__.py
"""SQLAlchemy models for the WhyCookIn application."""

from .community import Subcategory
from .post import Comment, Post
from .restaurant import Restaurant
from .store import DiscountEvent, Store
from .user import User
from .vote import PostVote

__all__ = [
    "Subcategory",
    "Comment", "Post",
    "Restaurant",
    "DiscountEvent", "Store",
    "User",
    "PostVote",
]
