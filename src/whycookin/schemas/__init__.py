# src/whycookin/schemas/__init__.py
"""
Pydantic schemas for API request/response models.

These schemas define the structure of API data for serialization and validation.
"""

from .community import (
    CommentCreate,
    CommentResponse,
    PostResponse,
    PostWrite,
    SubcategoryResponse,
    SubcategoryWrite,
    TrendingPost,
)
from .restaurant import RestaurantResponse, RestaurantWrite
from .store import DiscountEventResponse, DiscountEventWrite, StoreResponse, StoreWrite
from .user import Credentials, ProfileUpdateRequest, UserResponse
from .vote import MyVoteResponse, VoteResult

__all__ = [
    "CommentCreate", "CommentResponse",
    "PostResponse", "PostWrite",
    "SubcategoryResponse", "SubcategoryWrite",
    "TrendingPost",
    "RestaurantResponse", "RestaurantWrite",
    "DiscountEventResponse", "DiscountEventWrite",
    "StoreResponse", "StoreWrite",
    "Credentials", "ProfileUpdateRequest", "UserResponse",
    "MyVoteResponse", "VoteResult",
]
