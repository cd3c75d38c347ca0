# src/whycookin/schemas/community.py
"""Forum Pydantic schemas: subcategories, posts, comments and trending."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, model_validator


def _flatten(cls: type[BaseModel], data: object) -> dict[str, object]:
    """Copy the model's fields off an ORM row into a plain dict."""
    extracted: dict[str, object | None] = {}
    for field_name in cls.model_fields:
        extracted[field_name] = getattr(data, field_name, None)
    return extracted


class SubcategoryWrite(BaseModel):
    """Schema for creating or fully replacing a subcategory."""

    name: str | None = None
    description: str | None = None


class SubcategoryResponse(BaseModel):
    """Schema for subcategory information returned by the API."""

    id: int
    name: str
    description: str | None
    created_by: int | None
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class SubcategoryDeleted(BaseModel):
    """Response returned after deleting a subcategory."""

    success: bool = True
    deleted: SubcategoryResponse


class PostWrite(BaseModel):
    """Schema for creating or fully replacing a post."""

    title: str | None = None
    content: str | None = None
    subcategory_id: int | None = None


class PostResponse(BaseModel):
    """Schema for post information returned by the API.

    ``author_name`` and ``subcat_name`` are resolved from the post's
    relationships when validating an ORM row.
    """

    id: int
    title: str
    content: str
    author_id: int
    subcategory_id: int | None
    upvotes: int
    downvotes: int
    created_at: datetime
    author_name: str | None = None
    subcat_name: str | None = None

    @model_validator(mode="before")
    @classmethod
    def _resolve_names(cls, data: object) -> object:
        if isinstance(data, dict):
            return data
        extracted = _flatten(cls, data)
        author = getattr(data, "author", None)
        subcategory = getattr(data, "subcategory", None)
        extracted["author_name"] = author.username if author is not None else None
        extracted["subcat_name"] = subcategory.name if subcategory is not None else None
        return extracted

    model_config = ConfigDict(from_attributes=True)


class PostDeleted(BaseModel):
    """Response returned after deleting a post."""

    success: bool = True
    deleted: PostResponse


class TrendingPost(BaseModel):
    """A post of the day ranked by its vote ratio."""

    id: int
    title: str
    upvotes: int
    downvotes: int
    subcat_name: str | None
    ratio: float


class CommentCreate(BaseModel):
    """Schema for creating a comment; the author is the caller."""

    post_id: int | None = None
    text: str | None = None


class CommentUpdate(BaseModel):
    """Schema for editing a comment's text."""

    text: str | None = None


class CommentResponse(BaseModel):
    """Schema for comment information returned by the API."""

    id: int
    post_id: int
    author_id: int
    text: str
    created_at: datetime
    author_name: str | None = None
    post_title: str | None = None

    @model_validator(mode="before")
    @classmethod
    def _resolve_names(cls, data: object) -> object:
        if isinstance(data, dict):
            return data
        extracted = _flatten(cls, data)
        author = getattr(data, "author", None)
        post = getattr(data, "post", None)
        extracted["author_name"] = author.username if author is not None else None
        extracted["post_title"] = post.title if post is not None else None
        return extracted

    model_config = ConfigDict(from_attributes=True)


class CommentDeleted(BaseModel):
    """Response returned after deleting a comment."""

    success: bool = True
    deleted: CommentResponse
