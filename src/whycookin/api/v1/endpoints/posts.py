# src/whycookin/api/v1/endpoints/posts.py
"""Forum post endpoints, including the daily trending list."""

from fastapi import APIRouter, Query
from sqlalchemy.orm import Session, joinedload

from whycookin.core.errors import ForbiddenError, NotFoundError, ValidationError
from whycookin.core.settings import settings
from whycookin.models import Post, Subcategory
from whycookin.schemas.community import PostDeleted, PostResponse, PostWrite, TrendingPost
from whycookin.services import filters
from whycookin.services.authorization import Action, Target, ensure_permitted
from whycookin.services.trending import trending_posts

from ..dependencies import CurrentUserDep, PrincipalDep, SessionDep

router = APIRouter(prefix="/community", tags=["posts"])


def _get_post_or_404(db: Session, post_id: int) -> Post:
    post = (
        db.query(Post)
        .options(joinedload(Post.author), joinedload(Post.subcategory))
        .filter(Post.id == post_id)
        .first()
    )
    if post is None:
        raise NotFoundError("Post not found")
    return post


def _require_title_and_content(payload: PostWrite) -> None:
    if not payload.title or not payload.content:
        raise ValidationError("Missing required fields")


def _check_subcategory(db: Session, subcategory_id: int | None) -> None:
    if subcategory_id is not None and db.get(Subcategory, subcategory_id) is None:
        raise NotFoundError("Subcategory not found")


@router.get("/posts", response_model=list[PostResponse])
async def list_posts(
    db: SessionDep,
    subcat: int | None = Query(None, description="Only posts in this subcategory"),
) -> list[Post]:
    """List posts newest first, with author and subcategory names."""
    return (
        db.query(Post)
        .options(joinedload(Post.author), joinedload(Post.subcategory))
        .filter(filters.combine(filters.equals(Post.subcategory_id, subcat)))
        .order_by(Post.created_at.desc(), Post.id.desc())
        .all()
    )


@router.get("/trending", response_model=list[TrendingPost])
async def list_trending_posts(db: SessionDep) -> list[TrendingPost]:
    """Return today's best-rated posts."""
    return trending_posts(db, settings.trending_limit)


@router.get("/posts/{post_id}", response_model=PostResponse)
async def get_post(post_id: int, db: SessionDep) -> Post:
    """Get a specific post by ID."""
    return _get_post_or_404(db, post_id)


@router.post("/posts", response_model=PostResponse)
async def create_post(
    payload: PostWrite,
    current_user: CurrentUserDep,
    db: SessionDep,
) -> Post:
    """Create a post authored by the caller.

    Hidden profiles may not post; that check comes before field validation.
    """
    if not current_user.visible_to_others:
        raise ForbiddenError("You must be visible to others to create posts")
    _require_title_and_content(payload)
    _check_subcategory(db, payload.subcategory_id)

    post = Post(
        title=payload.title,
        content=payload.content,
        author_id=current_user.id,
        subcategory_id=payload.subcategory_id,
    )
    db.add(post)
    db.commit()
    return _get_post_or_404(db, post.id)


@router.put("/posts/{post_id}", response_model=PostResponse)
async def replace_post(
    post_id: int,
    payload: PostWrite,
    principal: PrincipalDep,
    db: SessionDep,
) -> Post:
    """Replace a post's title, content and subcategory (author, moderator or admin).

    Vote counters are left untouched.
    """
    post = _get_post_or_404(db, post_id)
    ensure_permitted(principal, Action.EDIT_POST, Target(owner_id=post.author_id))
    _require_title_and_content(payload)
    _check_subcategory(db, payload.subcategory_id)

    post.title = payload.title
    post.content = payload.content
    post.subcategory_id = payload.subcategory_id
    db.commit()
    return _get_post_or_404(db, post_id)


@router.delete("/posts/{post_id}", response_model=PostDeleted)
async def delete_post(
    post_id: int,
    principal: PrincipalDep,
    db: SessionDep,
) -> PostDeleted:
    """Delete a post with its comments and votes (author, moderator or admin)."""
    post = _get_post_or_404(db, post_id)
    ensure_permitted(principal, Action.DELETE_POST, Target(owner_id=post.author_id))
    deleted = PostResponse.model_validate(post)
    db.delete(post)
    db.commit()
    return PostDeleted(deleted=deleted)
