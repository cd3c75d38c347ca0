# src/whycookin/api/v1/endpoints/comments.py
"""Comment endpoints."""

from fastapi import APIRouter, Query
from sqlalchemy.orm import Session, joinedload

from whycookin.core.errors import NotFoundError, ValidationError
from whycookin.models import Comment, Post
from whycookin.schemas.community import (
    CommentCreate,
    CommentDeleted,
    CommentResponse,
    CommentUpdate,
)
from whycookin.services import filters
from whycookin.services.authorization import Action, Target, ensure_permitted

from ..dependencies import CurrentUserDep, PrincipalDep, SessionDep

router = APIRouter(prefix="/community/comments", tags=["comments"])


def _get_comment_or_404(db: Session, comment_id: int) -> Comment:
    comment = (
        db.query(Comment)
        .options(joinedload(Comment.author), joinedload(Comment.post))
        .filter(Comment.id == comment_id)
        .first()
    )
    if comment is None:
        raise NotFoundError("Comment not found")
    return comment


@router.get("", response_model=list[CommentResponse])
async def list_comments(
    db: SessionDep,
    post_id: int | None = Query(None, alias="postId", description="Only comments on this post"),
) -> list[Comment]:
    """List comments oldest first, with author name and post title."""
    return (
        db.query(Comment)
        .options(joinedload(Comment.author), joinedload(Comment.post))
        .filter(filters.combine(filters.equals(Comment.post_id, post_id)))
        .order_by(Comment.created_at.asc(), Comment.id.asc())
        .all()
    )


@router.post("", response_model=CommentResponse)
async def create_comment(
    payload: CommentCreate,
    current_user: CurrentUserDep,
    db: SessionDep,
) -> Comment:
    """Comment on a post as the caller."""
    if payload.post_id is None or not payload.text:
        raise ValidationError("Missing required fields (post_id, text)")
    if db.get(Post, payload.post_id) is None:
        raise NotFoundError("Post not found")

    comment = Comment(post_id=payload.post_id, author_id=current_user.id, text=payload.text)
    db.add(comment)
    db.commit()
    return _get_comment_or_404(db, comment.id)


@router.put("/{comment_id}", response_model=CommentResponse)
async def update_comment(
    comment_id: int,
    payload: CommentUpdate,
    principal: PrincipalDep,
    db: SessionDep,
) -> Comment:
    """Edit a comment's text; only its author may do so."""
    if not payload.text:
        raise ValidationError("Missing text field")
    comment = _get_comment_or_404(db, comment_id)
    ensure_permitted(principal, Action.EDIT_COMMENT, Target(owner_id=comment.author_id))
    comment.text = payload.text
    db.commit()
    return _get_comment_or_404(db, comment_id)


@router.delete("/{comment_id}", response_model=CommentDeleted)
async def delete_comment(
    comment_id: int,
    principal: PrincipalDep,
    db: SessionDep,
) -> CommentDeleted:
    """Delete a comment (author, moderator or admin)."""
    comment = _get_comment_or_404(db, comment_id)
    ensure_permitted(principal, Action.DELETE_COMMENT, Target(owner_id=comment.author_id))
    deleted = CommentResponse.model_validate(comment)
    db.delete(comment)
    db.commit()
    return CommentDeleted(deleted=deleted)
