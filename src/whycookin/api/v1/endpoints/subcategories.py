# src/whycookin/api/v1/endpoints/subcategories.py
"""Forum subcategory endpoints."""

from fastapi import APIRouter
from sqlalchemy.orm import Session

from whycookin.core.errors import NotFoundError, ValidationError
from whycookin.models import Subcategory
from whycookin.schemas.community import (
    SubcategoryDeleted,
    SubcategoryResponse,
    SubcategoryWrite,
)
from whycookin.services.authorization import Action, Target, ensure_permitted

from ..dependencies import CurrentUserDep, PrincipalDep, SessionDep

router = APIRouter(prefix="/community/subcategories", tags=["community"])


def _get_subcategory_or_404(db: Session, subcategory_id: int) -> Subcategory:
    subcategory = db.get(Subcategory, subcategory_id)
    if subcategory is None:
        raise NotFoundError("Subcategory not found")
    return subcategory


def _require_name(payload: SubcategoryWrite) -> None:
    if not payload.name:
        raise ValidationError("name is required")


@router.get("", response_model=list[SubcategoryResponse])
async def list_subcategories(db: SessionDep) -> list[Subcategory]:
    """List subcategories, newest first."""
    return (
        db.query(Subcategory)
        .order_by(Subcategory.created_at.desc(), Subcategory.id.desc())
        .all()
    )


@router.get("/{subcategory_id}", response_model=SubcategoryResponse)
async def get_subcategory(subcategory_id: int, db: SessionDep) -> Subcategory:
    """Get a specific subcategory by ID."""
    return _get_subcategory_or_404(db, subcategory_id)


@router.post("", response_model=SubcategoryResponse)
async def create_subcategory(
    payload: SubcategoryWrite,
    current_user: CurrentUserDep,
    db: SessionDep,
) -> Subcategory:
    """Create a subcategory owned by the caller."""
    _require_name(payload)
    subcategory = Subcategory(
        name=payload.name,
        description=payload.description,
        created_by=current_user.id,
    )
    db.add(subcategory)
    db.commit()
    db.refresh(subcategory)
    return subcategory


@router.put("/{subcategory_id}", response_model=SubcategoryResponse)
async def replace_subcategory(
    subcategory_id: int,
    payload: SubcategoryWrite,
    principal: PrincipalDep,
    db: SessionDep,
) -> Subcategory:
    """Replace a subcategory's name and description (owner, moderator or admin)."""
    subcategory = _get_subcategory_or_404(db, subcategory_id)
    ensure_permitted(principal, Action.EDIT_SUBCATEGORY, Target(owner_id=subcategory.created_by))
    _require_name(payload)
    subcategory.name = payload.name
    subcategory.description = payload.description
    db.commit()
    db.refresh(subcategory)
    return subcategory


@router.delete("/{subcategory_id}", response_model=SubcategoryDeleted)
async def delete_subcategory(
    subcategory_id: int,
    principal: PrincipalDep,
    db: SessionDep,
) -> SubcategoryDeleted:
    """Delete a subcategory; its posts stay and lose their subcategory."""
    subcategory = _get_subcategory_or_404(db, subcategory_id)
    ensure_permitted(principal, Action.DELETE_SUBCATEGORY, Target(owner_id=subcategory.created_by))
    deleted = SubcategoryResponse.model_validate(subcategory)
    db.delete(subcategory)
    db.commit()
    return SubcategoryDeleted(deleted=deleted)
