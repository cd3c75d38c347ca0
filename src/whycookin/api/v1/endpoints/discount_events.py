# src/whycookin/api/v1/endpoints/discount_events.py
"""Discount-event endpoints."""

from typing import Any

from fastapi import APIRouter, Query
from sqlalchemy.orm import Session

from whycookin.core.errors import NotFoundError, ValidationError
from whycookin.db.time import utcnow
from whycookin.models import DiscountEvent, Store
from whycookin.schemas.store import (
    DiscountEventDeleted,
    DiscountEventResponse,
    DiscountEventWrite,
)
from whycookin.services import filters
from whycookin.services.discounts import complete_pricing

from ..dependencies import SessionDep

router = APIRouter(prefix="/discount-events", tags=["discount-events"])


def _event_values(db: Session, payload: DiscountEventWrite) -> dict[str, Any]:
    """Validate a write payload and return column values with defaults applied."""
    if payload.store_id is None or not payload.item_name:
        raise ValidationError("Missing store_id or item_name")
    if db.get(Store, payload.store_id) is None:
        raise NotFoundError("Store not found")

    values = payload.model_dump()
    if values["is_crowd_sourced"] is None:
        values["is_crowd_sourced"] = True
    if values["total_reviews"] is None:
        values["total_reviews"] = 0
    return complete_pricing(values)


def _get_event_or_404(db: Session, event_id: int, detail: str = "Discount event not found") -> DiscountEvent:
    event = db.get(DiscountEvent, event_id)
    if event is None:
        raise NotFoundError(detail)
    return event


@router.get("", response_model=list[DiscountEventResponse])
async def list_discount_events(
    db: SessionDep,
    store_id: int | None = Query(None, description="Only events of this store"),
) -> list[DiscountEvent]:
    """List discount events, newest first."""
    return (
        db.query(DiscountEvent)
        .filter(filters.combine(filters.equals(DiscountEvent.store_id, store_id)))
        .order_by(DiscountEvent.created_at.desc(), DiscountEvent.id.desc())
        .all()
    )


@router.post("", response_model=DiscountEventResponse)
async def create_discount_event(payload: DiscountEventWrite, db: SessionDep) -> DiscountEvent:
    """Create a discount event, deriving the missing discount field."""
    event = DiscountEvent(**_event_values(db, payload))
    db.add(event)
    db.commit()
    db.refresh(event)
    return event


@router.get("/{event_id}", response_model=DiscountEventResponse)
async def get_discount_event(event_id: int, db: SessionDep) -> DiscountEvent:
    """Get a specific discount event by ID."""
    return _get_event_or_404(db, event_id)


@router.put("/{event_id}", response_model=DiscountEventResponse)
async def replace_discount_event(
    event_id: int,
    payload: DiscountEventWrite,
    db: SessionDep,
) -> DiscountEvent:
    """Replace every field of a discount event and bump ``updated_at``."""
    event = _get_event_or_404(db, event_id, "Discount event not found or no changes made")
    for key, value in _event_values(db, payload).items():
        setattr(event, key, value)
    event.updated_at = utcnow()
    db.commit()
    db.refresh(event)
    return event


@router.delete("/{event_id}", response_model=DiscountEventDeleted)
async def delete_discount_event(event_id: int, db: SessionDep) -> DiscountEventDeleted:
    """Delete a discount event and return the removed record."""
    event = _get_event_or_404(db, event_id)
    deleted = DiscountEventResponse.model_validate(event)
    db.delete(event)
    db.commit()
    return DiscountEventDeleted(deleted=deleted)
