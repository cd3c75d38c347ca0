# src/whycookin/api/v1/endpoints/stores.py
"""Store endpoints."""

from fastapi import APIRouter, Query
from sqlalchemy.orm import Session

from whycookin.core.errors import NotFoundError, ValidationError
from whycookin.models import Store
from whycookin.schemas.store import (
    StoreCreated,
    StoreDeleted,
    StoreResponse,
    StoreSearchResult,
    StoreWrite,
)
from whycookin.services import filters

from ..dependencies import SessionDep

router = APIRouter(prefix="/stores", tags=["stores"])


def _require_name_and_address(payload: StoreWrite) -> None:
    if not payload.store_name or not payload.address:
        raise ValidationError("Missing store_name or address")


def _get_store_or_404(db: Session, store_id: int) -> Store:
    store = db.get(Store, store_id)
    if store is None:
        raise NotFoundError("Store not found")
    return store


@router.post("", response_model=StoreCreated)
async def create_store(payload: StoreWrite, db: SessionDep) -> StoreCreated:
    """Create a store."""
    _require_name_and_address(payload)
    store = Store(
        store_name=payload.store_name,
        address=payload.address,
        store_hours=payload.store_hours,
    )
    db.add(store)
    db.commit()
    db.refresh(store)
    return StoreCreated(id=store.id, store_name=store.store_name, address=store.address)


@router.get("", response_model=None)
async def list_stores(
    db: SessionDep,
    search_name: str | None = Query(None, alias="searchName"),
) -> list[dict[str, object]] | dict[str, object]:
    """List all stores, or look one up by name.

    With ``searchName`` the first store whose name contains the term is
    returned as ``{"exists": true, ...}``, or ``{"exists": false}``.
    """
    if search_name:
        store = (
            db.query(Store)
            .filter(filters.combine(filters.contains_ci(Store.store_name, search_name)))
            .order_by(Store.id)
            .first()
        )
        if store is None:
            return StoreSearchResult(exists=False).model_dump(exclude_none=True)
        return StoreSearchResult(
            exists=True,
            id=store.id,
            store_name=store.store_name,
            address=store.address,
        ).model_dump()

    stores = db.query(Store).order_by(Store.id).all()
    return [StoreResponse.model_validate(store).model_dump() for store in stores]


@router.get("/{store_id}", response_model=StoreResponse)
async def get_store(store_id: int, db: SessionDep) -> Store:
    """Get a specific store by ID."""
    return _get_store_or_404(db, store_id)


@router.put("/{store_id}", response_model=StoreResponse)
async def replace_store(store_id: int, payload: StoreWrite, db: SessionDep) -> Store:
    """Replace a store's fields."""
    _require_name_and_address(payload)
    store = _get_store_or_404(db, store_id)
    store.store_name = payload.store_name
    store.address = payload.address
    store.store_hours = payload.store_hours
    db.commit()
    db.refresh(store)
    return store


@router.delete("/{store_id}", response_model=StoreDeleted)
async def delete_store(store_id: int, db: SessionDep) -> StoreDeleted:
    """Delete a store together with its discount events."""
    store = _get_store_or_404(db, store_id)
    deleted = StoreResponse.model_validate(store)
    db.delete(store)
    db.commit()
    return StoreDeleted(deleted=deleted)
