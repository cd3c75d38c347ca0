# src/whycookin/schemas/store.py
"""Store and discount-event Pydantic schemas."""

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field


class StoreWrite(BaseModel):
    """Schema for creating or fully replacing a store."""

    store_name: str | None = None
    address: str | None = None
    store_hours: str | None = None


class StoreResponse(BaseModel):
    """Schema for store information returned by the API."""

    id: int
    store_name: str
    address: str
    store_hours: str | None = None

    model_config = ConfigDict(from_attributes=True)


class StoreCreated(BaseModel):
    """Acknowledgement returned after creating a store."""

    success: bool = True
    id: int
    store_name: str
    address: str


class StoreSearchResult(BaseModel):
    """First store whose name contains the search term, if any."""

    exists: bool
    id: int | None = None
    store_name: str | None = None
    address: str | None = None


class StoreDeleted(BaseModel):
    """Response returned after deleting a store."""

    success: bool = True
    deleted: StoreResponse


class DiscountEventWrite(BaseModel):
    """Schema for creating or fully replacing a discount event.

    Either ``discount_price`` or ``discount_percentage`` must be supplied; the
    other one is derived from ``original_price`` when possible.
    """

    store_id: int | None = Field(None, description="Store offering the discount")
    item_name: str | None = None
    item_category: str | None = None
    reason: str | None = None
    original_price: float | None = Field(None, ge=0)
    discount_price: float | None = Field(None, ge=0)
    discount_percentage: float | None = Field(None, ge=0, le=100)
    discount_start: datetime | None = None
    discount_end: datetime | None = None
    expiration_date: date | None = None
    quantity: int | None = Field(None, ge=0)
    item_image_url: str | None = None
    posted_by: str | None = None
    store_hours: str | None = None
    dietary_tags: list[str] | None = None
    is_crowd_sourced: bool | None = Field(None, description="Defaults to true when omitted")
    avg_rating: float | None = Field(None, ge=0, le=5)
    total_reviews: int | None = Field(None, ge=0, description="Defaults to 0 when omitted")


class DiscountEventResponse(BaseModel):
    """Schema for discount-event information returned by the API."""

    id: int
    store_id: int
    item_name: str
    item_category: str | None
    reason: str | None
    original_price: float | None
    discount_price: float | None
    discount_percentage: float | None
    discount_start: datetime | None
    discount_end: datetime | None
    expiration_date: date | None
    quantity: int | None
    item_image_url: str | None
    posted_by: str | None
    store_hours: str | None
    dietary_tags: list[str] | None
    is_crowd_sourced: bool
    avg_rating: float | None
    total_reviews: int
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class DiscountEventDeleted(BaseModel):
    """Response returned after deleting a discount event."""

    success: bool = True
    deleted: DiscountEventResponse
