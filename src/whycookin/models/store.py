"""SQLAlchemy models for stores and their discount events."""
from __future__ import annotations

import datetime

from sqlalchemy import JSON, Boolean, Date, DateTime, ForeignKey, Integer, Numeric, Text
from sqlalchemy.orm import Mapped, mapped_column

from whycookin.db.session import Base
from whycookin.db.time import utcnow


class Store(Base):
    """Shop that publishes discount events."""

    __tablename__ = "stores"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    store_name: Mapped[str] = mapped_column(Text, nullable=False)
    address: Mapped[str] = mapped_column(Text, nullable=False)
    store_hours: Mapped[str | None] = mapped_column(Text, nullable=True)


class DiscountEvent(Base):
    """A discounted item offered by a store for a period of time."""

    __tablename__ = "discount_events"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    store_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("stores.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    item_name: Mapped[str] = mapped_column(Text, nullable=False)
    item_category: Mapped[str | None] = mapped_column(Text, nullable=True)
    reason: Mapped[str | None] = mapped_column(Text, nullable=True)

    # At least one of discount_price / discount_percentage is always present;
    # the pricing service fills in the other when original_price is known.
    original_price: Mapped[float | None] = mapped_column(Numeric(12, 2, asdecimal=False), nullable=True)
    discount_price: Mapped[float | None] = mapped_column(Numeric(12, 2, asdecimal=False), nullable=True)
    discount_percentage: Mapped[float | None] = mapped_column(
        Numeric(5, 2, asdecimal=False),
        nullable=True,
    )

    discount_start: Mapped[datetime.datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    discount_end: Mapped[datetime.datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    expiration_date: Mapped[datetime.date | None] = mapped_column(Date, nullable=True)
    quantity: Mapped[int | None] = mapped_column(Integer, nullable=True)
    item_image_url: Mapped[str | None] = mapped_column(Text, nullable=True)
    posted_by: Mapped[str | None] = mapped_column(Text, nullable=True)
    store_hours: Mapped[str | None] = mapped_column(Text, nullable=True)
    dietary_tags: Mapped[list[str] | None] = mapped_column(JSON, nullable=True)
    is_crowd_sourced: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    avg_rating: Mapped[float | None] = mapped_column(Numeric(3, 2, asdecimal=False), nullable=True)
    total_reviews: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    created_at: Mapped[datetime.datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
    )
    updated_at: Mapped[datetime.datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
        onupdate=utcnow,
    )
