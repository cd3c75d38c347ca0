"""SQLAlchemy models for geocoded restaurant listings."""

from sqlalchemy import Boolean, Float, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from whycookin.db.session import Base

# Dietary and accessibility flags shared by the model, schemas and list filters.
RESTAURANT_FLAGS = (
    "english_speaking",
    "vegan",
    "vegetarian",
    "no_pork",
    "halal",
    "no_beef",
    "gluten_free",
    "allows_foreigners",
)


class Restaurant(Base):
    """Restaurant listing, unique by name, with its geocoded address."""

    __tablename__ = "restaurants"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)

    english_speaking: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    vegan: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    vegetarian: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    no_pork: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    halal: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    no_beef: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    gluten_free: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    allows_foreigners: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    # Administrative breakdown returned by the geocoder (province, district, town).
    si_do: Mapped[str | None] = mapped_column(Text, nullable=True)
    si_gun_gu: Mapped[str | None] = mapped_column(Text, nullable=True)
    eup_myeon_dong: Mapped[str | None] = mapped_column(Text, nullable=True)
    postal_code: Mapped[str | None] = mapped_column(Text, nullable=True)
    road_name: Mapped[str | None] = mapped_column(Text, nullable=True)
    full_address: Mapped[str] = mapped_column(Text, nullable=False)

    # WGS84 coordinates.
    longitude: Mapped[float] = mapped_column(Float, nullable=False, index=True)
    latitude: Mapped[float] = mapped_column(Float, nullable=False, index=True)
