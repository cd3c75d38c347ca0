# src/whycookin/api/v1/endpoints/restaurants.py
"""Restaurant endpoints: geocoded upsert, filtered listing and CRUD."""

import logging

from fastapi import APIRouter, Query
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from whycookin.core.errors import (
    ConflictError,
    GeocoderUnavailableError,
    NotFoundError,
    UpstreamError,
    ValidationError,
)
from whycookin.models import Restaurant
from whycookin.models.restaurant import RESTAURANT_FLAGS
from whycookin.schemas.restaurant import (
    RestaurantDeleted,
    RestaurantResponse,
    RestaurantWrite,
    RestaurantWriteResult,
)
from whycookin.services import filters
from whycookin.services.geocoding import (
    AddressNotFoundError,
    GeocodedAddress,
    GeocodingError,
    KakaoGeocoder,
)

from ..dependencies import GeocoderDep, SessionDep

router = APIRouter(prefix="/restaurants", tags=["restaurants"])
logger = logging.getLogger(__name__)


async def _geocode(geocoder: KakaoGeocoder, address: str) -> GeocodedAddress:
    try:
        return await geocoder.geocode(address)
    except AddressNotFoundError as err:
        raise UpstreamError("Kakao: No results for that address") from err
    except GeocodingError as err:
        logger.error("Geocoding %r failed: %s", address, err)
        raise GeocoderUnavailableError() from err


def _apply(restaurant: Restaurant, payload: RestaurantWrite, location: GeocodedAddress) -> None:
    restaurant.name = payload.name
    for flag in RESTAURANT_FLAGS:
        setattr(restaurant, flag, getattr(payload, flag))
    restaurant.si_do = location.si_do
    restaurant.si_gun_gu = location.si_gun_gu
    restaurant.eup_myeon_dong = location.eup_myeon_dong
    restaurant.postal_code = location.postal_code
    restaurant.road_name = location.road_name
    restaurant.full_address = payload.address
    restaurant.longitude = location.longitude
    restaurant.latitude = location.latitude


def _require_name_and_address(payload: RestaurantWrite) -> None:
    if not payload.name or not payload.address:
        raise ValidationError("Missing name or address")


def _get_restaurant_or_404(db: Session, restaurant_id: int) -> Restaurant:
    restaurant = db.get(Restaurant, restaurant_id)
    if restaurant is None:
        raise NotFoundError("Restaurant not found")
    return restaurant


@router.post("", response_model=RestaurantWriteResult)
async def upsert_restaurant(
    payload: RestaurantWrite,
    db: SessionDep,
    geocoder: GeocoderDep,
) -> RestaurantWriteResult:
    """Geocode the address and insert the restaurant, or update it by name.

    Nothing is written when the geocoder finds no match.
    """
    _require_name_and_address(payload)
    location = await _geocode(geocoder, payload.address)

    restaurant = db.query(Restaurant).filter(Restaurant.name == payload.name).first()
    if restaurant is None:
        restaurant = Restaurant()
        db.add(restaurant)
    _apply(restaurant, payload, location)
    db.commit()
    db.refresh(restaurant)
    return RestaurantWriteResult(id=restaurant.id)


@router.get("", response_model=list[RestaurantResponse])
async def list_restaurants(
    db: SessionDep,
    name: str | None = Query(None, description="Case-insensitive substring of the name"),
    english_speaking: str | None = Query(None),
    vegan: str | None = Query(None),
    vegetarian: str | None = Query(None),
    no_pork: str | None = Query(None),
    halal: str | None = Query(None),
    no_beef: str | None = Query(None),
    gluten_free: str | None = Query(None),
    allows_foreigners: str | None = Query(None),
    min_lat: str | None = Query(None, alias="minLat"),
    max_lat: str | None = Query(None, alias="maxLat"),
    min_lon: str | None = Query(None, alias="minLon"),
    max_lon: str | None = Query(None, alias="maxLon"),
) -> list[Restaurant]:
    """List restaurants matching every supplied filter, ordered by id.

    Flag filters accept only ``true`` or ``false``; other values are ignored.
    The bounding box applies only when all four edges are valid numbers.
    """
    flag_values = {
        "english_speaking": english_speaking,
        "vegan": vegan,
        "vegetarian": vegetarian,
        "no_pork": no_pork,
        "halal": halal,
        "no_beef": no_beef,
        "gluten_free": gluten_free,
        "allows_foreigners": allows_foreigners,
    }
    criteria = filters.combine(
        filters.within_bounds(
            Restaurant.latitude,
            Restaurant.longitude,
            min_lat=min_lat,
            max_lat=max_lat,
            min_lon=min_lon,
            max_lon=max_lon,
        ),
        filters.contains_ci(Restaurant.name, name),
        *(filters.flag(getattr(Restaurant, flag), flag_values[flag]) for flag in RESTAURANT_FLAGS),
    )
    return db.query(Restaurant).filter(criteria).order_by(Restaurant.id).all()


@router.get("/{restaurant_id}", response_model=RestaurantResponse)
async def get_restaurant(restaurant_id: int, db: SessionDep) -> Restaurant:
    """Get a specific restaurant by ID."""
    return _get_restaurant_or_404(db, restaurant_id)


@router.put("/{restaurant_id}", response_model=RestaurantResponse)
async def replace_restaurant(
    restaurant_id: int,
    payload: RestaurantWrite,
    db: SessionDep,
    geocoder: GeocoderDep,
) -> Restaurant:
    """Replace a restaurant, geocoding the submitted address again."""
    _require_name_and_address(payload)
    restaurant = _get_restaurant_or_404(db, restaurant_id)
    location = await _geocode(geocoder, payload.address)

    _apply(restaurant, payload, location)
    try:
        db.commit()
    except IntegrityError as err:
        db.rollback()
        raise ConflictError("A restaurant with that name already exists") from err
    db.refresh(restaurant)
    return restaurant


@router.delete("/{restaurant_id}", response_model=RestaurantDeleted)
async def delete_restaurant(restaurant_id: int, db: SessionDep) -> RestaurantDeleted:
    """Delete a restaurant and return the removed record."""
    restaurant = _get_restaurant_or_404(db, restaurant_id)
    deleted = RestaurantResponse.model_validate(restaurant)
    db.delete(restaurant)
    db.commit()
    return RestaurantDeleted(deleted=deleted)
