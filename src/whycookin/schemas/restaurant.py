# src/whycookin/schemas/restaurant.py
"""Restaurant-related Pydantic schemas."""

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class RestaurantWrite(BaseModel):
    """Schema for creating or fully replacing a restaurant.

    ``name`` and ``address`` are optional at the schema level so the handler
    can answer a missing value with 400 rather than 422.
    """

    name: str | None = Field(None, description="Unique restaurant name")
    address: str | None = Field(None, description="Full street address, geocoded on write")
    english_speaking: bool = False
    vegan: bool = False
    vegetarian: bool = False
    no_pork: bool = False
    halal: bool = False
    no_beef: bool = False
    gluten_free: bool = False
    allows_foreigners: bool = False


class RestaurantWriteResult(BaseModel):
    """Acknowledgement returned after an upsert."""

    success: bool = True
    id: int


class RestaurantResponse(BaseModel):
    """Schema for restaurant information returned by the API."""

    id: int
    name: str
    english_speaking: bool
    vegan: bool
    vegetarian: bool
    no_pork: bool
    halal: bool
    no_beef: bool
    gluten_free: bool
    allows_foreigners: bool
    si_do: str | None = None
    si_gun_gu: str | None = None
    eup_myeon_dong: str | None = None
    postal_code: str | None = None
    road_name: str | None = None
    full_address: str
    lon: float = Field(..., validation_alias=AliasChoices("lon", "longitude"))
    lat: float = Field(..., validation_alias=AliasChoices("lat", "latitude"))

    model_config = ConfigDict(from_attributes=True)


class RestaurantDeleted(BaseModel):
    """Response returned after deleting a restaurant."""

    success: bool = True
    deleted: RestaurantResponse
