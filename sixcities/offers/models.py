"""
Pydantic Models for Offer Request/Response
"""

from datetime import datetime
from enum import Enum
from typing import Any, List, Optional
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class OfferType(str, Enum):
    """Kinds of housing an offer can describe."""
    APARTMENT = "apartment"
    HOUSE = "house"
    ROOM = "room"
    HOTEL = "hotel"


class Good(str, Enum):
    """Amenities an offer can list."""
    BREAKFAST = "Breakfast"
    AIR_CONDITIONING = "Air conditioning"
    LAPTOP_FRIENDLY_WORKSPACE = "Laptop friendly workspace"
    BABY_SEAT = "Baby seat"
    WASHER = "Washer"
    TOWELS = "Towels"
    FRIDGE = "Fridge"


OFFER_IMAGE_COUNT = 6


class CamelModel(BaseModel):
    """Base model exchanging camelCase JSON while keeping snake_case attributes."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Location(CamelModel):
    """Geographic coordinates."""
    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)


# Request Models

class CreateOfferDto(CamelModel):
    """Request model for creating an offer."""
    title: str = Field(..., min_length=10, max_length=100)
    description: str = Field(..., min_length=20, max_length=1024)
    city_id: str = Field(..., description="Identifier of the city the offer is in")
    preview_image: str
    images: List[str] = Field(..., min_length=OFFER_IMAGE_COUNT, max_length=OFFER_IMAGE_COUNT)
    is_premium: bool = False
    is_favorite: bool = False
    rating: float = Field(..., ge=1, le=5)
    type: OfferType
    bedrooms: int = Field(..., ge=1, le=8)
    max_adults: int = Field(..., ge=1, le=10)
    price: int = Field(..., ge=100, le=100000)
    goods: List[Good] = Field(..., min_length=1)
    host_name: str = Field(..., min_length=1, max_length=64)
    location: Location


class UpdateOfferDto(CamelModel):
    """Request model for a partial offer update. Only fields sent are applied."""
    title: Optional[str] = Field(None, min_length=10, max_length=100)
    description: Optional[str] = Field(None, min_length=20, max_length=1024)
    city_id: Optional[str] = None
    preview_image: Optional[str] = None
    images: Optional[List[str]] = Field(None, min_length=OFFER_IMAGE_COUNT, max_length=OFFER_IMAGE_COUNT)
    is_premium: Optional[bool] = None
    is_favorite: Optional[bool] = None
    rating: Optional[float] = Field(None, ge=1, le=5)
    type: Optional[OfferType] = None
    bedrooms: Optional[int] = Field(None, ge=1, le=8)
    max_adults: Optional[int] = Field(None, ge=1, le=10)
    price: Optional[int] = Field(None, ge=100, le=100000)
    goods: Optional[List[Good]] = Field(None, min_length=1)
    host_name: Optional[str] = Field(None, min_length=1, max_length=64)
    location: Optional[Location] = None


# Response Models

class CityRdo(CamelModel):
    """City as embedded in offer responses."""
    id: str
    name: str
    location: Location


class OfferPreviewRdo(CamelModel):
    """Offer shape used by list endpoints."""
    id: str
    title: str
    type: OfferType
    price: int
    city: CityRdo
    is_favorite: bool
    is_premium: bool
    rating: float
    preview_image: str
    post_date: datetime
    comment_count: int


class OfferRdo(OfferPreviewRdo):
    """Offer shape used by single-offer endpoints."""
    description: str
    images: List[str]
    bedrooms: int
    max_adults: int
    goods: List[Good]
    host_name: str
    location: Location


class ErrorRdo(BaseModel):
    """Standard error response model."""
    model_config = ConfigDict(populate_by_name=True)

    status_code: int = Field(..., alias="statusCode")
    message: str
    detail: Optional[Any] = None
