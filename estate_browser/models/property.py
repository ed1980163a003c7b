from pydantic import Field, field_validator
from typing import Optional, List
from datetime import datetime
from enum import Enum

from .base import PartialUpdate, RecordModel


class PropertyType(str, Enum):
    RESIDENTIAL = "residential"
    COMMERCIAL = "commercial"


class ListingType(str, Enum):
    SALE = "sale"
    RENT = "rent"


class Address(RecordModel):
    street: str = ""
    city: str = ""
    state: str = ""
    zip_code: str = ""


class Coordinates(RecordModel):
    # Approximate map pin only, never geocoded
    lat: float
    lng: float


class PropertyBase(RecordModel):
    title: str
    type: PropertyType = PropertyType.RESIDENTIAL
    listing_type: ListingType = ListingType.SALE
    price: float = Field(0, ge=0)
    address: Address = Field(default_factory=Address)
    bedrooms: int = Field(0, ge=0)
    bathrooms: int = Field(0, ge=0)
    area: int = Field(0, ge=0)  # square feet
    description: str = ""
    amenities: List[str] = []
    images: List[str] = []
    coordinates: Optional[Coordinates] = None
    agent_id: Optional[str] = None
    
    @field_validator('amenities')
    @classmethod
    def dedupe_amenities(cls, v):
        # Set semantics, display order kept
        return list(dict.fromkeys(v))


class PropertyCreate(PropertyBase):
    """Caller-supplied fields for a new listing"""


class Property(PropertyBase):
    id: str
    created_at: datetime
    updated_at: datetime


class PropertyUpdate(PartialUpdate):
    nullable_fields = frozenset({"coordinates", "agent_id"})
    
    title: Optional[str] = None
    type: Optional[PropertyType] = None
    listing_type: Optional[ListingType] = None
    price: Optional[float] = Field(None, ge=0)
    address: Optional[Address] = None
    bedrooms: Optional[int] = Field(None, ge=0)
    bathrooms: Optional[int] = Field(None, ge=0)
    area: Optional[int] = Field(None, ge=0)
    description: Optional[str] = None
    amenities: Optional[List[str]] = None
    images: Optional[List[str]] = None
    coordinates: Optional[Coordinates] = None
    agent_id: Optional[str] = None
