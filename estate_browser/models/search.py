from pydantic import BaseModel, Field, field_validator
from typing import Optional

from .base import RecordModel
from .property import PropertyType, ListingType


class SearchFilters(RecordModel):
    """Service-level search; every filter left as None imposes no constraint"""
    location: Optional[str] = None  # substring of city or state
    min_price: Optional[float] = None
    max_price: Optional[float] = None
    property_type: Optional[PropertyType] = None
    listing_type: Optional[ListingType] = None
    bedrooms: Optional[int] = None  # minimum


class FilterState(RecordModel):
    """Interactive filter bar state, kept as the raw strings the inputs hold"""
    search_term: str = ""
    property_type: str = "all"
    min_price: str = ""
    max_price: str = ""
    
    @field_validator('min_price', 'max_price', mode='before')
    @classmethod
    def price_as_text(cls, v):
        # Number inputs may hand over a number, or nothing at all
        if v is None:
            return ""
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(v)
        return v


class ListingSummary(BaseModel):
    total: int = Field(0, ge=0)
    for_sale: int = Field(0, ge=0)
    for_rent: int = Field(0, ge=0)
    commercial: int = Field(0, ge=0)
