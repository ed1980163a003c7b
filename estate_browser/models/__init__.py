# Pydantic models for stored records and service inputs

from .base import PartialUpdate, RecordModel
from .property import (
    Property, PropertyCreate, PropertyUpdate, PropertyType, ListingType,
    Address, Coordinates
)
from .inquiry import Inquiry, InquiryCreate, InquiryUpdate, InquiryStatus
from .user import User, UserCreate, UserUpdate
from .search import SearchFilters, FilterState, ListingSummary

__all__ = [
    "RecordModel", "PartialUpdate",
    
    # Property models
    "Property", "PropertyCreate", "PropertyUpdate", "PropertyType", "ListingType",
    "Address", "Coordinates",
    
    # Inquiry models
    "Inquiry", "InquiryCreate", "InquiryUpdate", "InquiryStatus",
    
    # User models
    "User", "UserCreate", "UserUpdate",
    
    # Search models
    "SearchFilters", "FilterState", "ListingSummary"
]
