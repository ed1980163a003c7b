# Helpers the listing and inquiry forms use to talk to the services

from .forms import (
    POPULAR_AMENITIES, ListingForm, InquiryForm, build_property, build_inquiry,
    toggle_amenity
)
from .display import format_price, primary_image, summarize_listings

__all__ = [
    "POPULAR_AMENITIES", "ListingForm", "InquiryForm", "build_property", "build_inquiry",
    "toggle_amenity", "format_price", "primary_image", "summarize_listings"
]
