"""
Conversion of the browser's form state into service payloads
"""
import random
from typing import List, Optional

from pydantic import BaseModel

from estate_browser.core.config import settings
from estate_browser.models.base import RecordModel
from estate_browser.models.inquiry import InquiryCreate
from estate_browser.models.property import (
    Address, Coordinates, ListingType, PropertyCreate, PropertyType
)

POPULAR_AMENITIES = [
    "Swimming Pool", "Gym", "Parking", "Balcony", "Garden", "Fireplace",
    "Air Conditioning", "Dishwasher", "Laundry", "Security System"
]

DEFAULT_LISTING_IMAGES = [
    "https://images.unsplash.com/photo-1564013799919-ab600027ffc6?auto=format&fit=crop&w=800&q=80",
    "https://images.unsplash.com/photo-1560448204-e02f11c3d0e2?auto=format&fit=crop&w=800&q=80",
]

# Half-width of the square, in degrees, that new map pins are scattered over
COORDINATE_JITTER = 0.05


class ListingForm(RecordModel):
    """New-listing form as typed by the user; numbers are still strings"""
    title: str = ""
    type: PropertyType = PropertyType.RESIDENTIAL
    listing_type: ListingType = ListingType.SALE
    price: str = ""
    address: Address = Address()
    bedrooms: str = ""
    bathrooms: str = ""
    area: str = ""
    description: str = ""
    amenities: List[str] = []


class InquiryForm(BaseModel):
    name: str = ""
    email: str = ""
    phone: str = ""
    message: str = ""


def toggle_amenity(amenities: List[str], amenity: str) -> List[str]:
    """Remove ``amenity`` if selected, otherwise append it"""
    if amenity in amenities:
        return [a for a in amenities if a != amenity]
    return amenities + [amenity]


def jitter_coordinates(rng: Optional[random.Random] = None, origin_lat: Optional[float] = None,
                       origin_lng: Optional[float] = None) -> Coordinates:
    """Decorative map pin near the origin; not a geocoded position"""
    rng = rng or random
    lat = settings.MAP_ORIGIN_LAT if origin_lat is None else origin_lat
    lng = settings.MAP_ORIGIN_LNG if origin_lng is None else origin_lng
    return Coordinates(
        lat=lat + (rng.random() - 0.5) * 2 * COORDINATE_JITTER,
        lng=lng + (rng.random() - 0.5) * 2 * COORDINATE_JITTER
    )


def build_property(form: ListingForm, rng: Optional[random.Random] = None,
                   agent_id: Optional[str] = None) -> PropertyCreate:
    """Turn a submitted listing form into a create payload.

    Raises ``ValueError`` when a numeric field does not parse; the form is
    expected to have enforced that before submission.
    """
    return PropertyCreate(
        title=form.title,
        type=form.type,
        listing_type=form.listing_type,
        price=float(form.price),
        address=form.address,
        bedrooms=int(form.bedrooms),
        bathrooms=int(form.bathrooms),
        area=int(form.area),
        description=form.description,
        amenities=list(form.amenities),
        images=list(DEFAULT_LISTING_IMAGES),
        coordinates=jitter_coordinates(rng),
        agent_id=agent_id or settings.DEFAULT_AGENT_ID
    )


def build_inquiry(form: InquiryForm, property_id: str, user_id: Optional[str] = None) -> InquiryCreate:
    return InquiryCreate(
        property_id=property_id,
        name=form.name,
        email=form.email,
        phone=form.phone,
        message=form.message,
        user_id=user_id
    )
