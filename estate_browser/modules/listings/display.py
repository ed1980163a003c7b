from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable, Optional

from estate_browser.models.property import ListingType, Property, PropertyType
from estate_browser.models.search import ListingSummary

PLACEHOLDER_IMAGE = "https://images.unsplash.com/photo-1564013799919-ab600027ffc6?auto=format&fit=crop&w=800&q=80"


def format_price(price: Optional[float]) -> str:
    """US dollars without cents, e.g. ``$1,250,000``"""
    # Half away from zero, like the browser's currency formatter
    dollars = Decimal(str(price or 0)).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    return f"${int(dollars):,}"


def primary_image(prop: Property) -> str:
    return prop.images[0] if prop.images else PLACEHOLDER_IMAGE


def summarize_listings(properties: Iterable[Property]) -> ListingSummary:
    """Counts shown above the listing grid"""
    summary = ListingSummary()
    for prop in properties:
        summary.total += 1
        if prop.listing_type == ListingType.SALE:
            summary.for_sale += 1
        elif prop.listing_type == ListingType.RENT:
            summary.for_rent += 1
        if prop.type == PropertyType.COMMERCIAL:
            summary.commercial += 1
    return summary
