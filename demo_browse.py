"""
Demonstration of browsing, filtering and creating listings against the mock data layer.
"""
import asyncio

from estate_browser.container import ServiceContainer
from estate_browser.core.config import settings
from estate_browser.core.exceptions import NotFoundError
from estate_browser.core.logging import configure_logging
from estate_browser.models.property import Address, ListingType, PropertyType
from estate_browser.models.search import FilterState, SearchFilters
from estate_browser.modules.listings import (
    InquiryForm, ListingForm, build_inquiry, build_property, format_price, summarize_listings
)
from estate_browser.modules.search import filter_properties


async def demo_browse():
    """Walk through the main flows of the listing browser"""
    container = ServiceContainer.from_settings(settings)

    print("🏠 Estate Browser - Mock Data Layer Demo")
    print("=" * 60)

    properties = await container.properties.get_all()
    summary = summarize_listings(properties)
    print(f"\n📋 {summary.total} listings: {summary.for_sale} for sale, "
          f"{summary.for_rent} for rent, {summary.commercial} commercial")
    for prop in properties:
        print(f"  • [{prop.id}] {prop.title} - {prop.address.city}, {prop.address.state} "
              f"- {format_price(prop.price)}")

    print("\n🔍 Filter bar: 'brooklyn', residential, up to $300,000")
    state = FilterState(search_term="brooklyn", property_type="residential", max_price="300000")
    for prop in filter_properties(properties, state):
        print(f"  • {prop.title} ({format_price(prop.price)})")

    print("\n🔍 Search: NJ rentals")
    for prop in await container.properties.search_properties(
            SearchFilters(location="NJ", listing_type=ListingType.RENT)):
        print(f"  • {prop.title}")

    print("\n📝 Creating a listing from the form")
    form = ListingForm(
        title="Riverside Townhouse",
        type=PropertyType.RESIDENTIAL,
        listing_type=ListingType.SALE,
        price="725000",
        address=Address(street="12 Dock St", city="Hoboken", state="NJ", zip_code="07030"),
        bedrooms="3",
        bathrooms="2",
        area="1900",
        amenities=["Balcony", "Parking"]
    )
    created = await container.properties.create(build_property(form))
    print(f"  • Created {created.id} at ({created.coordinates.lat:.4f}, {created.coordinates.lng:.4f})")

    inquiry = await container.inquiries.create(
        build_inquiry(InquiryForm(name="Demo User", email="demo@example.com",
                                  message="Can I see it Saturday?"), property_id=created.id)
    )
    print(f"  • Inquiry {inquiry.id} is {inquiry.status.value}")

    await container.users.save_property("user-1", created.id)
    await container.delete_property_cascade(created.id)
    user = await container.users.get_by_id("user-1")
    print(f"\n🗑️  Deleted {created.id}; user-1 saved properties now {user.saved_properties}")

    try:
        await container.properties.get_by_id(created.id)
    except NotFoundError as e:
        print(f"  • {e}")


if __name__ == "__main__":
    configure_logging(settings.LOG_LEVEL)
    asyncio.run(demo_browse())
