import pytest
from datetime import datetime, timezone

from estate_browser.container import ServiceContainer
from estate_browser.core.config import Settings
from estate_browser.models.property import Property, Address, PropertyType, ListingType


@pytest.fixture
def test_settings():
    """Settings with latency switched off and the bundled fixtures"""
    return Settings(LATENCY_SCALE=0, LATENCY_JITTER_MS=0, FIXTURES_DIR=None)


@pytest.fixture
def container(test_settings):
    """Fresh, independently seeded stores for every test"""
    return ServiceContainer.from_settings(test_settings)


@pytest.fixture
def property_service(container):
    return container.properties


@pytest.fixture
def inquiry_service(container):
    return container.inquiries


@pytest.fixture
def user_service(container):
    return container.users


def make_property(id, title, city, price, type=PropertyType.RESIDENTIAL, state="",
                  listing_type=ListingType.SALE, bedrooms=0):
    stamp = datetime(2024, 1, 1, tzinfo=timezone.utc)
    return Property(
        id=id,
        title=title,
        type=type,
        listing_type=listing_type,
        price=price,
        address=Address(city=city, state=state),
        bedrooms=bedrooms,
        created_at=stamp,
        updated_at=stamp
    )


@pytest.fixture
def sample_properties():
    """The two listings used throughout the filter bar tests"""
    return [
        make_property("lake", "Lake House", "Reno", 150000, PropertyType.RESIDENTIAL, state="NV"),
        make_property("loft", "Downtown Loft", "Austin", 300000, PropertyType.COMMERCIAL, state="TX"),
    ]
