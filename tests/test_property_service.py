import pytest
import asyncio
from pydantic import ValidationError

from estate_browser.core.exceptions import NotFoundError
from estate_browser.models.property import (
    Address, ListingType, PropertyCreate, PropertyType, PropertyUpdate
)
from estate_browser.models.search import SearchFilters


@pytest.fixture
def new_listing():
    return PropertyCreate(
        title="Lake House",
        type=PropertyType.RESIDENTIAL,
        listing_type=ListingType.SALE,
        price=150000,
        address=Address(street="1 Shore Rd", city="Reno", state="NV", zipCode="89501"),
        bedrooms=3,
        bathrooms=2,
        area=1600,
        description="Cabin on the water",
        amenities=["Fireplace", "Parking"],
        images=["https://example.com/lake.jpg"],
        agent_id="agent-9"
    )


class TestPropertyReads:
    """Test property listing reads"""
    
    @pytest.mark.asyncio
    async def test_get_all_in_seed_order(self, property_service):
        properties = await property_service.get_all()
        assert [p.id for p in properties] == ["1", "2", "3", "4", "5", "6"]
    
    @pytest.mark.asyncio
    async def test_get_by_id(self, property_service):
        for property_id in ["1", "3", "6"]:
            prop = await property_service.get_by_id(property_id)
            assert prop.id == property_id
    
    @pytest.mark.asyncio
    async def test_get_by_id_not_found(self, property_service):
        with pytest.raises(NotFoundError) as exc_info:
            await property_service.get_by_id("999")
        assert str(exc_info.value) == "Property not found: 999"
    
    @pytest.mark.asyncio
    async def test_returned_records_are_defensive_copies(self, property_service):
        """Test that caller mutation does not corrupt the store"""
        prop = await property_service.get_by_id("1")
        prop.amenities.append("Helipad")
        prop.address.city = "Elsewhere"
        prop.price = 1
        
        fresh = await property_service.get_by_id("1")
        assert "Helipad" not in fresh.amenities
        assert fresh.address.city == "Brooklyn"
        assert fresh.price == 485000
        
        everything = await property_service.get_all()
        everything.clear()
        assert len(await property_service.get_all()) == 6


class TestPropertyWrites:
    """Test create, update and delete of listings"""
    
    @pytest.mark.asyncio
    async def test_create_then_get(self, property_service, new_listing):
        """Test that a created listing round-trips with id and timestamps added"""
        created = await property_service.create(new_listing)
        fetched = await property_service.get_by_id(created.id)
        
        assert fetched == created
        assert fetched.model_dump(exclude={"id", "created_at", "updated_at"}) == new_listing.model_dump()
        assert fetched.created_at == fetched.updated_at
        assert fetched.created_at.tzinfo is not None
    
    @pytest.mark.asyncio
    async def test_create_appends(self, property_service, new_listing):
        created = await property_service.create(new_listing)
        properties = await property_service.get_all()
        assert len(properties) == 7
        assert properties[-1].id == created.id
    
    @pytest.mark.asyncio
    async def test_create_from_dict(self, property_service):
        created = await property_service.create({
            "title": "Warehouse",
            "type": "commercial",
            "listingType": "rent",
            "price": 12000,
            "address": {"city": "Newark", "state": "NJ"}
        })
        assert created.type == PropertyType.COMMERCIAL
        assert created.address.city == "Newark"
    
    @pytest.mark.asyncio
    async def test_rapid_creates_get_unique_ids(self, property_service, new_listing):
        created = await asyncio.gather(*[property_service.create(new_listing) for _ in range(50)])
        assert len({p.id for p in created}) == 50
    
    @pytest.mark.asyncio
    async def test_update_changes_only_given_field(self, property_service):
        """Test that a partial update leaves every other field untouched"""
        before = await property_service.get_by_id("2")
        after = await property_service.update("2", PropertyUpdate(price=3900))
        
        assert after.price == 3900
        assert after.updated_at > before.updated_at
        unchanged = {"price", "updated_at"}
        assert after.model_dump(exclude=unchanged) == before.model_dump(exclude=unchanged)
        assert await property_service.get_by_id("2") == after
    
    @pytest.mark.asyncio
    async def test_update_replaces_nested_address_whole(self, property_service):
        after = await property_service.update("1", {"address": {"city": "Queens"}})
        assert after.address.city == "Queens"
        assert after.address.street == ""
    
    @pytest.mark.asyncio
    async def test_update_cannot_change_id(self, property_service):
        after = await property_service.update("1", {"id": "hijacked", "title": "Renamed"})
        assert after.id == "1"
        assert after.title == "Renamed"
        with pytest.raises(NotFoundError):
            await property_service.get_by_id("hijacked")
    
    @pytest.mark.asyncio
    async def test_updated_at_strictly_advances(self, property_service):
        stamps = []
        for price in (1, 2, 3, 4, 5):
            updated = await property_service.update("3", PropertyUpdate(price=price))
            stamps.append(updated.updated_at)
        assert stamps == sorted(stamps)
        assert len(set(stamps)) == len(stamps)
    
    @pytest.mark.asyncio
    async def test_update_with_null_required_field_leaves_record(self, property_service):
        """Test that a null price is refused before the stored listing is touched"""
        before = await property_service.get_by_id("1")
        with pytest.raises(ValidationError):
            await property_service.update("1", {"description": "x", "price": None})
        assert await property_service.get_by_id("1") == before
    
    @pytest.mark.asyncio
    async def test_update_not_found(self, property_service):

        with pytest.raises(NotFoundError):
            await property_service.update("999", PropertyUpdate(price=1))
    
    @pytest.mark.asyncio
    async def test_concurrent_updates_both_merge(self, property_service):
        """Test that updates to different fields of one record are both kept"""
        await asyncio.gather(
            property_service.update("4", PropertyUpdate(title="Sunny Studio")),
            property_service.update("4", PropertyUpdate(bedrooms=2))
        )
        prop = await property_service.get_by_id("4")
        assert prop.title == "Sunny Studio"
        assert prop.bedrooms == 2
    
    @pytest.mark.asyncio
    async def test_delete(self, property_service):
        """Test that delete removes exactly one record and returns it"""
        removed = await property_service.delete("5")
        
        assert removed.id == "5"
        assert removed.title == "Class A Office Suite"
        assert len(await property_service.get_all()) == 5
        with pytest.raises(NotFoundError):
            await property_service.get_by_id("5")
    
    @pytest.mark.asyncio
    async def test_delete_not_found(self, property_service):
        with pytest.raises(NotFoundError):
            await property_service.delete("999")
        assert len(await property_service.get_all()) == 6


class TestSearchProperties:
    """Test service-level property search"""
    
    @pytest.mark.asyncio
    async def test_no_filters_returns_everything_in_order(self, property_service):
        everything = await property_service.get_all()
        assert await property_service.search_properties({}) == everything
        assert await property_service.search_properties() == everything
        assert await property_service.search_properties(SearchFilters()) == everything
    
    @pytest.mark.asyncio
    async def test_price_range_inclusive(self, property_service, new_listing):
        created = await property_service.create(new_listing)
        results = await property_service.search_properties(
            SearchFilters(min_price=100000, max_price=200000)
        )
        assert [p.id for p in results] == [created.id]
        
        results = await property_service.search_properties(
            SearchFilters(min_price=215000, max_price=485000)
        )
        assert [p.id for p in results] == ["1", "4"]
        assert all(215000 <= p.price <= 485000 for p in results)
    
    @pytest.mark.asyncio
    async def test_location_matches_city_or_state_case_insensitive(self, property_service):
        by_state = await property_service.search_properties({"location": "nj"})
        assert [p.id for p in by_state] == ["3", "6"]
        
        by_city = await property_service.search_properties({"location": "BROOK"})
        assert [p.id for p in by_city] == ["1", "4"]
    
    @pytest.mark.asyncio
    async def test_type_and_listing_type(self, property_service):
        results = await property_service.search_properties(
            SearchFilters(property_type=PropertyType.COMMERCIAL, listing_type=ListingType.SALE)
        )
        assert [p.id for p in results] == ["5"]
        
        rentals = await property_service.search_properties({"listingType": "rent"})
        assert [p.id for p in rentals] == ["2", "3"]
    
    @pytest.mark.asyncio
    async def test_minimum_bedrooms(self, property_service):
        results = await property_service.search_properties(SearchFilters(bedrooms=3))
        assert [p.id for p in results] == ["1", "6"]
    
    @pytest.mark.asyncio
    async def test_filters_are_anded(self, property_service):
        results = await property_service.search_properties(
            SearchFilters(location="NY", max_price=500000, bedrooms=2)
        )
        assert [p.id for p in results] == ["1", "2"]
    
    @pytest.mark.asyncio
    async def test_search_does_not_mutate_store(self, property_service):
        results = await property_service.search_properties(SearchFilters(location="nowhere"))
        assert results == []
        assert len(await property_service.get_all()) == 6
