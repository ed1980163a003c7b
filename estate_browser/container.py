"""
Wiring of stores and services.

Nothing in the package holds a global store; whoever builds a
``ServiceContainer`` owns the data for as long as it keeps the container.
"""
import logging
import random
from typing import Optional

from estate_browser.core.config import Settings, settings as default_settings
from estate_browser.core.fixtures import load_fixture
from estate_browser.core.latency import LatencySimulator
from estate_browser.core.store import RecordStore
from estate_browser.models.inquiry import Inquiry, InquiryStatus, InquiryUpdate
from estate_browser.models.property import Property
from estate_browser.models.user import User, UserUpdate
from estate_browser.modules.inquiries.service import InquiryService
from estate_browser.modules.properties.service import PropertyService
from estate_browser.modules.users.service import UserService

logger = logging.getLogger(__name__)


class ServiceContainer:
    """Holds the three entity services built over their own stores"""
    
    def __init__(self, properties: PropertyService, inquiries: InquiryService, users: UserService):
        self.properties = properties
        self.inquiries = inquiries
        self.users = users
    
    @classmethod
    def from_settings(cls, config: Optional[Settings] = None,
                      rng: Optional[random.Random] = None) -> "ServiceContainer":
        """Seed every store from the fixture documents and share one latency simulator"""
        config = config or default_settings
        latency = LatencySimulator(scale=config.LATENCY_SCALE, jitter_ms=config.LATENCY_JITTER_MS, rng=rng)
        fixtures_dir = config.FIXTURES_DIR
        
        container = cls(
            properties=PropertyService(
                RecordStore(Property, load_fixture("property", fixtures_dir), latency)
            ),
            inquiries=InquiryService(
                RecordStore(Inquiry, load_fixture("inquiry", fixtures_dir), latency)
            ),
            users=UserService(
                RecordStore(User, load_fixture("user", fixtures_dir), latency)
            ),
        )
        logger.info(
            f"Loaded {len(container.properties.store)} properties, "
            f"{len(container.inquiries.store)} inquiries, {len(container.users.store)} users"
        )
        return container
    
    def reset(self) -> None:
        """Restore every store to its seed data"""
        for service in (self.properties, self.inquiries, self.users):
            service.store.reset()
    
    async def delete_property_cascade(self, property_id: str) -> Property:
        """Delete a listing and clean up what points at it.

        The id is dropped from every user's saved properties and listings.
        Inquiries about the listing are kept as a contact record but closed.
        """
        removed = await self.properties.delete(property_id)
        
        for user in await self.users.get_all():
            if property_id in user.saved_properties or property_id in user.listings:
                await self.users.update(user.id, UserUpdate(
                    saved_properties=[p for p in user.saved_properties if p != property_id],
                    listings=[p for p in user.listings if p != property_id]
                ))
        
        for inquiry in await self.inquiries.get_by_property_id(property_id):
            if inquiry.status != InquiryStatus.CLOSED:
                await self.inquiries.update(inquiry.id, InquiryUpdate(status=InquiryStatus.CLOSED))
        
        logger.info(f"Deleted property {property_id} with cascading cleanup")
        return removed
