import logging

from estate_browser.core.store import generate_id, utc_now
from estate_browser.models.user import User, UserCreate, UserUpdate
from estate_browser.modules.base import BaseEntityService

logger = logging.getLogger(__name__)


class UserService(BaseEntityService[User]):
    """Service for users, their saved properties and their own listings"""
    
    record_model = User
    create_model = UserCreate
    update_model = UserUpdate
    
    def _new_record(self, payload: UserCreate) -> User:
        return User(
            **payload.model_dump(),
            id=generate_id(),
            saved_properties=[],
            listings=[],
            created_at=utc_now()
        )
    
    async def save_property(self, user_id: str, property_id: str) -> User:
        """Add a property to the user's saved set"""
        await self.store.simulate_io("save_property")
        return self._add_member(user_id, "saved_properties", property_id)
    
    async def unsave_property(self, user_id: str, property_id: str) -> User:
        """Remove a property from the user's saved set"""
        await self.store.simulate_io("unsave_property")
        return self._remove_member(user_id, "saved_properties", property_id)
    
    async def add_listing(self, user_id: str, property_id: str) -> User:
        """Record a property as listed by the user"""
        await self.store.simulate_io("add_listing")
        return self._add_member(user_id, "listings", property_id)
    
    async def remove_listing(self, user_id: str, property_id: str) -> User:
        await self.store.simulate_io("remove_listing")
        return self._remove_member(user_id, "listings", property_id)
    
    def _add_member(self, user_id: str, field: str, property_id: str) -> User:
        user = self.store.get(user_id)
        members = getattr(user, field)
        if property_id in members:
            return user
        
        logger.info(f"Adding property {property_id} to {field} of user {user_id}")
        return self._apply_changes(user_id, {field: members + [property_id]})
    
    def _remove_member(self, user_id: str, field: str, property_id: str) -> User:
        user = self.store.get(user_id)
        members = getattr(user, field)
        if property_id not in members:
            return user
        
        logger.info(f"Removing property {property_id} from {field} of user {user_id}")
        return self._apply_changes(user_id, {field: [m for m in members if m != property_id]})
