import logging
from typing import Any, List, Mapping, Optional, Union

from estate_browser.core.store import generate_id, utc_now
from estate_browser.models.property import Property, PropertyCreate, PropertyUpdate
from estate_browser.models.search import SearchFilters
from estate_browser.modules.base import BaseEntityService
from estate_browser.modules.search.filters import apply_search_filters

logger = logging.getLogger(__name__)


class PropertyService(BaseEntityService[Property]):
    """Service for property listings"""
    
    record_model = Property
    create_model = PropertyCreate
    update_model = PropertyUpdate
    
    def _new_record(self, payload: PropertyCreate) -> Property:
        now = utc_now()
        return Property(
            **payload.model_dump(),
            id=generate_id(),
            created_at=now,
            updated_at=now
        )
    
    async def search_properties(self, filters: Optional[Union[SearchFilters, Mapping[str, Any]]] = None) -> List[Property]:
        """Search listings; all supplied filters must match"""
        criteria = self._coerce(filters or {}, SearchFilters)
        await self.store.simulate_io("search")
        results = apply_search_filters(self.store.snapshot(), criteria)
        logger.debug(f"Search {criteria.model_dump(exclude_none=True)} matched {len(results)} properties")
        return results
