import logging
from typing import List

from estate_browser.core.store import generate_id, utc_now
from estate_browser.models.inquiry import Inquiry, InquiryCreate, InquiryUpdate, InquiryStatus
from estate_browser.modules.base import BaseEntityService

logger = logging.getLogger(__name__)


class InquiryService(BaseEntityService[Inquiry]):
    """Service for buyer inquiries about listings"""
    
    record_model = Inquiry
    create_model = InquiryCreate
    update_model = InquiryUpdate
    
    def _new_record(self, payload: InquiryCreate) -> Inquiry:
        # Submitted inquiries always start pending, stamped on arrival
        return Inquiry(
            **payload.model_dump(),
            id=generate_id(),
            timestamp=utc_now(),
            status=InquiryStatus.PENDING
        )
    
    async def get_by_property_id(self, property_id: str) -> List[Inquiry]:
        """Get inquiries about one property"""
        await self.store.simulate_io("get_by_property_id")
        return [i for i in self.store.snapshot() if i.property_id == property_id]
    
    async def get_by_user_id(self, user_id: str) -> List[Inquiry]:
        """Get inquiries sent by one user"""
        await self.store.simulate_io("get_by_user_id")
        return [i for i in self.store.snapshot() if i.user_id == user_id]
