from typing import Optional
from datetime import datetime
from enum import Enum

from .base import PartialUpdate, RecordModel


class InquiryStatus(str, Enum):
    PENDING = "pending"
    RESPONDED = "responded"
    CLOSED = "closed"


class InquiryCreate(RecordModel):
    property_id: str  # not checked against the property store
    name: str
    email: str
    phone: str = ""
    message: str = ""
    user_id: Optional[str] = None


class Inquiry(InquiryCreate):
    id: str
    timestamp: datetime
    status: InquiryStatus = InquiryStatus.PENDING
    updated_at: Optional[datetime] = None


class InquiryUpdate(PartialUpdate):
    nullable_fields = frozenset({"user_id"})
    
    property_id: Optional[str] = None
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    message: Optional[str] = None
    status: Optional[InquiryStatus] = None
    user_id: Optional[str] = None
