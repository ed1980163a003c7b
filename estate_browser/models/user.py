from pydantic import field_validator
from typing import Optional, List
from datetime import datetime

from .base import PartialUpdate, RecordModel


class UserCreate(RecordModel):
    name: str
    email: str
    phone: str = ""
    role: str = "buyer"
    avatar: Optional[str] = None


class User(UserCreate):
    id: str
    saved_properties: List[str] = []
    listings: List[str] = []
    created_at: datetime
    updated_at: Optional[datetime] = None
    
    @field_validator('saved_properties', 'listings')
    @classmethod
    def dedupe_property_ids(cls, v):
        # Set semantics, insertion order kept
        return list(dict.fromkeys(v))


class UserUpdate(PartialUpdate):
    nullable_fields = frozenset({"avatar"})
    
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    role: Optional[str] = None
    avatar: Optional[str] = None
    saved_properties: Optional[List[str]] = None
    listings: Optional[List[str]] = None
