"""
Error types raised by the data-access layer
"""
from typing import Optional


class EstateBrowserError(Exception):
    """Base class for all estate browser errors"""


class NotFoundError(EstateBrowserError, LookupError):
    """Raised when an id-keyed lookup finds no record"""
    
    def __init__(self, entity: str, record_id: Optional[str]):
        self.entity = entity
        self.record_id = record_id
        super().__init__(f"{entity} not found: {record_id}")


class FixtureError(EstateBrowserError):
    """Raised when a seed document is missing or malformed"""
