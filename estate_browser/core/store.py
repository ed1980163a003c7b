"""
In-memory record store backing one entity kind
"""
import logging
import uuid
from datetime import datetime, timedelta, timezone
from typing import Any, Generic, Iterable, List, Mapping, Optional, Type, TypeVar, Union

from pydantic import BaseModel, ValidationError

from .exceptions import FixtureError, NotFoundError
from .latency import LatencySimulator

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=BaseModel)


def generate_id() -> str:
    return uuid.uuid4().hex


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def advance_timestamp(previous: Optional[datetime] = None) -> datetime:
    """Current time, nudged past ``previous`` so update stamps strictly increase"""
    now = utc_now()
    if previous is None:
        return now
    if previous.tzinfo is None:
        previous = previous.replace(tzinfo=timezone.utc)
    if now <= previous:
        now = previous + timedelta(microseconds=1)
    return now


class RecordStore(Generic[RecordT]):
    """Ordered, mutable collection of records of one kind.

    The store never hands out its own record objects: every accessor except
    ``at`` returns deep copies. Callers are expected to await ``simulate_io``
    once per logical operation before touching the records.
    """
    
    def __init__(self, model: Type[RecordT], seed: Iterable[Union[RecordT, Mapping[str, Any]]] = (),
                 latency: Optional[LatencySimulator] = None, entity: Optional[str] = None):
        self.model = model
        self.entity = entity or model.__name__
        self.latency = latency or LatencySimulator.disabled()
        self._seed = [self._validate(raw) for raw in seed]
        self._records: List[RecordT] = []
        self.reset()
    
    def _validate(self, raw: Union[RecordT, Mapping[str, Any]]) -> RecordT:
        if isinstance(raw, self.model):
            return raw.model_copy(deep=True)
        try:
            return self.model.model_validate(raw)
        except ValidationError as e:
            raise FixtureError(f"Invalid {self.entity} seed record: {e}") from e
    
    def reset(self) -> None:
        """Drop all changes and restore the seed records"""
        self._records = [record.model_copy(deep=True) for record in self._seed]
    
    async def simulate_io(self, operation: str) -> None:
        await self.latency.wait(operation)
    
    def __len__(self) -> int:
        return len(self._records)
    
    def snapshot(self) -> List[RecordT]:
        return [record.model_copy(deep=True) for record in self._records]
    
    def find_index(self, record_id: str) -> int:
        for index, record in enumerate(self._records):
            if record.id == record_id:
                return index
        return -1
    
    def require_index(self, record_id: str) -> int:
        index = self.find_index(record_id)
        if index == -1:
            logger.warning(f"{self.entity} {record_id} not found")
            raise NotFoundError(self.entity, record_id)
        return index
    
    def at(self, index: int) -> RecordT:
        """Stored record itself; callers must not mutate it"""
        return self._records[index]
    
    def get(self, record_id: str) -> RecordT:
        return self.at(self.require_index(record_id)).model_copy(deep=True)
    
    def append(self, record: RecordT) -> RecordT:
        self._records.append(record.model_copy(deep=True))
        return record.model_copy(deep=True)
    
    def replace(self, index: int, record: RecordT) -> RecordT:
        self._records[index] = record.model_copy(deep=True)
        return record.model_copy(deep=True)
    
    def pop(self, index: int) -> RecordT:
        return self._records.pop(index)
