"""
Shared CRUD behaviour for the entity services
"""
import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Generic, List, Mapping, Type, Union

from pydantic import BaseModel

from estate_browser.core.store import RecordStore, RecordT, advance_timestamp

logger = logging.getLogger(__name__)


class BaseEntityService(ABC, Generic[RecordT]):
    """CRUD over one record store.

    Every operation waits out the store's simulated latency first, then does
    its lookup and mutation without awaiting again, so two calls never
    interleave halfway through a change.
    """

    record_model: Type[RecordT]
    create_model: Type[BaseModel]
    update_model: Type[BaseModel]

    def __init__(self, store: RecordStore[RecordT]):
        self.store = store

    @property
    def entity_name(self) -> str:
        return self.store.entity

    @staticmethod
    def _coerce(data: Union[BaseModel, Mapping[str, Any]], model: Type[BaseModel]) -> BaseModel:
        if isinstance(data, model):
            return data
        if isinstance(data, BaseModel):
            data = data.model_dump(exclude_unset=True)
        return model.model_validate(data)

    async def get_all(self) -> List[RecordT]:
        """Get every record in insertion order"""
        await self.store.simulate_io("get_all")
        return self.store.snapshot()

    async def get_by_id(self, record_id: str) -> RecordT:
        """Get one record by id"""
        await self.store.simulate_io("get_by_id")
        return self.store.get(record_id)

    async def create(self, data: Union[BaseModel, Mapping[str, Any]]) -> RecordT:
        """Store a new record with a generated id and timestamps"""
        payload = self._coerce(data, self.create_model)
        await self.store.simulate_io("create")
        record = self.store.append(self._new_record(payload))
        logger.info(f"Created {self.entity_name} {record.id}")
        return record

    async def update(self, record_id: str, partial: Union[BaseModel, Mapping[str, Any]]) -> RecordT:
        """Shallow-merge the explicitly set fields of ``partial`` over a record"""
        changes = self._coerce(partial, self.update_model).model_dump(exclude_unset=True)
        await self.store.simulate_io("update")
        record = self._apply_changes(record_id, changes)
        logger.info(f"Updated {self.entity_name} {record_id}: {sorted(changes)}")
        return record

    async def delete(self, record_id: str) -> RecordT:
        """Remove a record and return it"""
        await self.store.simulate_io("delete")
        index = self.store.require_index(record_id)
        removed = self.store.pop(index)
        logger.info(f"Deleted {self.entity_name} {record_id}")
        return removed

    @abstractmethod
    def _new_record(self, payload: BaseModel) -> RecordT:
        """Build the stored record for a create payload"""

    def _apply_changes(self, record_id: str, changes: Dict[str, Any]) -> RecordT:
        index = self.store.require_index(record_id)
        current = self.store.at(index)
        merged = {
            **current.model_dump(),
            **changes,
            "id": current.id,
            "updated_at": advance_timestamp(current.updated_at),
        }
        return self.store.replace(index, self.record_model.model_validate(merged))
