from pydantic import BaseModel, model_validator
from pydantic.alias_generators import to_camel
from typing import ClassVar, FrozenSet


class RecordModel(BaseModel):
    """Base for stored records and their inputs.

    Fixture documents and callers coming from the browser use camelCase keys
    (``listingType``, ``zipCode``); Python callers use field names. Both are
    accepted, and ``model_dump(by_alias=True)`` gives back the camelCase shape.
    """
    
    class Config:
        alias_generator = to_camel
        populate_by_name = True


class PartialUpdate(RecordModel):
    """Partial update; only fields explicitly set are merged.

    Every field defaults to None so it can be left out, but an explicit None
    is only accepted for fields the stored record allows to be empty.
    """
    
    nullable_fields: ClassVar[FrozenSet[str]] = frozenset()
    
    @model_validator(mode='after')
    def reject_explicit_nulls(self):
        nulled = sorted(
            name for name in self.model_fields_set
            if getattr(self, name) is None and name not in self.nullable_fields
        )
        if nulled:
            raise ValueError(f"Fields cannot be set to null: {', '.join(nulled)}")
        return self
