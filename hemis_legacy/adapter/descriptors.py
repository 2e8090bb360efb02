"""
Field-descriptor tables for record types.

A record type is a pydantic model. Its descriptor table is built once per type
and records, for every stored and computed field:

- the attribute name on the model,
- the wire key (the pydantic alias when declared, else the attribute name),
- the semantic kind used to select conversion rules,
- whether the field survives the ``_local`` view.

Tables are derived deterministically from the type, so they are cached without
locking and shared across threads.
"""

from __future__ import annotations

import enum
import types
import uuid
from dataclasses import dataclass
from datetime import date, datetime
from functools import lru_cache
from typing import Any, Optional, Tuple, Union, get_args, get_origin

from pydantic import BaseModel

ENTITY_NAME_KEY = "_entityName"
INSTANCE_NAME_KEY = "_instanceName"
METADATA_KEYS = (ENTITY_NAME_KEY, INSTANCE_NAME_KEY)

VIEW_LOCAL = "_local"
# Housekeeping keys the legacy `_local` view never returned.
LOCAL_EXCLUDED_KEYS = frozenset({"version", "fullname"})


class FieldKind(str, enum.Enum):
    """Semantic type of a record field, as far as the wire format cares."""

    IDENTIFIER = "identifier"
    DATETIME = "datetime"
    DATE = "date"
    ENUM = "enum"
    INTEGER = "integer"
    BOOLEAN = "boolean"
    RECORD = "record"
    SCALAR = "scalar"


@dataclass(frozen=True)
class FieldDescriptor:
    attribute: str
    wire_key: str
    kind: FieldKind
    python_type: Any = None
    computed: bool = False

    @property
    def local(self) -> bool:
        """Whether the field is part of the `_local` view."""
        if self.computed:
            return False
        return not self.wire_key.startswith("_") and self.wire_key not in LOCAL_EXCLUDED_KEYS


@dataclass(frozen=True)
class RecordDescriptor:
    record_type: type
    fields: Tuple[FieldDescriptor, ...]
    computed: Tuple[FieldDescriptor, ...]

    def visible_fields(self, view: Optional[str]) -> Tuple[FieldDescriptor, ...]:
        """Stored fields emitted for `view`, in declaration order."""
        if view == VIEW_LOCAL:
            return tuple(f for f in self.fields if f.local)
        return self.fields

    def visible_computed(self, view: Optional[str]) -> Tuple[FieldDescriptor, ...]:
        if view == VIEW_LOCAL:
            return ()
        return self.computed

    def by_attribute(self, attribute: str) -> Optional[FieldDescriptor]:
        for descriptor in self.fields:
            if descriptor.attribute == attribute:
                return descriptor
        return None


def _unwrap_optional(annotation: Any) -> Any:
    """Reduce `Optional[X]` / `X | None` to `X`; other unions stay as they are."""
    origin = get_origin(annotation)
    if origin is Union or origin is types.UnionType:
        members = [arg for arg in get_args(annotation) if arg is not type(None)]
        if len(members) == 1:
            return members[0]
    return annotation


def kind_for(annotation: Any) -> FieldKind:
    """Map a (possibly optional) annotation to its semantic kind."""
    python_type = _unwrap_optional(annotation)
    # Parametrised generics such as list[int] pass isinstance(.., type) on 3.10.
    if get_origin(python_type) is not None:
        return FieldKind.SCALAR
    if not isinstance(python_type, type):
        return FieldKind.SCALAR
    # Order matters: bool is an int, IntEnum is an int, datetime is a date.
    if issubclass(python_type, bool):
        return FieldKind.BOOLEAN
    if issubclass(python_type, enum.Enum):
        return FieldKind.ENUM
    if issubclass(python_type, int):
        return FieldKind.INTEGER
    if issubclass(python_type, uuid.UUID):
        return FieldKind.IDENTIFIER
    if issubclass(python_type, datetime):
        return FieldKind.DATETIME
    if issubclass(python_type, date):
        return FieldKind.DATE
    if issubclass(python_type, BaseModel):
        return FieldKind.RECORD
    return FieldKind.SCALAR


def _wire_key(name: str, info: Any) -> str:
    alias = getattr(info, "serialization_alias", None) or getattr(info, "alias", None)
    return alias or name


@lru_cache(maxsize=None)
def describe(record_type: type) -> RecordDescriptor:
    """
    Build (or fetch the cached) descriptor table for a record type.

    Raises
    ------
    TypeError
        If `record_type` is not a pydantic model class.
    """
    if not (isinstance(record_type, type) and issubclass(record_type, BaseModel)):
        raise TypeError(f"{record_type!r} is not a record type (pydantic model expected)")

    fields = []
    for name, info in record_type.model_fields.items():
        if info.exclude is True:
            continue
        python_type = _unwrap_optional(info.annotation)
        fields.append(
            FieldDescriptor(
                attribute=name,
                wire_key=_wire_key(name, info),
                kind=kind_for(python_type),
                python_type=python_type,
            )
        )

    computed = []
    for name, info in record_type.model_computed_fields.items():
        python_type = _unwrap_optional(info.return_type)
        computed.append(
            FieldDescriptor(
                attribute=name,
                wire_key=_wire_key(name, info),
                kind=kind_for(python_type),
                python_type=python_type,
                computed=True,
            )
        )

    return RecordDescriptor(
        record_type=record_type,
        fields=tuple(fields),
        computed=tuple(computed),
    )


__all__ = [
    "ENTITY_NAME_KEY",
    "INSTANCE_NAME_KEY",
    "LOCAL_EXCLUDED_KEYS",
    "METADATA_KEYS",
    "VIEW_LOCAL",
    "FieldDescriptor",
    "FieldKind",
    "RecordDescriptor",
    "describe",
    "kind_for",
]
