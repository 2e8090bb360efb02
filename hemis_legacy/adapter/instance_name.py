"""
Instance-name derivation for CUBA documents.

Legacy clients display ``_instanceName`` as the record's label. Record types
can opt into explicit labels through the capability protocols below; records
that implement none of them fall back to conventional field names.
"""

from __future__ import annotations

from typing import Any, Optional, Protocol, Tuple, runtime_checkable

from hemis_legacy.adapter.descriptors import describe

NAME_FIELDS: Tuple[str, ...] = ("name", "full_name", "first_name", "firstname")
CODE_FIELDS: Tuple[str, ...] = ("student_id_number", "employee_id_number", "code")
SEPARATOR = " - "


@runtime_checkable
class HasFullName(Protocol):
    """Record that knows its own complete label."""

    def get_fullname(self) -> Optional[str]:
        ...


@runtime_checkable
class HasDisplayName(Protocol):
    def display_name(self) -> Optional[str]:
        ...


@runtime_checkable
class HasDisplayCode(Protocol):
    def display_code(self) -> Optional[str]:
        ...


def _first_field(record: Any, candidates: Tuple[str, ...]) -> Optional[Any]:
    """Value of the first candidate field the record type declares."""
    descriptor = describe(type(record))
    for attribute in candidates:
        if descriptor.by_attribute(attribute) is not None:
            return getattr(record, attribute, None)
    return None


def _text(value: Any) -> str:
    return "" if value is None else str(value)


def _fallback(record: Any) -> str:
    try:
        return str(record)
    except Exception:  # noqa: BLE001 - the label must never fail the response
        return type(record).__name__


def derive_instance_name(record: Any) -> str:
    """
    Derive the human-readable label written as ``_instanceName``.

    Rules, first non-empty result wins:

    1. ``get_fullname()`` when the record implements `HasFullName`.
    2. ``"{name} - {code}"`` where the name comes from `HasDisplayName` or the
       first declared field of `NAME_FIELDS`, and the code from
       `HasDisplayCode` or the first declared field of `CODE_FIELDS`. Either
       side alone is used when the other is empty.
    3. ``str(record)``.

    Never raises.
    """
    try:
        if isinstance(record, HasFullName):
            full_name = _text(record.get_fullname())
            if full_name:
                return full_name

        if isinstance(record, HasDisplayName):
            name = _text(record.display_name())
        else:
            name = _text(_first_field(record, NAME_FIELDS))

        if isinstance(record, HasDisplayCode):
            code = _text(record.display_code())
        else:
            code = _text(_first_field(record, CODE_FIELDS))

        label = SEPARATOR.join(part for part in (name, code) if part)
        return label or _fallback(record)
    except Exception:  # noqa: BLE001 - the label must never fail the response
        return _fallback(record)


__all__ = [
    "CODE_FIELDS",
    "NAME_FIELDS",
    "HasDisplayCode",
    "HasDisplayName",
    "HasFullName",
    "derive_instance_name",
]
