"""
Conversion rules between record values and wire values.

Each rule is a plain function selected by the field's semantic kind from a
dispatch table, one table per direction. Decoders keep values already of the
declared type and convert strings (and numbers, for integers).

Decoders raise ``ValueError`` / ``KeyError`` on malformed input and
``TypeError`` on a value of the wrong type. The transcoder wraps those in
``ConversionError``.
"""

from __future__ import annotations

import enum
import numbers
import uuid
from datetime import date, datetime
from typing import Any, Callable, Dict

from hemis_legacy.adapter.descriptors import FieldDescriptor, FieldKind

# Legacy clients expect a space separator and exactly three millisecond digits.
CUBA_DATETIME_PARSE_FORMAT = "%Y-%m-%d %H:%M:%S.%f"

Encoder = Callable[[Any], Any]
Decoder = Callable[[Any, Any], Any]


def format_cuba_datetime(value: datetime) -> str:
    """Render `value` as ``YYYY-MM-DD HH:MM:SS.mmm``."""
    return (
        f"{value.year:04d}-{value.month:02d}-{value.day:02d} "
        f"{value.hour:02d}:{value.minute:02d}:{value.second:02d}."
        f"{value.microsecond // 1000:03d}"
    )


def parse_cuba_datetime(value: str) -> datetime:
    """Parse either an ISO-8601 date-time (``T`` separator) or the CUBA format."""
    if "T" in value:
        return datetime.fromisoformat(value)
    return datetime.strptime(value, CUBA_DATETIME_PARSE_FORMAT)


def _identity(value: Any) -> Any:
    return value


def _encode_datetime(value: Any) -> Any:
    return format_cuba_datetime(value) if isinstance(value, datetime) else value


def _encode_date(value: Any) -> Any:
    if isinstance(value, datetime):
        return value.date().isoformat()
    return value.isoformat() if isinstance(value, date) else value


def _encode_identifier(value: Any) -> Any:
    return str(value) if isinstance(value, uuid.UUID) else value


def _encode_enum(value: Any) -> Any:
    return value.name if isinstance(value, enum.Enum) else value


ENCODERS: Dict[FieldKind, Encoder] = {
    FieldKind.DATETIME: _encode_datetime,
    FieldKind.DATE: _encode_date,
    FieldKind.IDENTIFIER: _encode_identifier,
    FieldKind.ENUM: _encode_enum,
}


def _mismatch(value: Any, expected: str) -> TypeError:
    return TypeError(f"expected {expected}, got {type(value).__name__} {value!r}")


def _decode_identifier(value: Any, python_type: Any) -> Any:
    if isinstance(value, uuid.UUID):
        return value
    if isinstance(value, str):
        return uuid.UUID(value)
    raise _mismatch(value, "identifier string")


def _decode_datetime(value: Any, python_type: Any) -> Any:
    if isinstance(value, datetime):
        return value
    if isinstance(value, str):
        return parse_cuba_datetime(value)
    raise _mismatch(value, "date-time string")


def _decode_date(value: Any, python_type: Any) -> Any:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        return date.fromisoformat(value)
    raise _mismatch(value, "date string")


def _decode_enum(value: Any, python_type: Any) -> Any:
    if isinstance(value, python_type):
        return value
    if isinstance(value, str):
        try:
            return python_type[value]
        except KeyError:
            raise KeyError(f"{value!r} is not a member of {python_type.__name__}") from None
    raise _mismatch(value, f"{python_type.__name__} member name")


def _decode_integer(value: Any, python_type: Any) -> Any:
    if isinstance(value, bool):
        raise _mismatch(value, "integer")
    if isinstance(value, int):
        return value
    if isinstance(value, (numbers.Real, str)):
        return int(value)
    raise _mismatch(value, "integer")


def _decode_boolean(value: Any, python_type: Any) -> Any:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return value.lower() == "true"
    raise _mismatch(value, "boolean")


DECODERS: Dict[FieldKind, Decoder] = {
    FieldKind.IDENTIFIER: _decode_identifier,
    FieldKind.DATETIME: _decode_datetime,
    FieldKind.DATE: _decode_date,
    FieldKind.ENUM: _decode_enum,
    FieldKind.INTEGER: _decode_integer,
    FieldKind.BOOLEAN: _decode_boolean,
}


def to_wire(descriptor: FieldDescriptor, value: Any) -> Any:
    """Convert a record value into its wire representation."""
    return ENCODERS.get(descriptor.kind, _identity)(value)


def from_wire(descriptor: FieldDescriptor, value: Any) -> Any:
    """Convert a wire value into the descriptor's declared type."""
    decoder = DECODERS.get(descriptor.kind)
    if decoder is None:
        return value
    return decoder(value, descriptor.python_type)


__all__ = [
    "CUBA_DATETIME_PARSE_FORMAT",
    "DECODERS",
    "ENCODERS",
    "format_cuba_datetime",
    "from_wire",
    "parse_cuba_datetime",
    "to_wire",
]
