"""
Record <-> CUBA wire document transcoder.

Usage (from a controller):
    from hemis_legacy.adapter import decode, encode

    body = encode(student, "hemishe_EStudent", include_nulls=return_nulls, view=view)
    patch = decode(request_json, StudentDto)

Encoding degrades field by field: an unreadable field or a failing computed
accessor is logged and left out. Decoding is atomic: the first failure aborts
the call with a single ``ConversionError``.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional, Type, TypeVar

from hemis_legacy.adapter.conversions import from_wire, to_wire
from hemis_legacy.adapter.descriptors import (
    ENTITY_NAME_KEY,
    INSTANCE_NAME_KEY,
    METADATA_KEYS,
    describe,
)
from hemis_legacy.adapter.errors import ConversionError
from hemis_legacy.adapter.instance_name import derive_instance_name
from hemis_legacy.utils.logging import get_logger

log = get_logger(__name__)

WireDocument = Dict[str, Any]
R = TypeVar("R")


def encode(
    record: Any,
    type_tag: str,
    include_nulls: bool = False,
    view: Optional[str] = None,
) -> Optional[WireDocument]:
    """
    Convert a record into a CUBA wire document.

    Parameters
    ----------
    record : pydantic model | None
        Record to convert. ``None`` yields ``None``.
    type_tag : str
        Written verbatim as ``_entityName`` (e.g. ``"hemishe_EStudent"``).
    include_nulls : bool
        Emit ``None``-valued fields instead of omitting them.
    view : str | None
        ``"_local"`` drops reference fields (wire keys starting with ``_``),
        ``version``/``fullname`` and computed fields. Any other value is the
        default view.

    Returns
    -------
    dict | None
        Ordered document: metadata keys, stored fields, computed fields.
    """
    if record is None:
        return None

    descriptor = describe(type(record))
    document: WireDocument = {
        ENTITY_NAME_KEY: type_tag,
        INSTANCE_NAME_KEY: derive_instance_name(record),
    }

    for field in descriptor.visible_fields(view):
        try:
            value = getattr(record, field.attribute)
        except AttributeError:
            log.warning(
                f"Cannot read field: {field.attribute}",
                extra={"record_type": descriptor.record_type.__name__, "field": field.attribute},
            )
            continue
        _put(document, field.wire_key, None if value is None else to_wire(field, value), include_nulls)

    for field in descriptor.visible_computed(view):
        try:
            value = getattr(record, field.attribute)
        except Exception:  # noqa: BLE001 - a failing computed field must not fail the document
            log.warning(
                f"Cannot invoke computed field: {field.attribute}",
                extra={"record_type": descriptor.record_type.__name__, "field": field.attribute},
                exc_info=True,
            )
            continue
        _put(document, field.wire_key, None if value is None else to_wire(field, value), include_nulls)

    return document


def _put(document: WireDocument, key: str, value: Any, include_nulls: bool) -> None:
    if value is None and not include_nulls:
        return
    document[key] = value


def encode_list(
    records: Optional[Iterable[Any]],
    type_tag: str,
    include_nulls: bool = False,
    view: Optional[str] = None,
) -> List[Optional[WireDocument]]:
    """Encode each record in order; ``None`` yields an empty list."""
    if records is None:
        return []
    return [encode(record, type_tag, include_nulls, view) for record in records]


def decode(document: Optional[WireDocument], target_type: Type[R]) -> Optional[R]:
    """
    Build a record of `target_type` from a CUBA wire document.

    Keys missing from the document, and keys whose value is ``None``, leave the
    field at its default, so the result is a patch rather than a full
    replacement. Metadata keys are ignored.

    Raises
    ------
    ConversionError
        If construction, conversion or assignment of any field fails.
    TypeError
        If `target_type` is not a record type.
    """
    if not document:
        return None

    descriptor = describe(target_type)
    values = {key: value for key, value in document.items() if key not in METADATA_KEYS}

    wire_key: Optional[str] = None
    try:
        record = target_type()
        for field in descriptor.fields:
            wire_key = field.wire_key
            if wire_key not in values:
                continue
            value = values[wire_key]
            if value is None:
                continue
            setattr(record, field.attribute, from_wire(field, value))
    except Exception as exc:
        log.error(
            f"Error converting CUBA document to {target_type.__name__}",
            extra={"record_type": target_type.__name__, "wire_key": wire_key},
            exc_info=True,
        )
        raise ConversionError(
            f"Failed to convert CUBA document to {target_type.__name__}"
            + (f" (field '{wire_key}')" if wire_key else "")
            + f": {exc}",
            target_type=target_type,
            wire_key=wire_key,
        ) from exc

    return record


__all__ = [
    "WireDocument",
    "decode",
    "encode",
    "encode_list",
]
