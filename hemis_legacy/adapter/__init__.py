"""
CUBA compatibility layer.

Converts typed records (pydantic models) into the legacy CUBA REST document
shape (``_entityName``, ``_instanceName``, flat fields) and back. This module
re-exports the public surface so callers can import from
`hemis_legacy.adapter` directly.
"""

from hemis_legacy.adapter.descriptors import (
    ENTITY_NAME_KEY,
    INSTANCE_NAME_KEY,
    VIEW_LOCAL,
    FieldDescriptor,
    FieldKind,
    RecordDescriptor,
    describe,
)
from hemis_legacy.adapter.errors import ConversionError
from hemis_legacy.adapter.instance_name import (
    HasDisplayCode,
    HasDisplayName,
    HasFullName,
    derive_instance_name,
)
from hemis_legacy.adapter.patch import merge_patch
from hemis_legacy.adapter.transcoder import WireDocument, decode, encode, encode_list

__all__ = [
    # Wire vocabulary
    "ENTITY_NAME_KEY",
    "INSTANCE_NAME_KEY",
    "VIEW_LOCAL",
    # Descriptor tables
    "FieldDescriptor",
    "FieldKind",
    "RecordDescriptor",
    "describe",
    # Instance names
    "HasDisplayCode",
    "HasDisplayName",
    "HasFullName",
    "derive_instance_name",
    # Transcoding
    "ConversionError",
    "WireDocument",
    "decode",
    "encode",
    "encode_list",
    "merge_patch",
]
