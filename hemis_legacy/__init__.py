"""
HEMIS legacy adapter - CUBA platform compatibility layer.

Converts typed HEMIS records into the legacy CUBA REST document shape that
institutional clients depend on, and converts such documents back into
records for partial updates:

- Ordered documents with ``_entityName`` / ``_instanceName`` metadata
- Per-view filtering (``_local`` drops references and housekeeping fields)
- Computed read-only fields
- Identifier, date, date-time and enum marshaling in both directions
"""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"

# Public API exports
from hemis_legacy.adapter import (
    ConversionError,
    HasDisplayCode,
    HasDisplayName,
    HasFullName,
    decode,
    derive_instance_name,
    encode,
    encode_list,
    merge_patch,
)
from hemis_legacy.config import Settings, get_settings
from hemis_legacy.registry import available_entities, register_entity, resolve_entity
from hemis_legacy.utils.logging import configure_logging, get_logger

__all__ = [
    # Version info
    "__version__",
    "__license__",
    # Configuration
    "Settings",
    "get_settings",
    # Transcoding
    "ConversionError",
    "decode",
    "encode",
    "encode_list",
    "merge_patch",
    # Instance names
    "HasDisplayCode",
    "HasDisplayName",
    "HasFullName",
    "derive_instance_name",
    # Entity registry
    "available_entities",
    "register_entity",
    "resolve_entity",
    # Logging
    "configure_logging",
    "get_logger",
]
