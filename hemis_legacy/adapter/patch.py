"""
Partial-update support for decoded patches.

`decode` only assigns the fields present (and non-null) in the request body.
Pydantic tracks those assignments in ``model_fields_set``, which is what lets a
service apply "only the fields the client sent" without confusing an absent
key with a default value.
"""

from __future__ import annotations

from typing import Optional, TypeVar

from pydantic import BaseModel

from hemis_legacy.utils.logging import get_logger

log = get_logger(__name__)

M = TypeVar("M", bound=BaseModel)


def merge_patch(existing: M, patch: Optional[M]) -> M:
    """
    Return a copy of `existing` with the fields assigned on `patch` applied.

    `existing` is left untouched. A ``None`` patch (empty request body) yields
    an unchanged copy.

    Raises
    ------
    TypeError
        If `patch` is not of the same record type as `existing`.
    """
    if patch is None:
        return existing.model_copy()
    if type(patch) is not type(existing):
        raise TypeError(
            f"Cannot apply {type(patch).__name__} patch to {type(existing).__name__}"
        )

    updates = {name: getattr(patch, name) for name in patch.model_fields_set}
    log.debug(
        f"Applying patch to {type(existing).__name__}",
        extra={"fields": sorted(updates)},
    )
    return existing.model_copy(update=updates)


__all__ = ["merge_patch"]
