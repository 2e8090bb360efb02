"""
Errors raised by the legacy adapter.
"""

from __future__ import annotations

from typing import Optional


class ConversionError(Exception):
    """
    Raised when a wire document cannot be turned into a record.

    The root cause (bad identifier syntax, unknown enum name, unparseable date,
    failed construction or assignment) is chained as ``__cause__``.

    Attributes
    ----------
    target_type : type | None
        Record type the document was being decoded into.
    wire_key : str | None
        Wire key being converted when the failure happened, if any.
    """

    def __init__(
        self,
        message: str,
        target_type: Optional[type] = None,
        wire_key: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.target_type = target_type
        self.wire_key = wire_key


__all__ = ["ConversionError"]
