"""Custom exception hierarchy for pyfieldloc.

Payload extraction never raises; these only cover caller-supplied
configuration.
"""

from __future__ import annotations


class FieldLocError(Exception):
    """Base exception for all pyfieldloc errors."""


class FieldLocConfigError(FieldLocError):
    """Invalid resolver configuration or keyword table."""

    def __init__(self, message: str, *, field: str = "") -> None:
        self.field = field
        super().__init__(message)
