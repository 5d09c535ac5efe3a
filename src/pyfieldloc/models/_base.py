"""Base model for device/client records.

Every pyfieldloc model inherits from :class:`FieldLocBaseModel` which
provides:

* frozen instances, so resolution can never mutate caller records;
* ``extra="ignore"`` because dashboard records carry many display-only
  fields the engine does not care about;
* ``populate_by_name=True`` so aliased fields accept either spelling.

:data:`ReadingTimestamp` coerces the several timestamp encodings the
ingestion side produces into a UTC ``datetime``.
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict

from pyfieldloc.extraction.normalize import is_finite_number

# Threshold to distinguish seconds from milliseconds.
_MS_THRESHOLD = 1_000_000_000_000


def parse_reading_timestamp(value: Any) -> datetime | None:
    """Convert a reading timestamp to a UTC datetime.

    Accepts ``datetime`` objects, ISO-8601 strings (``Z`` suffix included)
    and epoch seconds or milliseconds. Anything unparseable becomes ``None``.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, datetime):
        return value if value.tzinfo is not None else value.replace(tzinfo=UTC)
    if is_finite_number(value):
        ts = float(value)
        if ts <= 0:
            return None
        if ts >= _MS_THRESHOLD:
            ts /= 1000.0
        try:
            return datetime.fromtimestamp(ts, tz=UTC)
        except (OverflowError, OSError, ValueError):
            return None
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError:
            return None
        return parsed if parsed.tzinfo is not None else parsed.replace(tzinfo=UTC)
    return None


ReadingTimestamp = Annotated[datetime | None, BeforeValidator(parse_reading_timestamp)]
"""Annotated type that coerces ISO strings and epoch values to UTC datetimes."""


class FieldLocBaseModel(BaseModel):
    """Base for pyfieldloc record models."""

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
    )
