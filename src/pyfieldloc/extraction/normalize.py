"""Normalization helpers.

Centralizes the defensive field checks every extractor relies on. Nothing
here coerces: a string ``"37.5"`` is *not* a coordinate.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from typing import Any


def is_finite_number(value: Any) -> bool:
    """Return ``True`` for real ints/floats that are neither NaN nor infinite.

    ``bool`` is an ``int`` subclass in Python but never a coordinate, and an
    ``int`` too large for a float (``json.loads`` happily produces those) is
    not finite for our purposes.
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    try:
        return math.isfinite(value)
    except OverflowError:
        return False


def finite_or_none(value: Any) -> float | None:
    if not is_finite_number(value):
        return None
    return float(value)


def str_or_none(value: Any) -> str | None:
    return value if isinstance(value, str) else None


def sub_mapping(data: Mapping[str, Any], *path: str) -> Mapping[str, Any] | None:
    """Walk *path* through nested mappings.

    Returns ``None`` as soon as a key is missing or a step is not a mapping.
    """
    current: Any = data
    for key in path:
        if not isinstance(current, Mapping):
            return None
        current = current.get(key)
    return current if isinstance(current, Mapping) else None


def has_pair(data: Mapping[str, Any], lat_key: str, lng_key: str) -> bool:
    return is_finite_number(data.get(lat_key)) and is_finite_number(data.get(lng_key))
