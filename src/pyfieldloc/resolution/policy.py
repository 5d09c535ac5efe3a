"""Source ranking policy.

This module intentionally contains *no* payload parsing. It only answers
"which source category is more trustworthy".
"""

from __future__ import annotations

from pyfieldloc.models.location import LocationSource

# Every LocationSource member must appear here; a new category needs an
# explicit rank before it can be resolved.
_PRIORITIES: dict[LocationSource, int] = {
    LocationSource.SATELLITE: 1,
    LocationSource.GPS: 2,
    LocationSource.LORA: 3,
    LocationSource.ENVIRONMENTAL: 4,
    LocationSource.SYSTEM: 5,
    LocationSource.WIFI: 6,
    LocationSource.BLUETOOTH: 7,
    LocationSource.GEOLOCATED: 8,
    # Receivers report the aircraft they track, not themselves.
    LocationSource.ADSB: 99,
    LocationSource.UNKNOWN: 100,
}


def source_priority(source: LocationSource) -> int:
    """Lower wins. Raises ``KeyError`` for a category with no rank."""
    return _PRIORITIES[source]


def ranked_sources() -> list[LocationSource]:
    """All categories, most trustworthy first."""
    return sorted(LocationSource, key=source_priority)
