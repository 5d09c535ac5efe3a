"""Category-specific extractors.

Some device families nest their own position one or two levels deep. For
those, :data:`CATEGORY_STEPS` lists the places to look, in order; the
generic extractor on the whole payload is always the last resort.

Aircraft-tracking payloads are special: most coordinates in them belong to
tracked aircraft. Their steps only look at sub-objects describing the
receiver itself, and the category is ranked last by the resolution policy.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from pyfieldloc.extraction.generic import direct_fields, extract_location
from pyfieldloc.extraction.normalize import finite_or_none, has_pair, sub_mapping
from pyfieldloc.models.location import Coordinates, LocationSource

Step = Callable[[Mapping[str, Any]], Coordinates | None]


def nested(*path: str) -> Step:
    """Step running the generic extractor on the sub-object at *path*."""

    def step(data: Mapping[str, Any]) -> Coordinates | None:
        target = sub_mapping(data, *path)
        if target is None:
            return None
        return extract_location(target)

    step.__name__ = f"nested_{'_'.join(path)}"
    return step


def direct(*path: str) -> Step:
    """Step accepting only top-level ``latitude``/``longitude`` of the sub-object."""

    def step(data: Mapping[str, Any]) -> Coordinates | None:
        target = sub_mapping(data, *path)
        if target is None:
            return None
        return direct_fields(target)

    step.__name__ = f"direct_{'_'.join(path)}"
    return step


def gps_fields(*path: str) -> Step:
    """Step reading ``gps_latitude``/``gps_longitude`` (dish telemetry naming).

    An empty *path* reads them from the payload itself.
    """

    def step(data: Mapping[str, Any]) -> Coordinates | None:
        target = sub_mapping(data, *path) if path else data
        if target is None or not has_pair(target, "gps_latitude", "gps_longitude"):
            return None
        return Coordinates(
            lat=target["gps_latitude"],
            lng=target["gps_longitude"],
            altitude=finite_or_none(target.get("gps_altitude", target.get("altitude"))),
        )

    step.__name__ = f"gps_fields_{'_'.join(path) or 'root'}"
    return step


CATEGORY_STEPS: dict[LocationSource, tuple[Step, ...]] = {
    LocationSource.SATELLITE: (
        direct("starlink"),
        gps_fields("starlink"),
        nested("starlink", "dish_gps"),
        nested("starlink"),
        gps_fields(),
        nested("dish_location"),
        nested("device_info"),
    ),
    LocationSource.GPS: (
        nested("gps"),
        nested("gnss"),
    ),
    LocationSource.ENVIRONMENTAL: (
        nested("arduino"),
        nested("sensors", "gps"),
    ),
    LocationSource.LORA: (
        nested("lora"),
        nested("gateway"),
    ),
    LocationSource.ADSB: (
        nested("receiver_location"),
        nested("adsb"),
        nested("station_location"),
    ),
}


def extract_for_source(source: LocationSource, data: Any) -> Coordinates | None:
    """Extract coordinates from *data* the way devices of *source* nest them.

    Categories without an entry in :data:`CATEGORY_STEPS` use the generic
    extractor directly.
    """
    if not isinstance(data, Mapping):
        return None
    for step in CATEGORY_STEPS.get(source, ()):
        found = step(data)
        if found is not None:
            return found
    return extract_location(data)
