"""Nested-shape extractor.

Payloads from field devices put their coordinates in one of a handful of
recurring shapes. Each shape is checked by its own function; :data:`SHAPES`
fixes the order and :func:`extract_location` returns the first match.

A field only counts when it is a finite number; strings, booleans and NaN
make the shape fail silently so the next one is tried.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from pyfieldloc.extraction.normalize import finite_or_none, has_pair, str_or_none, sub_mapping
from pyfieldloc.models.location import Coordinates

Payload = Mapping[str, Any]
ShapeCheck = Callable[[Payload], Coordinates | None]


def _from_long_names(
    data: Payload,
    *,
    altitude: bool = False,
    accuracy: bool = False,
    place: bool = False,
) -> Coordinates | None:
    """Build coordinates from ``latitude``/``longitude`` plus optional extras."""
    if not has_pair(data, "latitude", "longitude"):
        return None
    return Coordinates(
        lat=data["latitude"],
        lng=data["longitude"],
        altitude=finite_or_none(data.get("altitude")) if altitude else None,
        accuracy=finite_or_none(data.get("accuracy")) if accuracy else None,
        city=str_or_none(data.get("city")) if place else None,
        country=str_or_none(data.get("country")) if place else None,
    )


def direct_fields(data: Payload) -> Coordinates | None:
    """``{"latitude": .., "longitude": ..}`` at the top level."""
    return _from_long_names(data, altitude=True, accuracy=True, place=True)


def short_fields(data: Payload) -> Coordinates | None:
    """``{"lat": .., "lng": ..}`` or ``{"lat": .., "lon": ..}``; ``lng`` wins."""
    lat = finite_or_none(data.get("lat"))
    if lat is None:
        return None
    lng = finite_or_none(data.get("lng"))
    if lng is None:
        lng = finite_or_none(data.get("lon"))
    if lng is None:
        return None
    return Coordinates(lat=lat, lng=lng, altitude=finite_or_none(data.get("altitude")))


def location_object(data: Payload) -> Coordinates | None:
    """Nested ``location`` with long or short field names."""
    nested = sub_mapping(data, "location")
    if nested is None:
        return None
    found = _from_long_names(nested, altitude=True, place=True)
    if found is not None:
        return found
    if has_pair(nested, "lat", "lng"):
        return Coordinates(lat=nested["lat"], lng=nested["lng"])
    return None


def gps_location_object(data: Payload) -> Coordinates | None:
    nested = sub_mapping(data, "gps_location")
    if nested is None:
        return None
    return _from_long_names(nested, altitude=True, accuracy=True)


def location_detail_object(data: Payload) -> Coordinates | None:
    nested = sub_mapping(data, "location_detail")
    if nested is None:
        return None
    return _from_long_names(nested, altitude=True, place=True)


def coordinates_object(data: Payload) -> Coordinates | None:
    nested = sub_mapping(data, "coordinates")
    if nested is None:
        return None
    found = _from_long_names(nested)
    if found is not None:
        return found
    if has_pair(nested, "lat", "lng"):
        return Coordinates(lat=nested["lat"], lng=nested["lng"])
    return None


def position_object(data: Payload) -> Coordinates | None:
    nested = sub_mapping(data, "position")
    if nested is None:
        return None
    return _from_long_names(nested, altitude=True)


SHAPES: tuple[ShapeCheck, ...] = (
    direct_fields,
    short_fields,
    location_object,
    gps_location_object,
    location_detail_object,
    coordinates_object,
    position_object,
)


def extract_location(data: Any) -> Coordinates | None:
    """Return the first recognised coordinate shape in *data*, or ``None``."""
    if not isinstance(data, Mapping):
        return None
    for shape in SHAPES:
        found = shape(data)
        if found is not None:
            return found
    return None
