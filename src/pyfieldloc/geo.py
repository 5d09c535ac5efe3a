"""Great-circle helpers for placing several devices on one map."""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import Protocol

EARTH_RADIUS_M = 6_371_000.0
ONE_MILE_METERS = 1609.34


class SpreadablePoint(Protocol):
    id: str
    lat: float
    lng: float


def haversine_distance(lat1: float, lng1: float, lat2: float, lng2: float) -> float:
    """Distance in metres between two points."""
    d_lat = math.radians(lat2 - lat1)
    d_lng = math.radians(lng2 - lng1)
    a = (
        math.sin(d_lat / 2) ** 2
        + math.cos(math.radians(lat1)) * math.cos(math.radians(lat2)) * math.sin(d_lng / 2) ** 2
    )
    return EARTH_RADIUS_M * 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))


def destination_point(lat: float, lng: float, bearing_deg: float, distance_m: float) -> tuple[float, float]:
    """Point reached from (*lat*, *lng*) after *distance_m* on *bearing_deg*."""
    bearing = math.radians(bearing_deg)
    lat1 = math.radians(lat)
    lng1 = math.radians(lng)
    d = distance_m / EARTH_RADIUS_M

    lat2 = math.asin(math.sin(lat1) * math.cos(d) + math.cos(lat1) * math.sin(d) * math.cos(bearing))
    lng2 = lng1 + math.atan2(
        math.sin(bearing) * math.sin(d) * math.cos(lat1),
        math.cos(d) - math.sin(lat1) * math.sin(lat2),
    )
    return (math.degrees(lat2), math.degrees(lng2))


def spread_overlapping_points(
    points: Sequence[SpreadablePoint],
    min_distance_m: float = ONE_MILE_METERS,
) -> dict[str, tuple[float, float]]:
    """Move points closer than *min_distance_m* apart onto a circle.

    Each unassigned point, in input order, seeds a group with every other
    unassigned point within *min_distance_m* of it. Members of groups with
    two or more points are placed evenly around the group centroid at half
    the minimum distance. Only moved points appear in the result.
    """
    spread: dict[str, tuple[float, float]] = {}
    if len(points) < 2:
        return spread

    groups: list[list[SpreadablePoint]] = []
    assigned: set[str] = set()
    for point in points:
        if point.id in assigned:
            continue
        group = [point]
        assigned.add(point.id)
        for other in points:
            if other.id in assigned:
                continue
            if haversine_distance(point.lat, point.lng, other.lat, other.lng) < min_distance_m:
                group.append(other)
                assigned.add(other.id)
        if len(group) > 1:
            groups.append(group)

    for group in groups:
        centroid_lat = sum(p.lat for p in group) / len(group)
        centroid_lng = sum(p.lng for p in group) / len(group)
        step = 360 / len(group)
        for index, point in enumerate(group):
            spread[point.id] = destination_point(centroid_lat, centroid_lng, index * step, min_distance_m / 2)
    return spread
