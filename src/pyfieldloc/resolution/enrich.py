"""Batch enrichment for multi-device displays.

Unlike :func:`pyfieldloc.resolution.resolver.resolve_client_location`, these
helpers work per device, independent of which client owns it.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from pyfieldloc.config import ResolverConfig
from pyfieldloc.extraction.devices import extract_for_source
from pyfieldloc.models.device import CachedLocation, DeviceGroup
from pyfieldloc.models.location import ResolvedLocation
from pyfieldloc.resolution.resolver import classify_device, extract_device_location, is_admissible_candidate

_logger = logging.getLogger(__name__)


def enrich_devices_with_locations(
    devices: Iterable[DeviceGroup],
    *,
    config: ResolverConfig | None = None,
) -> list[DeviceGroup]:
    """Return *devices* with a cached location attached where one can be extracted.

    A device that already carries a valid cached pair is returned as-is, even
    if its payload would extract to something else. Devices are never modified
    in place; enriched ones are copies.
    """
    cfg = config or ResolverConfig()
    enriched: list[DeviceGroup] = []
    attached = 0
    for device in devices:
        data = device.payload
        if device.has_cached_location or not data:
            enriched.append(device)
            continue

        found = extract_for_source(classify_device(device, config=cfg), data)
        if found is None:
            enriched.append(device)
            continue

        enriched.append(device.model_copy(update={"location": CachedLocation(lat=found.lat, lng=found.lng)}))
        attached += 1

    _logger.debug("Enriched %d of %d devices with locations", attached, len(enriched))
    return enriched


def all_device_locations(
    devices: Iterable[DeviceGroup],
    *,
    config: ResolverConfig | None = None,
) -> list[ResolvedLocation]:
    """One location per device that has one, in device order.

    Applies the same admissibility rules as per-client resolution, so
    aircraft-tracking receivers are left out when ``allow_aircraft_fallback``
    is off.
    """
    cfg = config or ResolverConfig()
    locations: list[ResolvedLocation] = []
    for device in devices:
        location = extract_device_location(device, config=cfg)
        if location is not None and is_admissible_candidate(location, config=cfg):
            locations.append(location)
    return locations
