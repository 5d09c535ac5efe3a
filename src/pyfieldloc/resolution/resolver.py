"""Candidate resolver.

For each device of a client a *candidate* location is extracted (from a
cached pair or from the latest payload), candidates are ranked by source
priority and the best one wins. When no device yields anything, the
client's IP geolocation is used; failing that the result is
``ResolvedLocation.unknown()``.

All functions here are pure: input records are never modified.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from pyfieldloc._redact import redact_for_log
from pyfieldloc.classification import classify_device_type
from pyfieldloc.config import ResolverConfig
from pyfieldloc.extraction.devices import extract_for_source
from pyfieldloc.extraction.normalize import is_finite_number, str_or_none
from pyfieldloc.models.client import ClientInfo
from pyfieldloc.models.device import DeviceGroup
from pyfieldloc.models.location import LocationSource, ResolvedLocation
from pyfieldloc.resolution.policy import source_priority

_logger = logging.getLogger(__name__)


def classify_device(device: DeviceGroup, *, config: ResolverConfig | None = None) -> LocationSource:
    cfg = config or ResolverConfig()
    return classify_device_type(device.device_type, rules=cfg.keyword_rules, default=cfg.default_source)


def extract_device_location(
    device: DeviceGroup,
    *,
    config: ResolverConfig | None = None,
) -> ResolvedLocation | None:
    """Return the candidate location one device offers, or ``None``."""
    cfg = config or ResolverConfig()
    source = classify_device(device, config=cfg)
    timestamp = device.latest.timestamp if device.latest is not None else None
    data = device.payload

    cached = device.location
    if cfg.use_cached_locations and cached is not None and cached.is_valid:
        payload = data or {}
        return ResolvedLocation(
            latitude=cached.lat,
            longitude=cached.lng,
            city=str_or_none(payload.get("city")),
            country=str_or_none(payload.get("country")),
            source=source,
            device_id=device.device_id,
            timestamp=timestamp,
        )

    if not data:
        return None

    found = extract_for_source(source, data)
    if found is None:
        return None

    return ResolvedLocation(
        latitude=found.lat,
        longitude=found.lng,
        altitude=found.altitude,
        accuracy=found.accuracy,
        city=found.city,
        country=found.country,
        source=source,
        device_id=device.device_id,
        timestamp=timestamp,
        raw=data if cfg.include_raw else None,
    )


def is_valid_candidate(candidate: ResolvedLocation) -> bool:
    return is_finite_number(candidate.latitude) and is_finite_number(candidate.longitude)


def is_admissible_candidate(candidate: ResolvedLocation, *, config: ResolverConfig | None = None) -> bool:
    """Whether *candidate* may be shown or ranked under *config*.

    Non-finite coordinates are never admissible; aircraft-tracking receivers
    only when ``allow_aircraft_fallback`` is set.
    """
    cfg = config or ResolverConfig()
    if not is_valid_candidate(candidate):
        _logger.debug(
            "Discarding non-finite candidate device=%s source=%s",
            candidate.device_id,
            candidate.source,
        )
        return False
    if candidate.source == LocationSource.ADSB and not cfg.allow_aircraft_fallback:
        _logger.debug("Dropping aircraft-tracking candidate device=%s", candidate.device_id)
        return False
    return True


def _device_candidates(
    devices: Iterable[DeviceGroup],
    cfg: ResolverConfig,
) -> list[ResolvedLocation]:
    candidates: list[ResolvedLocation] = []
    for device in devices:
        candidate = extract_device_location(device, config=cfg)
        if candidate is not None and is_admissible_candidate(candidate, config=cfg):
            candidates.append(candidate)
    return candidates


def collect_candidates(
    devices: Iterable[DeviceGroup],
    *,
    config: ResolverConfig | None = None,
) -> list[ResolvedLocation]:
    """Every valid candidate, best first.

    The sort is stable: devices of the same category keep their input order,
    so the first such device wins a tie.
    """
    cfg = config or ResolverConfig()
    candidates = _device_candidates(devices, cfg)
    candidates.sort(key=lambda candidate: source_priority(candidate.source))
    return candidates


def geolocate_client(client: ClientInfo | None) -> ResolvedLocation | None:
    """Fallback candidate from the client's network-address geolocation."""
    if client is None or client.location is None or not client.location.is_valid:
        return None
    return ResolvedLocation(
        latitude=client.location.latitude,
        longitude=client.location.longitude,
        city=client.location.city,
        country=client.location.country,
        source=LocationSource.GEOLOCATED,
    )


def resolve_client_location(
    client: ClientInfo | None,
    devices: Iterable[DeviceGroup] = (),
    *,
    config: ResolverConfig | None = None,
) -> ResolvedLocation:
    """Resolve the single best location for *client*.

    Parameters
    ----------
    client : ClientInfo or None
        Client record; only its geolocation is used, as a fallback.
    devices : iterable of DeviceGroup
        The client's devices, in display order.
    config : ResolverConfig, optional
        Resolution settings; defaults apply when omitted.

    Returns
    -------
    ResolvedLocation
        Best device candidate, else the geolocated fallback, else a result
        with ``source == LocationSource.UNKNOWN`` and no coordinates.
    """
    client_id = client.client_id if client is not None else None
    candidates = collect_candidates(devices, config=config)
    if candidates:
        best = candidates[0]
        _logger.debug(
            "Resolved client=%s source=%s device=%s candidates=%d",
            client_id,
            best.source,
            best.device_id,
            len(candidates),
        )
        if best.raw is not None and _logger.isEnabledFor(logging.DEBUG):
            _logger.debug("Winning payload client=%s data=%s", client_id, redact_for_log(best.raw))
        return best

    fallback = geolocate_client(client)
    if fallback is not None:
        _logger.debug("No device candidates for client=%s; using IP geolocation", client_id)
        return fallback

    _logger.debug("No location available for client=%s", client_id)
    return ResolvedLocation.unknown()
