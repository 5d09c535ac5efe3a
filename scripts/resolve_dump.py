#!/usr/bin/env python3
"""Resolve client locations from a dashboard JSON dump.

The dump holds ``{"clients": [...], "devices": [...]}`` as served by the
dashboard API; devices are grouped by their ``client_id``.

Usage
-----
    python scripts/resolve_dump.py dump.json
    python scripts/resolve_dump.py --enrich dump.json
    python scripts/resolve_dump.py --no-aircraft --verbose dump.json
"""

from __future__ import annotations

import argparse
import json
import logging
from collections import defaultdict
from pathlib import Path
from typing import Any

from pyfieldloc import (
    ClientInfo,
    DeviceGroup,
    ResolvedLocation,
    ResolverConfig,
    enrich_devices_with_locations,
    resolve_client_location,
)


def _format_location(location: ResolvedLocation) -> str:
    if not location.is_known:
        return "unknown"
    place = ", ".join(part for part in (location.city, location.country) if part)
    text = f"{location.latitude:.5f},{location.longitude:.5f} via {location.source.label}"
    if location.device_id:
        text += f" ({location.device_id})"
    if place:
        text += f" [{place}]"
    return text


def _load(path: Path) -> tuple[list[ClientInfo], list[DeviceGroup]]:
    payload: dict[str, Any] = json.loads(path.read_text(encoding="utf-8"))
    clients = [ClientInfo.model_validate(item) for item in payload.get("clients", [])]
    devices = [DeviceGroup.model_validate(item) for item in payload.get("devices", [])]
    return clients, devices


def main() -> None:
    parser = argparse.ArgumentParser(description="Resolve client locations from a dashboard dump.")
    parser.add_argument("dump", help="JSON dump file")
    parser.add_argument("--enrich", action="store_true", help="Print per-device enriched locations instead")
    parser.add_argument("--no-aircraft", action="store_true", help="Ignore aircraft-tracking receivers entirely")
    parser.add_argument("--verbose", action="store_true", help="Enable DEBUG logging")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)
    config = ResolverConfig.from_env(allow_aircraft_fallback=not args.no_aircraft)
    clients, devices = _load(Path(args.dump))

    if args.enrich:
        for device in enrich_devices_with_locations(devices, config=config):
            loc = device.location
            coords = f"{loc.lat:.5f},{loc.lng:.5f}" if loc is not None and loc.is_valid else "-"
            print(f"{device.device_id:<32} {device.device_type:<24} {coords}")
        return

    by_client: dict[str, list[DeviceGroup]] = defaultdict(list)
    for device in devices:
        by_client[device.client_id or ""].append(device)

    for client in clients:
        location = resolve_client_location(client, by_client.get(client.client_id, []), config=config)
        print(f"{client.client_id:<32} {_format_location(location)}")


if __name__ == "__main__":
    main()
