"""Location models: source categories, coordinates and resolved results."""

from __future__ import annotations

from datetime import datetime
from enum import StrEnum
from typing import Any

from pydantic import Field

from pyfieldloc.models._base import FieldLocBaseModel


class LocationSource(StrEnum):
    """Trust class of the device a location came from.

    Ranking lives in :func:`pyfieldloc.resolution.policy.source_priority`.
    """

    SATELLITE = "satellite"
    GPS = "gps"
    LORA = "lora"
    ENVIRONMENTAL = "environmental"
    SYSTEM = "system"
    WIFI = "wifi"
    BLUETOOTH = "bluetooth"
    GEOLOCATED = "geolocated"
    ADSB = "adsb"
    UNKNOWN = "unknown"

    @property
    def priority(self) -> int:
        """Lower is more trustworthy."""
        # Import lazily; policy imports this module.
        from pyfieldloc.resolution.policy import source_priority

        return source_priority(self)

    @property
    def label(self) -> str:
        return _LABELS[self]


_LABELS: dict[LocationSource, str] = {
    LocationSource.SATELLITE: "Starlink",
    LocationSource.GPS: "GPS",
    LocationSource.LORA: "LoRa",
    LocationSource.ENVIRONMENTAL: "Arduino GPS",
    LocationSource.SYSTEM: "System",
    LocationSource.WIFI: "WiFi",
    LocationSource.BLUETOOTH: "Bluetooth",
    LocationSource.GEOLOCATED: "IP Geolocation",
    LocationSource.ADSB: "ADS-B Receiver",
    LocationSource.UNKNOWN: "Unknown",
}


class Coordinates(FieldLocBaseModel):
    """A coordinate pair pulled out of one payload.

    Extractors only build this after checking ``lat``/``lng`` are finite.
    """

    lat: float
    lng: float
    altitude: float | None = None
    accuracy: float | None = None
    city: str | None = None
    country: str | None = None


class ResolvedLocation(FieldLocBaseModel):
    """Best-known location for a client or a single device.

    Parameters
    ----------
    latitude, longitude : float or None
        ``None`` only for the degraded ``unknown`` result.
    altitude : float or None
        Metres, when the payload carried it.
    accuracy : float or None
        Accuracy radius in metres, when the payload carried it.
    city, country : str or None
        Place names, when the payload or geolocation carried them.
    source : LocationSource
        Category of the contributing device.
    device_id : str or None
        Contributing device; ``None`` for geolocated/unknown results.
    timestamp : datetime or None
        Timestamp of the contributing reading.
    raw : dict or None
        Payload the coordinates were extracted from.
    """

    latitude: float | None = None
    longitude: float | None = None
    altitude: float | None = None
    accuracy: float | None = None
    city: str | None = None
    country: str | None = None
    source: LocationSource = LocationSource.UNKNOWN
    device_id: str | None = None
    timestamp: datetime | None = None
    raw: dict[str, Any] | None = Field(default=None, repr=False)

    @classmethod
    def unknown(cls) -> ResolvedLocation:
        return cls(source=LocationSource.UNKNOWN)

    @property
    def is_known(self) -> bool:
        return self.source != LocationSource.UNKNOWN and self.coordinates is not None

    @property
    def coordinates(self) -> tuple[float, float] | None:
        if self.latitude is None or self.longitude is None:
            return None
        return (self.latitude, self.longitude)
