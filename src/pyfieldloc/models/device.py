"""Device reading and device group models."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import AliasChoices, Field, field_validator

from pyfieldloc.extraction.normalize import finite_or_none
from pyfieldloc.models._base import FieldLocBaseModel, ReadingTimestamp


class CachedLocation(FieldLocBaseModel):
    """Coordinate pair previously attached to a device.

    Non-numeric or non-finite values are stored as ``None`` so a bad cache
    entry falls back to extraction instead of failing validation.
    """

    lat: float | None = None
    lng: float | None = None

    @field_validator("lat", "lng", mode="before")
    @classmethod
    def _coerce_coordinate(cls, value: Any) -> float | None:
        return finite_or_none(value)

    @property
    def is_valid(self) -> bool:
        return self.lat is not None and self.lng is not None


class DeviceReading(FieldLocBaseModel):
    """One reported payload.

    Parameters
    ----------
    sensor_type : str or None
        Free-text type label (``device_type`` is accepted as an alias).
    client_id : str or None
        Owning client.
    timestamp : datetime or None
        When the reading was taken.
    data : dict
        Opaque nested payload.
    device_id : str or None
        Legacy per-reading device identifier.
    """

    sensor_type: str | None = Field(default=None, validation_alias=AliasChoices("sensor_type", "device_type"))
    client_id: str | None = None
    timestamp: ReadingTimestamp = None
    data: dict[str, Any] = Field(default_factory=dict)
    device_id: str | None = None

    @field_validator("data", mode="before")
    @classmethod
    def _mapping_or_empty(cls, value: Any) -> Any:
        if isinstance(value, Mapping):
            return dict(value)
        return {}


class DeviceGroup(FieldLocBaseModel):
    """Latest-known state of one reporting device."""

    device_id: str
    device_type: str = ""
    client_id: str | None = None
    latest: DeviceReading | None = None
    readings: list[DeviceReading] = Field(default_factory=list)
    location: CachedLocation | None = None

    @field_validator("device_type", mode="before")
    @classmethod
    def _label_or_empty(cls, value: Any) -> str:
        return value if isinstance(value, str) else ""

    @property
    def has_cached_location(self) -> bool:
        return self.location is not None and self.location.is_valid

    @property
    def payload(self) -> dict[str, Any] | None:
        """Payload of the latest reading, if any."""
        if self.latest is None:
            return None
        return self.latest.data

    def to_sensor_group(self) -> SensorGroup:
        return SensorGroup(
            sensor_type=self.device_type,
            client_id=self.client_id,
            readings=self.readings,
            latest=self.latest,
            location=self.location,
        )


class SensorGroup(FieldLocBaseModel):
    """Sensor-keyed grouping used by newer ingestion paths.

    The sensor type doubles as the device identifier when converting.
    """

    sensor_type: str
    client_id: str | None = None
    readings: list[DeviceReading] = Field(default_factory=list)
    latest: DeviceReading | None = None
    location: CachedLocation | None = None

    def to_device_group(self) -> DeviceGroup:
        return DeviceGroup(
            device_id=self.sensor_type,
            device_type=self.sensor_type,
            client_id=self.client_id,
            readings=self.readings,
            latest=self.latest,
            location=self.location,
        )
