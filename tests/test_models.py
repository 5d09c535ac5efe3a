"""Tests for record models."""

from __future__ import annotations

from datetime import UTC, datetime

import pytest
from pydantic import ValidationError

from pyfieldloc.models import (
    CachedLocation,
    ClientInfo,
    DeviceGroup,
    DeviceReading,
    GeolocatedLocation,
    LocationSource,
    ResolvedLocation,
    SensorGroup,
    parse_reading_timestamp,
)

# ------------------------------------------------------------------
# Timestamps
# ------------------------------------------------------------------


class TestReadingTimestamp:
    EXPECTED = datetime(2026, 1, 1, 12, 0, tzinfo=UTC)

    @pytest.mark.parametrize(
        "value",
        [
            "2026-01-01T12:00:00Z",
            "2026-01-01T12:00:00+00:00",
            "2026-01-01T12:00:00",
            1_767_268_800,
            1_767_268_800_000,
            1_767_268_800.0,
            datetime(2026, 1, 1, 12, 0),
        ],
    )
    def test_supported_encodings(self, value: object) -> None:
        assert parse_reading_timestamp(value) == self.EXPECTED

    @pytest.mark.parametrize("value", [None, "", "yesterday", True, -5, 0, float("nan"), 10**400, 10**20, [1]])
    def test_unparseable_becomes_none(self, value: object) -> None:
        assert parse_reading_timestamp(value) is None

    def test_reading_model_uses_parser(self) -> None:
        reading = DeviceReading.model_validate({"sensor_type": "gps", "timestamp": "not a date"})

        assert reading.timestamp is None


# ------------------------------------------------------------------
# Devices
# ------------------------------------------------------------------


def test_reading_accepts_device_type_alias() -> None:
    reading = DeviceReading.model_validate({"device_type": "lora", "client_id": "c1"})

    assert reading.sensor_type == "lora"


@pytest.mark.parametrize("data", [None, "payload", [1, 2], 42])
def test_non_mapping_payload_becomes_empty(data: object) -> None:
    assert DeviceReading.model_validate({"data": data}).data == {}


def test_device_group_requires_id() -> None:
    with pytest.raises(ValidationError):
        DeviceGroup.model_validate({"device_type": "gps"})


def test_device_group_ignores_display_fields_and_is_frozen() -> None:
    device = DeviceGroup.model_validate({"device_id": "d1", "device_type": None, "icon": "Satellite"})

    assert device.device_type == ""
    assert device.payload is None
    with pytest.raises(ValidationError):
        device.device_id = "d2"


def test_sensor_group_round_trip() -> None:
    sensor = SensorGroup.model_validate(
        {
            "sensor_type": "gps_receiver",
            "client_id": "c1",
            "latest": {"sensor_type": "gps_receiver", "data": {"lat": 1.0, "lng": 2.0}},
            "location": {"lat": 1.0, "lng": 2.0},
        }
    )

    device = sensor.to_device_group()

    assert device.device_id == "gps_receiver"
    assert device.device_type == "gps_receiver"
    assert device.has_cached_location
    assert device.to_sensor_group().latest == sensor.latest


# ------------------------------------------------------------------
# Clients and results
# ------------------------------------------------------------------


def test_client_geolocation_coercion() -> None:
    client = ClientInfo.model_validate(
        {"client_id": "c1", "location": {"latitude": "52.1", "longitude": 4.3, "city": 7, "country": "NL"}}
    )

    assert client.location is not None
    assert client.location.latitude is None
    assert client.location.city is None
    assert client.location.is_valid is False


def test_unknown_result() -> None:
    unknown = ResolvedLocation.unknown()

    assert unknown.source == LocationSource.UNKNOWN
    assert unknown.coordinates is None
    assert not unknown.is_known


def test_source_labels() -> None:
    assert LocationSource.GEOLOCATED.label == "IP Geolocation"
    assert LocationSource.ADSB.label == "ADS-B Receiver"
    assert all(source.label for source in LocationSource)


def test_reading_with_oversized_timestamp_validates() -> None:
    reading = DeviceReading.model_validate({"sensor_type": "gps", "timestamp": 10**400})

    assert reading.timestamp is None


@pytest.mark.parametrize("value", [10**400, -(10**400)])
def test_oversized_coordinates_are_dropped(value: int) -> None:
    cached = CachedLocation.model_validate({"lat": value, "lng": 2.0})
    geo = GeolocatedLocation.model_validate({"latitude": 1.0, "longitude": value})

    assert cached.lat is None
    assert not cached.is_valid
    assert geo.longitude is None
    assert not geo.is_valid
