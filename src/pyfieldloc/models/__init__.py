"""Data models for devices, clients and resolved locations."""

from pyfieldloc.models._base import FieldLocBaseModel, ReadingTimestamp, parse_reading_timestamp
from pyfieldloc.models.client import ClientInfo, GeolocatedLocation
from pyfieldloc.models.device import CachedLocation, DeviceGroup, DeviceReading, SensorGroup
from pyfieldloc.models.location import Coordinates, LocationSource, ResolvedLocation

__all__ = [
    "CachedLocation",
    "ClientInfo",
    "Coordinates",
    "DeviceGroup",
    "DeviceReading",
    "FieldLocBaseModel",
    "GeolocatedLocation",
    "LocationSource",
    "ReadingTimestamp",
    "ResolvedLocation",
    "SensorGroup",
    "parse_reading_timestamp",
]
