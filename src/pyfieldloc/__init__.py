"""pyfieldloc - Location resolution for heterogeneous field-device telemetry."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pyfieldloc")
except PackageNotFoundError:
    __version__ = "0+local"
from pyfieldloc.classification import DEFAULT_KEYWORD_RULES, classify_device_type
from pyfieldloc.config import ResolverConfig
from pyfieldloc.exceptions import FieldLocConfigError, FieldLocError
from pyfieldloc.extraction.devices import extract_for_source
from pyfieldloc.extraction.generic import extract_location
from pyfieldloc.models import (
    CachedLocation,
    ClientInfo,
    Coordinates,
    DeviceGroup,
    DeviceReading,
    GeolocatedLocation,
    LocationSource,
    ResolvedLocation,
    SensorGroup,
)
from pyfieldloc.resolution.enrich import all_device_locations, enrich_devices_with_locations
from pyfieldloc.resolution.policy import source_priority
from pyfieldloc.resolution.resolver import (
    collect_candidates,
    extract_device_location,
    geolocate_client,
    resolve_client_location,
)

__all__ = [
    "__version__",
    "CachedLocation",
    "ClientInfo",
    "Coordinates",
    "DEFAULT_KEYWORD_RULES",
    "DeviceGroup",
    "DeviceReading",
    "FieldLocConfigError",
    "FieldLocError",
    "GeolocatedLocation",
    "LocationSource",
    "ResolvedLocation",
    "ResolverConfig",
    "SensorGroup",
    "all_device_locations",
    "classify_device_type",
    "collect_candidates",
    "enrich_devices_with_locations",
    "extract_device_location",
    "extract_for_source",
    "extract_location",
    "geolocate_client",
    "resolve_client_location",
    "source_priority",
]
