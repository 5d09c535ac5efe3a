from __future__ import annotations

import pytest

from pyfieldloc.classification import DEFAULT_KEYWORD_RULES
from pyfieldloc.config import ResolverConfig
from pyfieldloc.exceptions import FieldLocConfigError, FieldLocError
from pyfieldloc.models.location import LocationSource


def test_defaults() -> None:
    config = ResolverConfig()

    assert config.keyword_rules == DEFAULT_KEYWORD_RULES
    assert config.default_source == LocationSource.GEOLOCATED
    assert config.use_cached_locations is True
    assert config.allow_aircraft_fallback is True
    assert config.include_raw is True


def test_from_env(monkeypatch) -> None:
    monkeypatch.setenv("FIELDLOC_ALLOW_AIRCRAFT_FALLBACK", "off")
    monkeypatch.setenv("FIELDLOC_INCLUDE_RAW", "no")
    monkeypatch.setenv("FIELDLOC_DEFAULT_SOURCE", " WiFi ")

    config = ResolverConfig.from_env()

    assert config.allow_aircraft_fallback is False
    assert config.include_raw is False
    assert config.use_cached_locations is True
    assert config.default_source == LocationSource.WIFI


def test_from_env_unrecognised_bool_keeps_default(monkeypatch) -> None:
    monkeypatch.setenv("FIELDLOC_USE_CACHED_LOCATIONS", "maybe")

    assert ResolverConfig.from_env().use_cached_locations is True


def test_overrides_beat_env(monkeypatch) -> None:
    monkeypatch.setenv("FIELDLOC_USE_CACHED_LOCATIONS", "false")
    monkeypatch.setenv("FIELDLOC_DEFAULT_SOURCE", "wifi")

    config = ResolverConfig.from_env(use_cached_locations=True, default_source=LocationSource.SYSTEM)

    assert config.use_cached_locations is True
    assert config.default_source == LocationSource.SYSTEM


def test_invalid_default_source_from_env(monkeypatch) -> None:
    monkeypatch.setenv("FIELDLOC_DEFAULT_SOURCE", "bogus")

    with pytest.raises(FieldLocConfigError):
        ResolverConfig.from_env()


def test_unknown_default_source_rejected() -> None:
    with pytest.raises(FieldLocConfigError) as excinfo:
        ResolverConfig(default_source=LocationSource.UNKNOWN)

    assert excinfo.value.field == "default_source"
    assert isinstance(excinfo.value, FieldLocError)


def test_keyword_rules_are_validated_and_frozen() -> None:
    config = ResolverConfig(keyword_rules=[("ublox", LocationSource.GPS)])

    assert config.keyword_rules == (("ublox", LocationSource.GPS),)

    with pytest.raises(FieldLocConfigError):
        ResolverConfig(keyword_rules=[("gps", LocationSource.GPS), ("gpsd", LocationSource.SYSTEM)])
