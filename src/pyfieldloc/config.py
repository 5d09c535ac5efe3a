"""Resolver configuration for pyfieldloc."""

from __future__ import annotations

import dataclasses
import os
from typing import Any

from pyfieldloc.classification import DEFAULT_KEYWORD_RULES, DEFAULT_SOURCE, KeywordRule, validate_keyword_rules
from pyfieldloc.exceptions import FieldLocConfigError
from pyfieldloc.models.location import LocationSource


def _env_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "y", "on"}:
        return True
    if normalized in {"0", "false", "no", "n", "off"}:
        return False
    return default


@dataclasses.dataclass(frozen=True)
class ResolverConfig:
    """Resolution settings.

    Parameters
    ----------
    keyword_rules : tuple of (str, LocationSource)
        Classifier keyword table. Extend it by passing a longer tuple,
        e.g. ``DEFAULT_KEYWORD_RULES + (("ublox", LocationSource.GPS),)``.
    default_source : LocationSource
        Category for device types no keyword matches.
    use_cached_locations : bool
        Use a device's cached coordinate pair instead of re-extracting.
    allow_aircraft_fallback : bool
        Keep aircraft-tracking receiver candidates (ranked last). When
        ``False`` they are dropped entirely.
    include_raw : bool
        Attach the source payload to resolved locations.
    """

    keyword_rules: tuple[KeywordRule, ...] = DEFAULT_KEYWORD_RULES
    default_source: LocationSource = DEFAULT_SOURCE
    use_cached_locations: bool = True
    allow_aircraft_fallback: bool = True
    include_raw: bool = True

    def __post_init__(self) -> None:
        object.__setattr__(self, "keyword_rules", validate_keyword_rules(self.keyword_rules))
        try:
            default_source = LocationSource(self.default_source)
        except ValueError as exc:
            raise FieldLocConfigError(
                f"unknown default_source {self.default_source!r}", field="default_source"
            ) from exc
        if default_source == LocationSource.UNKNOWN:
            raise FieldLocConfigError("default_source cannot be 'unknown'", field="default_source")
        object.__setattr__(self, "default_source", default_source)

    @classmethod
    def from_env(cls, **overrides: Any) -> ResolverConfig:
        """Create configuration from ``FIELDLOC_*`` environment variables.

        Explicit keyword arguments override environment values.
        """
        env = os.environ
        config_kwargs: dict[str, Any] = {}

        _ENV_BOOL_MAP = {
            "FIELDLOC_USE_CACHED_LOCATIONS": ("use_cached_locations", True),
            "FIELDLOC_ALLOW_AIRCRAFT_FALLBACK": ("allow_aircraft_fallback", True),
            "FIELDLOC_INCLUDE_RAW": ("include_raw", True),
        }
        for env_key, (field_name, default) in _ENV_BOOL_MAP.items():
            if field_name not in overrides:
                config_kwargs[field_name] = _env_bool(env.get(env_key), default)

        source_env = env.get("FIELDLOC_DEFAULT_SOURCE")
        if source_env is not None and "default_source" not in overrides:
            config_kwargs["default_source"] = source_env.strip().lower()

        config_kwargs.update(overrides)

        return cls(**config_kwargs)
