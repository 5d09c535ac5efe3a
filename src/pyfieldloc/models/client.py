"""Client record model."""

from __future__ import annotations

from typing import Any

from pydantic import field_validator

from pyfieldloc.extraction.normalize import finite_or_none, str_or_none
from pyfieldloc.models._base import FieldLocBaseModel


class GeolocatedLocation(FieldLocBaseModel):
    """Location derived from the client's network identity (IP lookup)."""

    city: str | None = None
    country: str | None = None
    latitude: float | None = None
    longitude: float | None = None

    @field_validator("latitude", "longitude", mode="before")
    @classmethod
    def _coerce_coordinate(cls, value: Any) -> float | None:
        return finite_or_none(value)

    @field_validator("city", "country", mode="before")
    @classmethod
    def _coerce_name(cls, value: Any) -> str | None:
        return str_or_none(value)

    @property
    def is_valid(self) -> bool:
        return self.latitude is not None and self.longitude is not None


class ClientInfo(FieldLocBaseModel):
    """A reporting client (one host with any number of attached devices)."""

    client_id: str
    hostname: str | None = None
    ip_address: str | None = None
    status: str | None = None
    last_seen: str | None = None
    location: GeolocatedLocation | None = None
