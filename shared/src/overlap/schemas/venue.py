"""Pydantic schemas for venue, fixture and match records."""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping, Sequence
from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field, ValidationError, field_validator

logger = logging.getLogger(__name__)


def _is_real_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool) and math.isfinite(value)


class _Record(BaseModel):
    """Base for upstream records that arrive as loosely shaped JSON."""

    model_config = {"extra": "ignore"}

    @classmethod
    def coerce(cls, value: Any):
        """Return ``value`` as an instance of this record, or ``None``.

        Raw mappings are validated; a mapping that still fails validation is
        logged and treated as absent. Anything that is neither a mapping nor
        an instance is a caller bug and raises ``TypeError``.
        """
        if value is None:
            return None
        if isinstance(value, cls):
            return value
        if isinstance(value, Mapping):
            try:
                return cls.model_validate(dict(value))
            except ValidationError as exc:
                logger.warning("Discarding malformed %s record: %s", cls.__name__, exc.errors()[:1])
                return None
        raise TypeError(f"expected {cls.__name__} or mapping, got {type(value).__name__}")


class GeoPoint(BaseModel):
    """A WGS84 position in degrees."""

    longitude: float = Field(ge=-180.0, le=180.0, allow_inf_nan=False)
    latitude: float = Field(ge=-90.0, le=90.0, allow_inf_nan=False)

    model_config = {"frozen": True}

    @classmethod
    def parse(cls, value: Any) -> GeoPoint | None:
        """Parse a point from any of the shapes upstream data uses.

        Accepts a ``GeoPoint``, a GeoJSON ``[lon, lat]`` pair, or a mapping
        with ``lat``/``lng`` or ``latitude``/``longitude`` keys. Returns
        ``None`` unless both values are finite numbers inside the valid range.
        """
        if isinstance(value, GeoPoint):
            return value
        if isinstance(value, Mapping):
            if value.get("lat") is not None and value.get("lng") is not None:
                lon, lat = value["lng"], value["lat"]
            elif value.get("latitude") is not None and value.get("longitude") is not None:
                lon, lat = value["longitude"], value["latitude"]
            else:
                return None
        elif isinstance(value, Sequence) and not isinstance(value, (str, bytes)):
            if len(value) != 2:
                return None
            lon, lat = value
        else:
            return None

        if not (_is_real_number(lon) and _is_real_number(lat)):
            return None
        if not (-180.0 <= lon <= 180.0 and -90.0 <= lat <= 90.0):
            logger.debug("Excluding out-of-range coordinates lon=%s lat=%s", lon, lat)
            return None
        return cls(longitude=float(lon), latitude=float(lat))

    def as_lonlat(self) -> tuple[float, float]:
        return self.longitude, self.latitude


class Venue(_Record):
    """Stadium record. Every field is optional."""

    id: str | int | None = None
    name: str | None = None
    city: str | None = None
    country: str | None = None
    coordinates: Any = None  # GeoJSON [lon, lat] or {lat, lng}; validated lazily
    lat: Any = None
    lng: Any = None
    latitude: Any = None
    longitude: Any = None

    @field_validator("name", "city", "country", mode="before")
    @classmethod
    def _blank_non_strings(cls, value: Any) -> str | None:
        return value if isinstance(value, str) else None

    @field_validator("id", mode="before")
    @classmethod
    def _normalize_id(cls, value: Any) -> str | int | None:
        if isinstance(value, bool) or not isinstance(value, (str, int)):
            return None
        return value

    @property
    def point(self) -> GeoPoint | None:
        """Validated location of the venue, whichever field carries it."""
        if self.coordinates is not None:
            return GeoPoint.parse(self.coordinates)
        for lat, lng in ((self.lat, self.lng), (self.latitude, self.longitude)):
            if lat is not None and lng is not None:
                return GeoPoint.parse({"lat": lat, "lng": lng})
        return None


class Fixture(_Record):
    """Fixture block of a match record."""

    id: str | int | None = None
    date: str | datetime | None = None
    timezone: str | None = None  # claimed IANA zone; "UTC" means unknown
    venue: Venue | None = None

    @field_validator("timezone", mode="before")
    @classmethod
    def _blank_non_string_timezone(cls, value: Any) -> str | None:
        return value if isinstance(value, str) else None

    @field_validator("date", mode="before")
    @classmethod
    def _blank_unusable_date(cls, value: Any) -> str | datetime | None:
        return value if isinstance(value, (str, datetime)) else None

    @field_validator("id", mode="before")
    @classmethod
    def _normalize_id(cls, value: Any) -> str | int | None:
        if isinstance(value, bool) or not isinstance(value, (str, int)):
            return None
        return value

    @field_validator("venue", mode="before")
    @classmethod
    def _drop_non_mapping_venue(cls, value: Any) -> Any:
        return value if isinstance(value, (Mapping, Venue)) else None


class Match(_Record):
    """A match as delivered by the search API. Extra fields are preserved."""

    fixture: Fixture | None = None
    teams: dict[str, Any] | None = None
    venue: Venue | None = None

    model_config = {"extra": "allow"}

    @field_validator("fixture", mode="before")
    @classmethod
    def _drop_non_mapping_fixture(cls, value: Any) -> Any:
        return value if isinstance(value, (Mapping, Fixture)) else None

    @field_validator("venue", mode="before")
    @classmethod
    def _drop_non_mapping_venue(cls, value: Any) -> Any:
        return value if isinstance(value, (Mapping, Venue)) else None

    @field_validator("teams", mode="before")
    @classmethod
    def _drop_non_mapping_teams(cls, value: Any) -> Any:
        return dict(value) if isinstance(value, Mapping) else None

    @property
    def resolved_venue(self) -> Venue | None:
        """Fixture venue when present, otherwise the top-level venue."""
        if self.fixture is not None and self.fixture.venue is not None:
            return self.fixture.venue
        return self.venue


class VenueGroup(BaseModel):
    """Matches played at one physical stadium."""

    key: str
    venue: Venue | None = None
    matches: list[Any] = Field(default_factory=list)
