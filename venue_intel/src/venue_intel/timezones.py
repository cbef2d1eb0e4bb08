"""Venue timezone resolution and human-readable timezone labels."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from datetime import UTC, datetime
from typing import Any
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from overlap.schemas.timezone import ResolvedTimezone
from overlap.schemas.venue import Fixture, GeoPoint

from venue_intel.catalog import (
    CITY_ZONES,
    COUNTRY_ZONES,
    FALLBACK_ABBREVIATIONS,
    MAX_CATALOG_DISTANCE,
    RECOGNIZED_ZONES,
    VENUE_COORDINATES,
    ZONE_CITIES,
)
from venue_intel.dates import parse_match_date
from venue_intel.geometry import degree_distance, round_half_up

logger = logging.getLogger(__name__)

DEFAULT_ZONE = "UTC"

# Errors zoneinfo and datetime arithmetic raise for unusable zones or instants.
ZONE_ERRORS = (ZoneInfoNotFoundError, ValueError, TypeError, OverflowError)


def is_valid_timezone(value: Any) -> bool:
    """True when ``value`` is one of the recognised zone identifiers."""
    return isinstance(value, str) and value in RECOGNIZED_ZONES


def timezone_from_coordinates(coordinates: Any) -> str | None:
    """Nearest catalog zone for a ``[lon, lat]`` pair, or ``None``.

    Coordinates are rounded to two decimals and compared by degree-space
    distance; matches at or beyond ``MAX_CATALOG_DISTANCE`` are rejected.

    The catalog value is returned as is and is not always a recognised zone
    (Porto maps to ``Europe/Porto``). Check the result with
    ``is_valid_timezone`` before using it, as ``resolve_timezone`` does.
    """
    point = GeoPoint.parse(coordinates)
    if point is None:
        return None

    lat = round_half_up(point.latitude, 2)
    lng = round_half_up(point.longitude, 2)

    closest = None
    min_distance = float("inf")
    for entry in VENUE_COORDINATES:
        distance = degree_distance(lat, lng, entry.latitude, entry.longitude)
        if distance < min_distance:
            min_distance = distance
            closest = entry

    if closest is None or min_distance >= MAX_CATALOG_DISTANCE:
        logger.debug("No catalog venue within %.1f deg of (%s, %s)", MAX_CATALOG_DISTANCE, lat, lng)
        return None
    return closest.zone_id


def timezone_from_location(city: str | None, country: str | None) -> str | None:
    """Zone for an exact city name, falling back to the country name."""
    if city and city in CITY_ZONES:
        return CITY_ZONES[city]
    if country and country in COUNTRY_ZONES:
        return COUNTRY_ZONES[country]
    return None


def _accept(candidate: str | None, strategy: str) -> bool:
    if candidate is None:
        return False
    if is_valid_timezone(candidate):
        return True
    logger.warning("Discarding unrecognised zone %r from %s lookup", candidate, strategy)
    return False


def resolve_timezone(fixture: Fixture | Mapping[str, Any] | None) -> ResolvedTimezone:
    """Resolve the IANA zone a fixture is played in.

    Strategies, first recognised zone wins:
    1. The fixture's own ``timezone`` claim, unless it is the literal "UTC"
       (upstream sends "UTC" when it does not know)
    2. Nearest catalog venue to the venue coordinates
    3. Venue city, then venue country
    4. "UTC"
    """
    fixture = Fixture.coerce(fixture)
    if fixture is None:
        return ResolvedTimezone()

    claimed = fixture.timezone
    if claimed and claimed != DEFAULT_ZONE and _accept(claimed, "explicit"):
        return ResolvedTimezone(zone_id=claimed, is_validated=True, source="explicit")

    venue = fixture.venue
    if venue is None:
        return ResolvedTimezone()

    point = venue.point
    if point is not None:
        candidate = timezone_from_coordinates(point)
        if _accept(candidate, "coordinate"):
            return ResolvedTimezone(zone_id=candidate, is_validated=True, source="coordinates")

    if venue.city or venue.country:
        candidate = timezone_from_location(venue.city, venue.country)
        if _accept(candidate, "location"):
            return ResolvedTimezone(zone_id=candidate, is_validated=True, source="location")

    return ResolvedTimezone()


def venue_timezone(fixture: Fixture | Mapping[str, Any] | None) -> str:
    """Shorthand for ``resolve_timezone(fixture).zone_id``."""
    return resolve_timezone(fixture).zone_id


def venue_local_time(value: Any, zone_id: str) -> datetime | None:
    """Kickoff instant expressed in the venue's zone, or ``None``.

    Returns the instant as parsed when the zone cannot be applied.
    """
    moment = parse_match_date(value)
    if moment is None:
        return None
    try:
        return moment.astimezone(ZoneInfo(zone_id))
    except ZONE_ERRORS as exc:
        logger.warning("Cannot convert kickoff to %r, keeping parsed offset: %s", zone_id, exc)
        return moment


def timezone_abbreviation(zone_id: str, when: datetime | None = None) -> str:
    """DST-aware short name of ``zone_id`` at ``when`` (e.g. GMT vs BST)."""
    when = when or datetime.now(UTC)
    if when.tzinfo is None:
        when = when.replace(tzinfo=UTC)
    try:
        name = when.astimezone(ZoneInfo(zone_id)).tzname()
    except ZONE_ERRORS as exc:
        logger.debug("No zoneinfo abbreviation for %r: %s", zone_id, exc)
        name = None
    if name:
        return name
    return FALLBACK_ABBREVIATIONS.get(zone_id, "UTC")


def city_for_timezone(zone_id: str) -> str:
    """Display city for a zone: curated name, else the last path segment."""
    if zone_id in ZONE_CITIES:
        return ZONE_CITIES[zone_id]
    return zone_id.split("/")[-1].replace("_", " ")


def timezone_label(zone_id: str, when: datetime | None = None, venue_city: str | None = None) -> str:
    """Hybrid label such as ``"BST (London)"``; plain ``"UTC"`` for UTC."""
    if zone_id == DEFAULT_ZONE:
        return f"UTC ({venue_city})" if venue_city else "UTC"

    abbreviation = timezone_abbreviation(zone_id, when)
    city = venue_city or city_for_timezone(zone_id)
    return f"{abbreviation} ({city})"
