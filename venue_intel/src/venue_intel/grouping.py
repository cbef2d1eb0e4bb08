"""Collapse matches played at one physical stadium into a single map marker."""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable, Mapping
from typing import Any

from overlap.schemas.venue import GeoPoint, Match, Venue, VenueGroup

from venue_intel.dates import parse_match_date
from venue_intel.geometry import format_coordinate, round_half_up

logger = logging.getLogger(__name__)

# ~0.1 m; absorbs float noise between records of the same stadium
KEY_PRECISION = 6

# Serialised "no value" ids some upstream records carry
_MISSING_IDS = {"", "null", "undefined", "None"}


def extract_venue_point(venue: Venue | Mapping[str, Any] | None) -> GeoPoint | None:
    """Validated venue location from coordinates or lat/lng fields."""
    venue = Venue.coerce(venue)
    return venue.point if venue is not None else None


def venue_has_coordinates(venue: Venue | Mapping[str, Any] | None) -> bool:
    return extract_venue_point(venue) is not None


def _key_for_venue(venue: Venue) -> str | None:
    point = venue.point
    if point is not None:
        lon = format_coordinate(round_half_up(point.longitude, KEY_PRECISION), KEY_PRECISION)
        lat = format_coordinate(round_half_up(point.latitude, KEY_PRECISION), KEY_PRECISION)
        return f"geo:{lon},{lat}"
    if venue.id is not None and str(venue.id) not in _MISSING_IDS:
        return f"id:{venue.id}"
    return None


def venue_group_key(match: Match | Mapping[str, Any] | None) -> str | None:
    """Stable key shared by every match played at the same stadium.

    Coordinates win over venue ids: two venue records with different ids can
    describe the same ground. Returns ``None`` when neither is usable.
    """
    match = Match.coerce(match)
    if match is None:
        return None
    venue = match.resolved_venue
    if venue is None:
        return None
    return _key_for_venue(venue)


def group_matches(matches: Iterable[Match | Mapping[str, Any]]) -> dict[str, VenueGroup]:
    """Partition matches by venue key, keeping input order.

    Matches without a key are left out entirely. Each group holds the caller's
    original match objects; ``venue`` is taken from the first match.
    """
    groups: dict[str, VenueGroup] = {}
    skipped = 0
    for raw in matches:
        match = Match.coerce(raw)
        venue = match.resolved_venue if match is not None else None
        key = _key_for_venue(venue) if venue is not None else None
        if key is None:
            skipped += 1
            continue
        group = groups.get(key)
        if group is None:
            group = groups[key] = VenueGroup(key=key, venue=venue)
        group.matches.append(raw)

    if skipped:
        logger.debug("Left %d match(es) without a usable venue out of grouping", skipped)
    return groups


def _kickoff_sort_key(match: Any) -> float:
    record = Match.coerce(match)
    fixture = record.fixture if record is not None else None
    kickoff = parse_match_date(fixture.date) if fixture is not None else None
    return kickoff.timestamp() if kickoff is not None else math.inf


def sorted_venue_groups(matches: Iterable[Match | Mapping[str, Any]]) -> list[VenueGroup]:
    """Venue groups in marker order.

    Matches inside a group run chronologically and groups are ordered by
    their earliest kickoff. Undated matches sort last.
    """
    groups = list(group_matches(matches).values())
    for group in groups:
        group.matches.sort(key=_kickoff_sort_key)
    groups.sort(key=lambda g: _kickoff_sort_key(g.matches[0]))
    return groups
