"""Degree-space geometry helpers shared by the resolver, grouping and bounds code."""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable
from typing import Any, NamedTuple

from overlap.schemas.venue import GeoPoint

logger = logging.getLogger(__name__)


class BoundingBox(NamedTuple):
    min_latitude: float
    max_latitude: float
    min_longitude: float
    max_longitude: float

    @property
    def center(self) -> GeoPoint:
        return GeoPoint(
            longitude=(self.min_longitude + self.max_longitude) / 2,
            latitude=(self.min_latitude + self.max_latitude) / 2,
        )

    @property
    def latitude_span(self) -> float:
        return self.max_latitude - self.min_latitude

    @property
    def longitude_span(self) -> float:
        return self.max_longitude - self.min_longitude


def round_half_up(value: float, places: int = 0) -> float:
    """Round to ``places`` decimals, halves toward +infinity.

    Python's ``round`` rounds halves to even, which would make keys differ
    from the ones map clients compute.
    """
    factor = 10**places
    return math.floor(value * factor + 0.5) / factor


def format_coordinate(value: float, places: int = 6) -> str:
    """Plain decimal text of a rounded coordinate.

    ``10`` not ``10.0``, ``0.00005`` not ``5e-05``, and never ``-0``.
    """
    text = f"{value:.{places}f}".rstrip("0").rstrip(".")
    return "0" if text in ("", "-0") else text


def degree_distance(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Euclidean distance in degree space. Not a ground distance."""
    return math.hypot(lat1 - lat2, lon1 - lon2)


def valid_points(values: Iterable[Any]) -> list[GeoPoint]:
    """Parse every value into a ``GeoPoint``, dropping the ones that fail."""
    points: list[GeoPoint] = []
    dropped = 0
    for value in values:
        point = GeoPoint.parse(value)
        if point is None:
            dropped += 1
            continue
        points.append(point)
    if dropped:
        logger.debug("Excluded %d invalid point(s) from %d", dropped, dropped + len(points))
    return points


def bounding_box(points: Iterable[GeoPoint]) -> BoundingBox | None:
    """Axis-aligned box around ``points``; ``None`` when there are none."""
    points = list(points)
    if not points:
        return None
    lats = [p.latitude for p in points]
    lngs = [p.longitude for p in points]
    return BoundingBox(min(lats), max(lats), min(lngs), max(lngs))
