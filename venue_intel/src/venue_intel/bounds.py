"""Camera framing for a set of venues.

A fixed padding factor either crops a tight city cluster too closely or zooms
too far out on a spread-out regional selection, so the padding depends on
whether the points look urban.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from overlap.schemas.map import BoundsOptions, MapRegion, SearchBounds, SearchBoundsOptions
from overlap.schemas.venue import GeoPoint

from venue_intel.catalog import (
    TIGHT_CLUSTER_SPAN,
    URBAN_CENTERS,
    WIDEST_ZOOM_CATEGORY,
    ZOOM_CATEGORIES,
)
from venue_intel.geometry import bounding_box, degree_distance, valid_points

logger = logging.getLogger(__name__)


def default_region(options: BoundsOptions | Mapping[str, Any] | None = None) -> MapRegion:
    """Fallback region used when there is nothing to frame.

    Center and span come from ``options``; the span is clamped into
    ``[min_span, max_span]`` like any other.
    """
    options = _coerce_options(options, BoundsOptions)
    span = _clamp(options.default_span, options.min_span, options.max_span)
    return MapRegion(
        center=GeoPoint(
            longitude=options.default_center_longitude,
            latitude=options.default_center_latitude,
        ),
        latitude_span=span,
        longitude_span=span,
    )


def is_urban_area(center: GeoPoint, latitude_span: float, longitude_span: float) -> bool:
    """Near a major football city, or a cluster tight enough to be one."""
    for area in URBAN_CENTERS:
        if degree_distance(center.latitude, center.longitude, area.latitude, area.longitude) < area.radius:
            return True
    return latitude_span + longitude_span < TIGHT_CLUSTER_SPAN


def _clamp(value: float, low: float, high: float) -> float:
    return max(min(value, high), low)


def _coerce_options(options: Any, model: type) -> Any:
    if options is None:
        return model()
    if isinstance(options, model):
        return options
    return model.model_validate(dict(options))


def adaptive_bounds(
    points: Iterable[Any] | None,
    options: BoundsOptions | Mapping[str, Any] | None = None,
) -> MapRegion:
    """Region centered on ``points`` and padded by how urban they look.

    ``points`` may hold ``GeoPoint`` instances, ``[lon, lat]`` pairs or
    ``{latitude, longitude}`` / ``{lat, lng}`` mappings. Invalid entries are
    dropped; with nothing left the default region from ``options`` is returned.
    Spans are clamped per axis into ``[min_span, max_span]``.
    """
    options = _coerce_options(options, BoundsOptions)
    box = bounding_box(valid_points(points or ()))
    if box is None:
        return default_region(options)

    center = box.center
    urban = is_urban_area(center, box.latitude_span, box.longitude_span)
    padding = options.urban_padding if urban else options.rural_padding

    region = MapRegion(
        center=center,
        latitude_span=_clamp(box.latitude_span * padding, options.min_span, options.max_span),
        longitude_span=_clamp(box.longitude_span * padding, options.min_span, options.max_span),
    )
    logger.debug(
        "Framed %s area at (%.4f, %.4f) span %.3fx%.3f",
        "urban" if urban else "rural",
        center.latitude,
        center.longitude,
        region.latitude_span,
        region.longitude_span,
    )
    return region


def search_bounds(
    region: MapRegion,
    options: SearchBoundsOptions | Mapping[str, Any] | None = None,
) -> SearchBounds:
    """Corners of ``region`` widened by a buffer, for querying matches nearby."""
    options = _coerce_options(options, SearchBoundsOptions)
    lat_span = min(region.latitude_span * options.buffer_multiplier, options.max_span)
    lng_span = min(region.longitude_span * options.buffer_multiplier, options.max_span)
    return MapRegion.model_construct(
        center=region.center, latitude_span=lat_span, longitude_span=lng_span
    ).to_bounds()


def region_to_bounds(region: MapRegion) -> SearchBounds:
    return region.to_bounds()


def region_from_bounds(bounds: SearchBounds) -> MapRegion | None:
    """Inverse of ``region_to_bounds``; ``None`` for a degenerate box."""
    lat_span = bounds.northeast.latitude - bounds.southwest.latitude
    lng_span = bounds.northeast.longitude - bounds.southwest.longitude
    if lat_span <= 0 or lng_span <= 0:
        return None
    return MapRegion(
        center=GeoPoint(
            longitude=(bounds.northeast.longitude + bounds.southwest.longitude) / 2,
            latitude=(bounds.northeast.latitude + bounds.southwest.latitude) / 2,
        ),
        latitude_span=lat_span,
        longitude_span=lng_span,
    )


def is_within_bounds(point: Any, bounds: SearchBounds) -> bool:
    """True when ``point`` parses and lies inside ``bounds`` (edges included)."""
    parsed = GeoPoint.parse(point)
    return parsed is not None and bounds.contains(parsed)


def zoom_category(latitude_span: float) -> str:
    for upper, name in ZOOM_CATEGORIES:
        if latitude_span < upper:
            return name
    return WIDEST_ZOOM_CATEGORY
