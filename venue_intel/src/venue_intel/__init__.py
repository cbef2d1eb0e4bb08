"""Venue intelligence: timezone resolution, venue grouping and map framing."""

from venue_intel.bounds import (
    adaptive_bounds,
    default_region,
    is_urban_area,
    is_within_bounds,
    region_from_bounds,
    region_to_bounds,
    search_bounds,
    zoom_category,
)
from venue_intel.formatting import TIME_UNAVAILABLE, format_match_time, relative_match_time
from venue_intel.grouping import (
    extract_venue_point,
    group_matches,
    sorted_venue_groups,
    venue_group_key,
    venue_has_coordinates,
)
from venue_intel.timezones import (
    city_for_timezone,
    is_valid_timezone,
    resolve_timezone,
    timezone_abbreviation,
    timezone_from_coordinates,
    timezone_from_location,
    timezone_label,
    venue_local_time,
    venue_timezone,
)

__all__ = [
    "TIME_UNAVAILABLE",
    "adaptive_bounds",
    "city_for_timezone",
    "default_region",
    "extract_venue_point",
    "format_match_time",
    "group_matches",
    "is_urban_area",
    "is_valid_timezone",
    "is_within_bounds",
    "region_from_bounds",
    "region_to_bounds",
    "relative_match_time",
    "resolve_timezone",
    "search_bounds",
    "sorted_venue_groups",
    "timezone_abbreviation",
    "timezone_from_coordinates",
    "timezone_from_location",
    "timezone_label",
    "venue_group_key",
    "venue_has_coordinates",
    "venue_local_time",
    "venue_timezone",
    "zoom_category",
]
