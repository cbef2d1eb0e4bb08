from overlap.schemas.map import BoundsOptions, MapRegion, SearchBounds, SearchBoundsOptions
from overlap.schemas.timezone import (
    TBD_SENTINEL,
    FormatOptions,
    ResolvedTimezone,
    TimeFormat,
    TimezoneSource,
    tbd_sentinel,
)
from overlap.schemas.venue import Fixture, GeoPoint, Match, Venue, VenueGroup

__all__ = [
    "BoundsOptions",
    "Fixture",
    "FormatOptions",
    "GeoPoint",
    "MapRegion",
    "Match",
    "ResolvedTimezone",
    "SearchBounds",
    "SearchBoundsOptions",
    "TBD_SENTINEL",
    "TimeFormat",
    "TimezoneSource",
    "Venue",
    "VenueGroup",
    "tbd_sentinel",
]
