"""Pydantic schemas for timezone resolution and match-time formatting."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel
from pydantic.alias_generators import to_camel

TimeFormat = Literal["12hour", "24hour"]
TimezoneSource = Literal["explicit", "coordinates", "location", "default"]

# Returned by format_match_time when the kickoff is not scheduled yet.
TBD_SENTINEL: dict[str, str] = {"date": "TBD", "time": "TBD"}


def tbd_sentinel() -> dict[str, str]:
    """Fresh copy of the TBD sentinel so callers cannot mutate the shared one."""
    return dict(TBD_SENTINEL)


class ResolvedTimezone(BaseModel):
    """Outcome of venue timezone resolution."""

    zone_id: str = "UTC"
    is_validated: bool = False
    source: TimezoneSource = "default"

    model_config = {"frozen": True}


class FormatOptions(BaseModel):
    """Display options for a formatted match time."""

    show_timezone: bool = True
    show_date: bool = True
    show_year: bool = False
    time_format: TimeFormat = "12hour"

    # Also accepts camelCase keys (showTimezone, timeFormat)
    model_config = {"alias_generator": to_camel, "populate_by_name": True}
