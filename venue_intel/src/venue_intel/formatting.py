"""Match kickoff rendering in venue local time."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from datetime import UTC, datetime
from typing import Any
from zoneinfo import ZoneInfo

from overlap.schemas.timezone import FormatOptions, TimeFormat, tbd_sentinel
from overlap.schemas.venue import Fixture

from venue_intel.dates import parse_match_date
from venue_intel.geometry import round_half_up
from venue_intel.timezones import (
    DEFAULT_ZONE,
    ZONE_ERRORS,
    is_valid_timezone,
    resolve_timezone,
    timezone_label,
    venue_local_time,
)

logger = logging.getLogger(__name__)

TIME_UNAVAILABLE = "Time unavailable"

WEEKDAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")

# (text, error); error is set when a fallback was used
StepResult = tuple[str | None, str | None]


def render_clock(moment: datetime, time_format: TimeFormat = "12hour") -> str:
    """``07:00 PM`` or ``19:00``; independent of the process locale."""
    if time_format == "24hour":
        return f"{moment.hour:02d}:{moment.minute:02d}"
    hour = moment.hour % 12 or 12
    meridiem = "AM" if moment.hour < 12 else "PM"
    return f"{hour:02d}:{moment.minute:02d} {meridiem}"


def render_day(moment: datetime, show_year: bool = False) -> str:
    """``Sat, Mar 15`` or ``Sat, Mar 15, 2025``."""
    text = f"{WEEKDAYS[moment.weekday()]}, {MONTHS[moment.month - 1]} {moment.day}"
    if show_year:
        text += f", {moment.year}"
    return text


def _in_zone(moment: datetime, zone_id: str) -> tuple[datetime | None, str | None]:
    try:
        return moment.astimezone(ZoneInfo(zone_id)), None
    except ZONE_ERRORS as exc:
        return None, f"{type(exc).__name__}: {exc}"


def _time_step(moment: datetime, zone_id: str, time_format: TimeFormat) -> StepResult:
    """Clock text in ``zone_id``; zone-naive text plus the error if that fails."""
    zoned, error = _in_zone(moment, zone_id)
    if zoned is None:
        return render_clock(moment, time_format), error
    return render_clock(zoned, time_format), None


def _date_step(moment: datetime, zone_id: str, show_year: bool) -> StepResult:
    """Day text in ``zone_id``; zone-naive text plus the error if that fails."""
    zoned, error = _in_zone(moment, zone_id)
    if zoned is None:
        return render_day(moment, show_year), error
    return render_day(zoned, show_year), None


def _coerce_options(options: FormatOptions | Mapping[str, Any] | None) -> FormatOptions:
    if options is None:
        return FormatOptions()
    if isinstance(options, FormatOptions):
        return options
    return FormatOptions.model_validate(dict(options))


def _compose_match_time(date_value: Any, fixture: Fixture | None, options: FormatOptions) -> StepResult:
    moment = parse_match_date(date_value)
    if moment is None:
        return None, f"invalid date {date_value!r}"

    zone_id = resolve_timezone(fixture).zone_id
    if not is_valid_timezone(zone_id):
        zone_id = DEFAULT_ZONE

    time_text, time_error = _time_step(moment, zone_id, options.time_format)
    if time_error:
        logger.warning("Zone-aware time rendering failed for %s, using zone-naive: %s", zone_id, time_error)

    date_text = None
    if options.show_date:
        date_text, date_error = _date_step(moment, zone_id, options.show_year)
        if date_error:
            logger.warning("Zone-aware date rendering failed for %s, using zone-naive: %s", zone_id, date_error)

    result = f"{date_text} at {time_text}" if date_text else time_text

    if options.show_timezone:
        venue_city = fixture.venue.city if fixture is not None and fixture.venue is not None else None
        result += f" ({timezone_label(zone_id, moment, venue_city)})"

    return result, None


def format_match_time(
    date_value: str | datetime | None,
    fixture: Fixture | Mapping[str, Any] | None,
    options: FormatOptions | Mapping[str, Any] | None = None,
) -> str | dict[str, str]:
    """Render a kickoff in the venue's local time.

    Returns ``{"date": "TBD", "time": "TBD"}`` when there is no date at all,
    and ``"Time unavailable"`` when the date cannot be rendered. Otherwise
    something like ``"Sat, Mar 15 at 07:00 PM (GMT (London))"``.
    """
    if not date_value:
        return tbd_sentinel()

    fixture = Fixture.coerce(fixture)
    text, error = _compose_match_time(date_value, fixture, _coerce_options(options))
    if text is None:
        logger.warning("Match time unavailable: %s", error)
        return TIME_UNAVAILABLE
    return text


def _plural(count: int, unit: str) -> str:
    return f"{count} {unit}{'' if count == 1 else 's'}"


def relative_match_time(
    date_value: str | datetime | None,
    fixture: Fixture | Mapping[str, Any] | None,
    *,
    now: datetime | None = None,
) -> str:
    """``"in 3 hours"``, ``"2 days ago"`` and so on; empty string on failure."""
    fixture = Fixture.coerce(fixture)
    zone_id = resolve_timezone(fixture).zone_id
    kickoff = venue_local_time(date_value, zone_id)
    if kickoff is None:
        return ""

    now = now or datetime.now(UTC)
    if now.tzinfo is None:
        now = now.replace(tzinfo=UTC)

    diff_seconds = (kickoff - now).total_seconds()
    hours = int(round_half_up(diff_seconds / 3600))
    days = int(round_half_up(diff_seconds / 86400))

    if diff_seconds < 0:
        if abs(hours) < 24:
            return f"{_plural(abs(hours), 'hour')} ago"
        return f"{_plural(abs(days), 'day')} ago"
    if hours < 24:
        return f"in {_plural(hours, 'hour')}"
    return f"in {_plural(days, 'day')}"
