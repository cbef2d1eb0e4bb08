"""Inspect how a match search response would be shown: python -m venue_intel FILE."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

from overlap.config import get_settings
from overlap.schemas.timezone import FormatOptions
from overlap.schemas.venue import Match

from venue_intel.bounds import adaptive_bounds, zoom_category
from venue_intel.formatting import format_match_time, relative_match_time
from venue_intel.grouping import sorted_venue_groups
from venue_intel.timezones import resolve_timezone

logger = logging.getLogger("venue_intel")


def load_matches(path: Path) -> list[dict[str, Any]]:
    """Matches from a JSON file holding a list or an API envelope with ``response``."""
    payload = json.loads(path.read_text(encoding="utf-8"))
    if isinstance(payload, dict):
        payload = payload.get("response") or []
    if not isinstance(payload, list):
        raise ValueError(f"{path}: expected a list of matches or an object with 'response'")
    return [m for m in payload if isinstance(m, dict)]


def describe_match(match: dict[str, Any], options: FormatOptions) -> str:
    record = Match.coerce(match)
    fixture = record.fixture if record is not None else None
    date_value = fixture.date if fixture is not None else None
    resolved = resolve_timezone(fixture)
    kickoff = format_match_time(date_value, fixture, options)
    if isinstance(kickoff, dict):
        kickoff = f"date={kickoff['date']} time={kickoff['time']}"
    relative = relative_match_time(date_value, fixture) or "-"
    fixture_id = fixture.id if fixture is not None else None
    return f"{fixture_id}: zone={resolved.zone_id} ({resolved.source}) kickoff={kickoff} [{relative}]"


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Show venue zones, kickoff labels and map framing for matches.")
    parser.add_argument("path", type=Path, help="JSON file with matches (list or {'response': [...]}).")
    parser.add_argument(
        "--limit",
        type=int,
        default=None,
        help="Only describe the first N matches (grouping still uses all of them).",
    )
    parser.add_argument(
        "--time-format",
        choices=("12hour", "24hour"),
        default="12hour",
        help="Clock convention for kickoff times (default: 12hour).",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = _parser().parse_args(argv)
    logging.basicConfig(
        level=get_settings().log_level.upper(),
        format="%(asctime)s %(levelname)-8s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        matches = load_matches(args.path)
    except (OSError, ValueError) as exc:
        logger.error("Cannot read matches: %s", exc)
        return 1

    options = FormatOptions(time_format=args.time_format)
    shown = matches if args.limit is None else matches[: max(args.limit, 0)]
    for match in shown:
        print(describe_match(match, options))

    groups = sorted_venue_groups(matches)
    print(f"venue-groups: {len(groups)} from {len(matches)} matches")
    for group in groups:
        name = group.venue.name if group.venue is not None else None
        print(f"  {group.key} {name or '?'} matches={len(group.matches)}")

    points = [g.venue.point for g in groups if g.venue is not None and g.venue.point is not None]
    region = adaptive_bounds(points)
    print(
        "region:",
        f"center=({region.center.latitude:.4f}, {region.center.longitude:.4f})",
        f"span=({region.latitude_span:.3f}, {region.longitude_span:.3f})",
        f"zoom={zoom_category(region.latitude_span)}",
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
