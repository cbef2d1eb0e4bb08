"""Kickoff date parsing shared by the formatting and grouping code."""

from __future__ import annotations

import logging
from datetime import UTC, datetime
from typing import Any

logger = logging.getLogger(__name__)


def parse_match_date(value: Any) -> datetime | None:
    """Parse an ISO-8601 kickoff into an aware datetime.

    Naive values are taken to be UTC. Returns ``None`` for anything that does
    not parse.
    """
    if isinstance(value, datetime):
        moment = value
    elif isinstance(value, str) and value.strip():
        try:
            moment = datetime.fromisoformat(value.strip())
        except ValueError:
            logger.debug("Unparsable match date %r", value)
            return None
    else:
        return None

    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=UTC)
    return moment
