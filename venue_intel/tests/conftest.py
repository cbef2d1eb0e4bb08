"""Shared fixtures for venue_intel tests."""

from datetime import UTC, datetime

import pytest


@pytest.fixture
def london_fixture():
    """Fixture at Wembley; upstream says "UTC" because it does not know."""
    return {
        "id": 1001,
        "date": "2025-03-15T19:00:00Z",
        "timezone": "UTC",
        "venue": {
            "id": 489,
            "name": "Wembley Stadium",
            "city": "London",
            "country": "England",
            "coordinates": [-0.2795, 51.556],
        },
    }


@pytest.fixture
def madrid_fixture():
    return {
        "id": 2002,
        "date": "2025-03-15T19:00:00Z",
        "timezone": "UTC",
        "venue": {
            "id": 1456,
            "name": "Santiago Bernabéu",
            "city": "Madrid",
            "country": "Spain",
            "coordinates": [-3.6883, 40.4531],
        },
    }


@pytest.fixture
def tokyo_fixture():
    return {
        "id": 3003,
        "date": "2025-03-15T10:00:00Z",
        "venue": {
            "id": 7001,
            "name": "National Stadium",
            "city": "Tokyo",
            "country": "Japan",
            "coordinates": [139.7146, 35.6778],
        },
    }


@pytest.fixture
def now():
    return datetime(2025, 3, 15, 12, 0, tzinfo=UTC)
