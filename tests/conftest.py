"""Integration test configuration."""

import pytest

from overlap.config import reset_settings_cache


@pytest.fixture(autouse=True)
def _fresh_settings():
    reset_settings_cache()
    yield
    reset_settings_cache()


@pytest.fixture
def sample_matches():
    """Search API matches: two fixtures at Wembley, one at the Emirates, one in Madrid."""
    return [
        {
            "fixture": {
                "id": 11,
                "date": "2025-03-22T15:00:00Z",
                "timezone": "UTC",
                "venue": {"id": 489, "name": "Wembley Stadium", "city": "London", "coordinates": [-0.2795, 51.556]},
            },
            "teams": {"home": {"name": "England"}, "away": {"name": "Latvia"}},
        },
        {
            "fixture": {
                "id": 12,
                "date": "2025-03-15T19:00:00Z",
                "timezone": "UTC",
                "venue": {"id": 494, "name": "Emirates Stadium", "city": "London", "coordinates": [-0.1086, 51.5549]},
            },
            "teams": {"home": {"name": "Arsenal"}, "away": {"name": "Chelsea"}},
        },
        {
            "fixture": {
                "id": 13,
                "date": "2025-03-16T20:00:00Z",
                "timezone": "Europe/Madrid",
                "venue": {"id": 1456, "name": "Santiago Bernabéu", "city": "Madrid", "coordinates": [-3.6883, 40.4531]},
            },
            "teams": {"home": {"name": "Real Madrid"}, "away": {"name": "Villarreal"}},
        },
        {
            "fixture": {
                "id": 14,
                "date": "2025-03-20T19:45:00Z",
                "timezone": "UTC",
                "venue": {"id": 9999, "name": "Wembley", "city": "London", "coordinates": [-0.2795, 51.556]},
            },
            "teams": {"home": {"name": "Tottenham"}, "away": {"name": "Fulham"}},
        },
    ]
