"""Tests for the overlap pydantic schemas -- parsing, coercion and option aliases."""

import pytest
from pydantic import ValidationError

from overlap.schemas import (
    BoundsOptions,
    Fixture,
    FormatOptions,
    GeoPoint,
    MapRegion,
    Match,
    ResolvedTimezone,
    SearchBoundsOptions,
    Venue,
    tbd_sentinel,
)

# ---------- GeoPoint ----------


class TestGeoPointParse:
    def test_lonlat_pair(self):
        assert GeoPoint.parse([-0.1278, 51.5074]) == GeoPoint(longitude=-0.1278, latitude=51.5074)
        assert GeoPoint.parse((10, 20)).as_lonlat() == (10.0, 20.0)

    def test_mappings(self):
        assert GeoPoint.parse({"lat": 1.5, "lng": 2.5}) == GeoPoint(longitude=2.5, latitude=1.5)
        assert GeoPoint.parse({"latitude": 1.5, "longitude": 2.5}) == GeoPoint(longitude=2.5, latitude=1.5)

    def test_instance_passthrough(self):
        point = GeoPoint(longitude=0.0, latitude=0.0)
        assert GeoPoint.parse(point) is point

    def test_rejects_bad_shapes(self):
        assert GeoPoint.parse(None) is None
        assert GeoPoint.parse("1,2") is None
        assert GeoPoint.parse([1.0, 2.0, 3.0]) is None
        assert GeoPoint.parse({"lat": 1.0}) is None

    def test_rejects_non_numbers(self):
        assert GeoPoint.parse(["1", "2"]) is None
        assert GeoPoint.parse([True, False]) is None
        assert GeoPoint.parse([float("nan"), 0.0]) is None
        assert GeoPoint.parse([0.0, float("inf")]) is None

    def test_rejects_out_of_range_without_clamping(self):
        assert GeoPoint.parse([180.5, 0.0]) is None
        assert GeoPoint.parse([0.0, -90.1]) is None
        assert GeoPoint.parse([180.0, -90.0]) == GeoPoint(longitude=180.0, latitude=-90.0)

    def test_constructor_validates_range(self):
        with pytest.raises(ValidationError):
            GeoPoint(longitude=200.0, latitude=0.0)

    def test_frozen(self):
        point = GeoPoint(longitude=0.0, latitude=0.0)
        with pytest.raises(ValidationError):
            point.latitude = 1.0


# ---------- Records ----------


class TestVenue:
    def test_non_string_text_fields_are_blanked(self):
        venue = Venue.model_validate({"name": 12, "city": ["London"], "country": None})

        assert venue.name is None
        assert venue.city is None
        assert venue.country is None

    def test_bool_id_is_dropped(self):
        assert Venue.model_validate({"id": True}).id is None
        assert Venue.model_validate({"id": 489}).id == 489

    def test_point_prefers_coordinates(self):
        venue = Venue(coordinates=[1.0, 2.0], lat=10.0, lng=20.0)

        assert venue.point == GeoPoint(longitude=1.0, latitude=2.0)

    def test_point_from_lat_lng(self):
        assert Venue(lat=2.0, lng=1.0).point == GeoPoint(longitude=1.0, latitude=2.0)
        assert Venue(latitude=2.0, longitude=1.0).point == GeoPoint(longitude=1.0, latitude=2.0)

    def test_unknown_fields_ignored(self):
        venue = Venue.model_validate({"id": 1, "capacity": 90000})

        assert not hasattr(venue, "capacity")


class TestCoerce:
    def test_none(self):
        assert Fixture.coerce(None) is None

    def test_instance_passthrough(self):
        fixture = Fixture(timezone="Europe/London")
        assert Fixture.coerce(fixture) is fixture

    def test_mapping(self):
        fixture = Fixture.coerce({"timezone": "Asia/Tokyo", "venue": {"city": "Tokyo"}})

        assert fixture.timezone == "Asia/Tokyo"
        assert fixture.venue.city == "Tokyo"

    def test_unusable_fields_are_dropped(self):
        fixture = Fixture.coerce({"timezone": 5, "date": 1742065200, "venue": "Wembley"})

        assert fixture.timezone is None
        assert fixture.date is None
        assert fixture.venue is None

    def test_non_mapping_raises(self):
        with pytest.raises(TypeError):
            Match.coerce(["not", "a", "match"])

    def test_match_keeps_extra_fields(self):
        match = Match.coerce({"fixture": {"id": 1}, "league": {"id": 39}})

        assert match.model_extra == {"league": {"id": 39}}

    def test_resolved_venue(self):
        assert Match.coerce({"venue": {"id": 2}}).resolved_venue.id == 2
        assert Match.coerce({"fixture": {"venue": {"id": 1}}, "venue": {"id": 2}}).resolved_venue.id == 1
        assert Match.coerce({"fixture": "broken"}).resolved_venue is None


# ---------- Options ----------


class TestOptions:
    def test_format_defaults(self):
        options = FormatOptions()

        assert options.show_timezone is True
        assert options.show_date is True
        assert options.show_year is False
        assert options.time_format == "12hour"

    def test_format_camel_case(self):
        options = FormatOptions.model_validate({"showYear": True, "timeFormat": "24hour"})

        assert options.show_year is True
        assert options.time_format == "24hour"

    def test_format_rejects_unknown_clock(self):
        with pytest.raises(ValidationError):
            FormatOptions(time_format="military")

    def test_bounds_defaults(self):
        options = BoundsOptions()

        assert options.min_span == 0.1
        assert options.max_span == 5.0
        assert options.urban_padding == 3.0
        assert options.rural_padding == 1.5
        assert options.default_center_latitude == 51.5074
        assert options.default_center_longitude == -0.1278
        assert options.default_span == 0.8

    def test_bounds_camel_case(self):
        assert BoundsOptions.model_validate({"urbanPadding": 4.0}).urban_padding == 4.0

    def test_search_bounds_defaults(self):
        options = SearchBoundsOptions()

        assert options.buffer_multiplier == 1.3
        assert options.max_span == 10.0


def test_map_region_rejects_non_positive_span():
    with pytest.raises(ValidationError):
        MapRegion(center=GeoPoint(longitude=0.0, latitude=0.0), latitude_span=0.0, longitude_span=1.0)


def test_resolved_timezone_defaults():
    assert ResolvedTimezone().model_dump() == {"zone_id": "UTC", "is_validated": False, "source": "default"}


def test_tbd_sentinel_copies():
    first = tbd_sentinel()
    first["time"] = "19:00"

    assert tbd_sentinel() == {"date": "TBD", "time": "TBD"}
