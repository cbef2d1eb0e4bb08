"""Tests for venue group keys and stadium grouping."""

from overlap.schemas.venue import GeoPoint, Venue
from venue_intel.grouping import (
    extract_venue_point,
    group_matches,
    sorted_venue_groups,
    venue_group_key,
    venue_has_coordinates,
)


def _match(match_id, date, venue, **extra):
    return {"fixture": {"id": match_id, "date": date, "venue": venue}, **extra}


# ---------- Keys ----------


class TestVenueGroupKey:
    def test_geo_key_from_coordinates(self):
        match = _match(1, None, {"id": 489, "coordinates": [-0.1278, 51.5074]})

        assert venue_group_key(match) == "geo:-0.1278,51.5074"

    def test_float_noise_shares_a_key(self):
        a = _match(1, None, {"coordinates": [-0.1278, 51.5074]})
        b = _match(2, None, {"coordinates": [-0.12780004, 51.50740001]})

        assert venue_group_key(a) == venue_group_key(b)

    def test_coordinates_win_over_ids(self):
        a = _match(1, None, {"id": 489, "coordinates": [-0.2795, 51.556]})
        b = _match(2, None, {"id": 9999, "coordinates": [-0.2795, 51.556]})

        assert venue_group_key(a) == venue_group_key(b) == "geo:-0.2795,51.556"

    def test_whole_numbers_have_no_trailing_zero(self):
        assert venue_group_key(_match(1, None, {"coordinates": [10.0, 20.0]})) == "geo:10,20"

    def test_negative_zero(self):
        assert venue_group_key(_match(1, None, {"coordinates": [-0.0, 0.0]})) == "geo:0,0"
        assert venue_group_key(_match(1, None, {"coordinates": [-0.0000001, 0.0]})) == "geo:0,0"

    def test_near_zero_coordinates_stay_decimal(self):
        assert venue_group_key(_match(1, None, {"coordinates": [0.00005, 51.5]})) == "geo:0.00005,51.5"

    def test_lat_lng_fields(self):
        match = _match(1, None, {"lat": 40.4531, "lng": -3.6883})

        assert venue_group_key(match) == "geo:-3.6883,40.4531"

    def test_id_fallback(self):
        assert venue_group_key(_match(1, None, {"id": 489, "name": "Wembley"})) == "id:489"
        assert venue_group_key(_match(1, None, {"id": "wembley"})) == "id:wembley"

    def test_invalid_coordinates_fall_back_to_id(self):
        match = _match(1, None, {"id": 489, "coordinates": [999, 51.5]})

        assert venue_group_key(match) == "id:489"

    def test_serialised_missing_ids(self):
        for missing in ("null", "undefined", ""):
            assert venue_group_key(_match(1, None, {"id": missing})) is None

    def test_top_level_venue(self):
        match = {"fixture": {"id": 1}, "venue": {"id": 12}}

        assert venue_group_key(match) == "id:12"

    def test_fixture_venue_wins_over_top_level(self):
        match = {"fixture": {"id": 1, "venue": {"id": 11}}, "venue": {"id": 12}}

        assert venue_group_key(match) == "id:11"

    def test_nothing_usable(self):
        assert venue_group_key(None) is None
        assert venue_group_key({}) is None
        assert venue_group_key(_match(1, None, {"name": "Somewhere"})) is None


# ---------- Points ----------


def test_extract_venue_point():
    assert extract_venue_point({"coordinates": [-0.1278, 51.5074]}) == GeoPoint(longitude=-0.1278, latitude=51.5074)
    assert extract_venue_point({"latitude": 51.5, "longitude": -0.1}) == GeoPoint(longitude=-0.1, latitude=51.5)
    assert extract_venue_point(Venue(coordinates={"lat": 1.0, "lng": 2.0})) == GeoPoint(longitude=2.0, latitude=1.0)
    assert extract_venue_point({"coordinates": [True, 51.5]}) is None
    assert extract_venue_point(None) is None


def test_venue_has_coordinates():
    assert venue_has_coordinates({"coordinates": [10, 20]}) is True
    assert venue_has_coordinates({"coordinates": [10]}) is False
    assert venue_has_coordinates({"id": 3}) is False


# ---------- Grouping ----------


class TestGroupMatches:
    def test_groups_by_key_in_input_order(self):
        wembley_a = _match(1, "2025-03-20T19:00:00Z", {"id": 489, "name": "Wembley", "coordinates": [-0.2795, 51.556]})
        bernabeu = _match(2, "2025-03-15T20:00:00Z", {"id": 1456, "coordinates": [-3.6883, 40.4531]})
        wembley_b = _match(3, "2025-03-16T15:00:00Z", {"id": 555, "coordinates": [-0.2795, 51.556]})

        groups = group_matches([wembley_a, bernabeu, wembley_b])

        assert list(groups) == ["geo:-0.2795,51.556", "geo:-3.6883,40.4531"]
        assert groups["geo:-0.2795,51.556"].matches == [wembley_a, wembley_b]
        assert groups["geo:-0.2795,51.556"].venue.name == "Wembley"

    def test_keeps_caller_objects(self):
        match = _match(1, None, {"id": 7}, teams={"home": {"name": "Arsenal"}})

        groups = group_matches([match])

        assert groups["id:7"].matches[0] is match

    def test_skips_matches_without_key(self):
        usable = _match(1, None, {"id": 7})

        groups = group_matches([usable, _match(2, None, {"name": "?"}), {}])

        assert list(groups) == ["id:7"]
        assert len(groups["id:7"].matches) == 1

    def test_empty(self):
        assert group_matches([]) == {}


def test_sorted_venue_groups_orders_by_kickoff():
    late = _match(1, "2025-03-22T19:00:00Z", {"id": 1})
    early = _match(2, "2025-03-15T19:00:00Z", {"id": 2})
    middle = _match(3, "2025-03-18T19:00:00Z", {"id": 1})
    undated = _match(4, None, {"id": 3})

    groups = sorted_venue_groups([undated, late, early, middle])

    assert [g.key for g in groups] == ["id:2", "id:1", "id:3"]
    assert groups[1].matches == [middle, late]
