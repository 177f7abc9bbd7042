"""
Tool and Options Tests

Tests for parsing helpers and option resolution:
- options.MatchOptions / resolve_options()
- time_tool.parse_timestamp() / to_epoch_ms()
- coordinates.parse_lat_lng() / coerce_coordinate()

Run: pytest poolmatch/tests/test_tools.py -v
"""

import dataclasses
from datetime import datetime, timedelta, timezone

import pytest


# ==================== Options Tests ====================

def test_options_defaults():
    from poolmatch.algorithms.options import MatchOptions, resolve_options

    opts = resolve_options(None)

    assert opts == MatchOptions()
    assert opts.max_pool_size == 3
    assert opts.pickup_join_distance_km == 6
    assert opts.min_pair_score == 0.45
    assert opts.max_carrier_to_pickup_km == 18
    assert opts.top_k == 3
    assert opts.w_pickup_proximity + opts.w_route_similarity + opts.w_time_overlap + opts.w_drop_proximity == pytest.approx(1.0)
    assert opts.w_carrier_to_pickup_dist + opts.w_capacity_fit + opts.w_service_radius + opts.w_time_feasibility == pytest.approx(1.0)


def test_options_partial_mapping_falls_back_per_field():
    from poolmatch.algorithms.options import resolve_options

    opts = resolve_options({"maxPoolSize": 5, "min_pair_score": 0.6, "top_k": None, "colour": "blue"})

    assert opts.max_pool_size == 5
    assert opts.min_pair_score == 0.6
    # None and unknown keys are ignored
    assert opts.top_k == 3
    assert opts.pickup_join_distance_km == 6


def test_options_camel_case_keys():
    from poolmatch.algorithms.options import MatchOptions

    opts = MatchOptions.from_mapping({
        "pickupJoinDistanceKm": 4,
        "wCarrierToPickupDist": 0.5,
        "maxCarrierToPickupKm": 30,
        "topK": 1,
    })

    assert opts.pickup_join_distance_km == 4
    assert opts.w_carrier_to_pickup_dist == 0.5
    assert opts.max_carrier_to_pickup_km == 30
    assert opts.top_k == 1


def test_options_are_immutable():
    from poolmatch.algorithms.options import MatchOptions, resolve_options

    opts = MatchOptions()
    with pytest.raises(dataclasses.FrozenInstanceError):
        opts.max_pool_size = 10

    # Resolving an options object returns it unchanged
    assert resolve_options(opts) is opts


# ==================== Time Tool Tests ====================

def test_parse_timestamp_iso_strings():
    from poolmatch.tools.time_tool import parse_timestamp

    zulu = parse_timestamp("2026-02-05T09:00:00Z")
    assert zulu == datetime(2026, 2, 5, 9, 0, tzinfo=timezone.utc)

    offset = parse_timestamp("2026-02-05T10:30:00+01:30")
    assert offset == zulu

    naive = parse_timestamp("2026-02-05T09:00:00")
    assert naive == zulu


def test_parse_timestamp_epoch_values():
    from poolmatch.tools.time_tool import parse_timestamp

    assert parse_timestamp(0) == datetime(1970, 1, 1, tzinfo=timezone.utc)
    # Numbers are always milliseconds, as stored by the web client
    assert parse_timestamp(1_770_000_000_000).year == 2026
    assert parse_timestamp(1_770_000_000) == datetime(1970, 1, 21, 11, 40, tzinfo=timezone.utc)
    assert parse_timestamp(3_600_000) == datetime(1970, 1, 1, 1, 0, tzinfo=timezone.utc)
    assert parse_timestamp(-1000) == datetime(1969, 12, 31, 23, 59, 59, tzinfo=timezone.utc)


def test_parse_timestamp_bad_input():
    from poolmatch.tools.time_tool import parse_timestamp

    assert parse_timestamp(None) is None
    assert parse_timestamp("") is None
    assert parse_timestamp("tomorrow-ish") is None
    assert parse_timestamp(True) is None


def test_to_epoch_ms_treats_naive_as_utc():
    from poolmatch.tools.time_tool import to_epoch_ms

    naive = datetime(2026, 2, 5, 9, 0)
    aware = datetime(2026, 2, 5, 9, 0, tzinfo=timezone.utc)
    shifted = datetime(2026, 2, 5, 11, 0, tzinfo=timezone(timedelta(hours=2)))

    assert to_epoch_ms(datetime(1970, 1, 1, 0, 0, 1)) == 1000.0
    assert to_epoch_ms(naive) == to_epoch_ms(aware) == to_epoch_ms(shifted)


# ==================== Coordinate Parsing Tests ====================

@pytest.mark.parametrize("text,expected", [
    ("28.6448,77.2167", (28.6448, 77.2167)),
    ("28.6448, 77.2167", (28.6448, 77.2167)),
    ("Connaught Place (28.6448 , 77.2167)", (28.6448, 77.2167)),
    ("-1.2921,36.8219", (-1.2921, 36.8219)),
    ("-33.8688,-70.6693", (-33.8688, -70.6693)),
])
def test_parse_lat_lng(text, expected):
    from poolmatch.algorithms.types import Coordinate
    from poolmatch.tools.coordinates import parse_lat_lng

    assert parse_lat_lng(text) == Coordinate(*expected)


@pytest.mark.parametrize("text", [None, "", "Delhi", "28,77", "28.6448"])
def test_parse_lat_lng_rejects(text):
    from poolmatch.tools.coordinates import parse_lat_lng

    assert parse_lat_lng(text) is None


def test_coerce_coordinate_shapes():
    from poolmatch.algorithms.types import Coordinate
    from poolmatch.tools.coordinates import coerce_coordinate

    expected = Coordinate(28.6, 77.2)

    assert coerce_coordinate(expected) is expected
    assert coerce_coordinate({"lat": 28.6, "lng": 77.2}) == expected
    assert coerce_coordinate({"latitude": 28.6, "longitude": 77.2}) == expected
    assert coerce_coordinate((28.6, 77.2)) == expected
    assert coerce_coordinate("28.6,77.2") == expected
    assert coerce_coordinate({"lat": 28.6}) is None
    assert coerce_coordinate(None) is None


def test_coordinates_reject_non_finite_values():
    from poolmatch.tools.coordinates import coerce_coordinate, parse_lat_lng

    overflowing = "1" + "0" * 400 + ".0, 77.2"
    assert parse_lat_lng(overflowing) is None
    assert coerce_coordinate({"lat": float("nan"), "lng": 77.2}) is None
    assert coerce_coordinate((28.6, float("inf"))) is None


# ==================== Run Tests ====================

if __name__ == "__main__":
    pytest.main([__file__, "-v"])
