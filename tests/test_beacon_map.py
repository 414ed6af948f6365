"""
Tests for the global beacon map.
"""

import pytest

from beacon_mapping.alignment.distance_index import DistanceIndex
from beacon_mapping.alignment.transform_solver import Transform
from beacon_mapping.mapping.beacon_map import BeaconMap
from beacon_mapping.utils.coordinates import Coordinate

from helpers import random_points


def test_add_deduplicates_structurally():
    beacon_map = BeaconMap([(1, 2, 3), (4, 5, 6)])
    inserted = beacon_map.add([(4, 5, 6), Coordinate(1, 2, 3), (7, 8, 9), (7, 8, 9)])

    assert inserted == 1
    assert len(beacon_map) == 3
    assert (7, 8, 9) in beacon_map
    assert beacon_map.beacons == [Coordinate(1, 2, 3), Coordinate(4, 5, 6), Coordinate(7, 8, 9)]


def test_add_twice_is_idempotent():
    points = random_points(20, seed=1)
    beacon_map = BeaconMap(points[:10])
    beacon_map.add(points)
    count, pairs = len(beacon_map), dict(beacon_map.index.pairs)

    assert beacon_map.add(points) == 0
    assert len(beacon_map) == count == 20
    assert beacon_map.index.pairs == pairs


def test_index_tracks_beacons_incrementally():
    points = random_points(15, seed=2)
    beacon_map = BeaconMap(points[:4])
    beacon_map.add(points[2:9])
    beacon_map.add(points[9:])

    assert beacon_map.index.pairs == DistanceIndex.build(points).pairs
    assert beacon_map.index.point_count == len(beacon_map)


def test_existing_beacons_keep_their_indices():
    points = random_points(10, seed=3)
    beacon_map = BeaconMap(points[:5])
    before = list(beacon_map.beacons)
    beacon_map.add(points)
    assert beacon_map.beacons[:5] == before


def test_scanner_recorded_once():
    beacon_map = BeaconMap()
    beacon_map.record("scanner 0", Transform.identity())
    with pytest.raises(ValueError, match="already resolved"):
        beacon_map.record("scanner 0", Transform.identity())
    assert beacon_map.positions == {"scanner 0": Coordinate(0, 0, 0)}
