"""Tests for integer coordinate types and cloud helpers."""

import numpy as np
import pytest

from beacon_mapping.utils.coordinates import (
    Coordinate,
    Scanner,
    bounding_box,
    extents,
    to_array,
    to_cloud,
    translate,
)


def test_structural_equality_and_hashing():
    assert Coordinate(1, 2, 3) == (1, 2, 3)
    assert len({Coordinate(1, 2, 3), Coordinate(1, 2, 3), (1, 2, 3)}) == 1


def test_arithmetic():
    a, b = Coordinate(1, -2, 3), Coordinate(10, 20, -30)
    assert a + b == (11, 18, -27)
    assert b - a == (9, 22, -33)
    assert a.manhattan(b) == 9 + 22 + 33


def test_scanner_normalises_beacons():
    scanner = Scanner("s", [[1, 2, 3], (4, 5, 6)])
    assert scanner.beacons == (Coordinate(1, 2, 3), Coordinate(4, 5, 6))
    assert isinstance(scanner.beacons[0], Coordinate)
    assert len(scanner) == 2


def test_array_round_trip_and_shape():
    cloud = [Coordinate(1, 2, 3), Coordinate(-4, 5, -6)]
    arr = to_array(cloud)
    assert arr.dtype == np.int64 and arr.shape == (2, 3)
    assert to_cloud(arr) == cloud
    assert to_array([]).shape == (0, 3)
    with pytest.raises(ValueError, match="shape"):
        to_array([(1, 2)])


def test_bounding_box_and_extents():
    arr = to_array([(1, 5, -3), (-2, 7, 0), (4, 6, 2)])
    assert bounding_box(arr) == ((-2, 5, -3), (4, 7, 2))
    assert extents(arr) == (6, 2, 5)
    assert to_cloud(translate(arr, (1, 1, 1)))[0] == (2, 6, -2)
    with pytest.raises(ValueError, match="empty"):
        bounding_box(to_array([]))
