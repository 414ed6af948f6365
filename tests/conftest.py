"""Shared fixtures for beacon-mapping tests."""

import sys
from pathlib import Path

import pytest

sys.path.append(str(Path(__file__).parent.parent / "src"))

from beacon_mapping.alignment.orientation import Orientation
from beacon_mapping.preprocessing.loader import ScannerReportLoader
from beacon_mapping.utils.coordinates import Coordinate, Scanner

from helpers import random_points, to_local

SAMPLE_FILE = Path(__file__).parent / "data" / "sample_scanners.txt"


@pytest.fixture(scope="session")
def sample_scanners():
    """The five-scanner sample report."""
    return ScannerReportLoader().load(SAMPLE_FILE)


@pytest.fixture
def overlapping_scene():
    """
    Reference scanner plus one posed scanner sharing 14 beacons.

    Returns:
        (reference Scanner, foreign Scanner, shared reference-frame points,
         orientation, translation)
    """
    reference_points = random_points(30, seed=7)
    shared = reference_points[5:19]
    extra = random_points(12, seed=11, spread=900)
    extra = [Coordinate(p.x + 2500, p.y, p.z) for p in extra]
    orientation = Orientation((1, 2, 0), (1, -1, -1))
    translation = Coordinate(1200, -340, 75)

    foreign_world = extra[:6] + shared + extra[6:]
    reference = Scanner("scanner 0", tuple(reference_points))
    foreign = Scanner("scanner 1", tuple(to_local(foreign_world, orientation, translation)))
    return reference, foreign, shared, orientation, translation
