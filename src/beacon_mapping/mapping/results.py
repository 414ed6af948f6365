"""
Result aggregation for an assembled beacon map.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from itertools import combinations
from typing import Dict, Iterable, Sequence

from ..alignment.transform_solver import Transform
from ..utils.coordinates import Coordinate
from .beacon_map import BeaconMap


@dataclass
class MappingResult:
    beacon_count: int
    max_spread: int
    positions: Dict[str, Coordinate] = field(default_factory=dict)
    transforms: Dict[str, Transform] = field(default_factory=dict)


def unique_beacon_count(beacon_map: BeaconMap) -> int:
    return len(beacon_map)


def max_scanner_spread(positions: Iterable[Sequence[int]]) -> int:
    """Largest Manhattan distance between any two positions (0 for fewer than two)."""
    coords = [Coordinate(*p) for p in positions]
    return max((a.manhattan(b) for a, b in combinations(coords, 2)), default=0)


def summarize(beacon_map: BeaconMap) -> MappingResult:
    positions = beacon_map.positions
    return MappingResult(
        beacon_count=unique_beacon_count(beacon_map),
        max_spread=max_scanner_spread(positions.values()),
        positions=positions,
        transforms=dict(beacon_map.transforms),
    )
