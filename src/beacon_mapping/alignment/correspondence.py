"""
Correspondence Matching

Finds which beacons of a foreign scanner are the same physical beacons as a
subset of the global map, without knowing the scanner's position.

For each candidate orientation the foreign cloud is fingerprinted with a
DistanceIndex. Each foreign point gets a pool: itself plus every later point
whose pair vector is unique in the map's index. The largest pool is the best
guess of the overlapping beacons. The same pooling is then run on the map
side against an index of the pooled foreign points; the match is accepted
when both pools have the same size and reach the overlap threshold.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple, TYPE_CHECKING

from .distance_index import DistanceIndex
from .orientation import Orientation, generate_orientations
from ..utils.coordinates import to_array, to_cloud
from ..utils.logging import setup_logger

if TYPE_CHECKING:
    from ..mapping.beacon_map import BeaconMap

logger = setup_logger(__name__)

# Below 12 shared beacons the distance structure matches by coincidence too often
DEFAULT_MIN_OVERLAP = 12


@dataclass(frozen=True)
class Correspondence:
    """Index sets believed to denote the same physical beacons.

    Attributes:
        foreign_indices: Sorted indices into the foreign scanner's cloud
        reference_indices: Sorted indices into the beacon map
        orientation: Operator under which the match was found
    """

    foreign_indices: Tuple[int, ...]
    reference_indices: Tuple[int, ...]
    orientation: Orientation

    def __len__(self) -> int:
        return len(self.foreign_indices)


def _largest_pool(index: DistanceIndex, lookup: DistanceIndex, count: int) -> List[int]:
    """First maximal pool over points 0..count-1 of `index`, checked against `lookup`."""
    best: List[int] = []
    for i in range(count):
        pool = [i]
        pool.extend(j for j, vector in index.partners(i) if lookup.has_unique_distance(vector))
        if len(pool) > len(best):
            best = pool
    return sorted(best)


class CorrespondenceMatcher:
    """
    Match a foreign cloud against the global beacon map.

    Args:
        orientations: Candidate operators in search order (defaults to all 48)
        min_overlap: Minimum number of shared beacons to accept a match
    """

    def __init__(
        self,
        orientations: Optional[Sequence[Orientation]] = None,
        min_overlap: int = DEFAULT_MIN_OVERLAP,
    ):
        if min_overlap < 2:
            raise ValueError(f"min_overlap must be at least 2, got {min_overlap}")
        self.orientations = tuple(orientations) if orientations is not None else generate_orientations()
        self.min_overlap = min_overlap

    def match(self, beacon_map: "BeaconMap", cloud: Sequence[Sequence[int]]) -> Optional[Correspondence]:
        """
        Search orientations in order and return the first accepted correspondence.

        Args:
            beacon_map: Current global map (read only)
            cloud: Foreign scanner beacons in the scanner's local frame

        Returns:
            Correspondence, or None when no orientation qualifies
        """
        points = to_array(cloud)
        if len(points) < self.min_overlap or len(beacon_map) < self.min_overlap:
            return None

        reference_index = beacon_map.index
        for orientation in self.orientations:
            oriented = to_cloud(orientation.apply_cloud(points))
            foreign_index = DistanceIndex.build(oriented)

            pool = _largest_pool(foreign_index, reference_index, len(oriented))
            if len(pool) < self.min_overlap:
                continue

            reduced = DistanceIndex.build([oriented[i] for i in pool])
            matches = _largest_pool(reference_index, reduced, len(beacon_map))
            logger.debug(
                "Orientation %s/%s: foreign pool %d, reference pool %d",
                orientation.permutation, orientation.signs, len(pool), len(matches),
            )
            if len(matches) == len(pool):
                return Correspondence(tuple(pool), tuple(matches), orientation)

        return None
