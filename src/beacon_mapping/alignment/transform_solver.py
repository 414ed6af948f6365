"""
Exact Rigid Transform Recovery

Given the map-side and scanner-side halves of a correspondence, recover the
orientation and integer translation that map the scanner's matched beacons
exactly onto the matched map beacons. The orientation is searched again from
scratch rather than taken from the matcher, so a correspondence that was
structurally plausible but geometrically inconsistent is rejected here.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Sequence, TYPE_CHECKING

from .orientation import Orientation, generate_orientations
from ..utils.coordinates import Coordinate, extents, to_array, to_cloud, translate
from ..utils.logging import setup_logger

if TYPE_CHECKING:
    from ..mapping.beacon_map import BeaconMap

logger = setup_logger(__name__)


@dataclass(frozen=True)
class Transform:
    """Orientation followed by translation into the reference frame."""

    orientation: Orientation = field(default_factory=Orientation.identity)
    translation: Coordinate = field(default_factory=Coordinate.origin)

    @classmethod
    def identity(cls) -> "Transform":
        return cls()

    def apply(self, point: Sequence[int]) -> Coordinate:
        return self.orientation.apply(point) + self.translation

    def apply_cloud(self, cloud: Iterable[Sequence[int]]) -> List[Coordinate]:
        """Orient then translate every point of a cloud."""
        oriented = self.orientation.apply_cloud(to_array(cloud))
        return to_cloud(translate(oriented, self.translation))


class TransformSolver:
    """
    Verify a correspondence by finding an exact (orientation, translation).

    Args:
        orientations: Candidate operators in search order (defaults to all 48)
    """

    def __init__(self, orientations: Optional[Sequence[Orientation]] = None):
        self.orientations = tuple(orientations) if orientations is not None else generate_orientations()

    def solve(
        self,
        beacon_map: "BeaconMap",
        reference_indices: Sequence[int],
        matched_points: Sequence[Sequence[int]],
    ) -> Optional[Transform]:
        """
        Find the first transform that lands every matched point on the reference subset.

        Args:
            beacon_map: Current global map (read only)
            reference_indices: Map indices of the matched beacons; the first one is the anchor
            matched_points: Scanner-local coordinates of the matched beacons

        Returns:
            Verified Transform, or None if no orientation/anchor pairing is exact
        """
        if not reference_indices or len(matched_points) == 0:
            return None

        reference = [beacon_map.beacons[i] for i in reference_indices]
        reference_set = set(reference)
        anchor = reference[0]
        target_extents = extents(to_array(reference))

        points = to_array(matched_points)
        for orientation in self.orientations:
            oriented = orientation.apply_cloud(points)
            if extents(oriented) != target_extents:
                continue

            for candidate in oriented.tolist():
                offset = anchor - Coordinate(*candidate)
                moved = to_cloud(translate(oriented, offset))
                if set(moved) == reference_set:
                    logger.debug("Verified transform %s/%s + %s", orientation.permutation, orientation.signs, offset)
                    return Transform(orientation, offset)

        return None
