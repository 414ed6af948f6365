"""
Global Beacon Map

Owns the deduplicated global beacon list, the distance index over it and the
absolute pose of every resolved scanner. Beacons are only ever appended, so
existing indices (and the pairs built on them) stay valid as the map grows.
"""

from __future__ import annotations

from typing import Dict, Iterable, Iterator, List, Sequence

from ..alignment.distance_index import DistanceIndex
from ..alignment.transform_solver import Transform
from ..utils.coordinates import Coordinate


class BeaconMap:
    """
    Deduplicated beacon set in the reference frame.

    Attributes:
        beacons: Unique beacons in insertion order
        index: DistanceIndex covering exactly `beacons`
        transforms: Verified transform of each resolved scanner, by identifier
    """

    def __init__(self, beacons: Iterable[Sequence[int]] = ()):
        self.beacons: List[Coordinate] = []
        self.index = DistanceIndex()
        self.transforms: Dict[str, Transform] = {}
        self._members: set = set()
        self.add(beacons)

    def add(self, points: Iterable[Sequence[int]]) -> int:
        """
        Merge points, skipping any already present.

        Returns:
            Number of newly inserted beacons
        """
        start = len(self.beacons)
        for point in points:
            coord = Coordinate(*point)
            if coord in self._members:
                continue
            self._members.add(coord)
            self.beacons.append(coord)

        inserted = len(self.beacons) - start
        if inserted:
            self.index.extend(self.beacons, start)
        return inserted

    def record(self, identifier: str, transform: Transform) -> None:
        """Record a resolved scanner. Each scanner may be recorded once."""
        if identifier in self.transforms:
            raise ValueError(f"Scanner '{identifier}' is already resolved")
        self.transforms[identifier] = transform

    @property
    def positions(self) -> Dict[str, Coordinate]:
        """Absolute position of each resolved scanner (its transform's translation)."""
        return {name: t.translation for name, t in self.transforms.items()}

    def __len__(self) -> int:
        return len(self.beacons)

    def __contains__(self, point: object) -> bool:
        return point in self._members

    def __iter__(self) -> Iterator[Coordinate]:
        return iter(self.beacons)
