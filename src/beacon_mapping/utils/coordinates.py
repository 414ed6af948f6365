"""
Integer Coordinate Types and Cloud Helpers.

Beacons are reported as exact integer triples, so equality between points
must be structural. A Coordinate is a NamedTuple: it hashes and compares by
value and can be stored in sets and used as dict keys directly.

Clouds are kept as plain sequences of Coordinate at the API boundary and
converted to (N, 3) int64 numpy arrays for vectorised remapping, translation
and bounding boxes.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, NamedTuple, Sequence, Tuple, TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from numpy.typing import NDArray


class Coordinate(NamedTuple):
    """Immutable integer point (x, y, z)."""

    x: int
    y: int
    z: int

    def __add__(self, other: "Coordinate") -> "Coordinate":  # type: ignore[override]
        return Coordinate(self.x + other[0], self.y + other[1], self.z + other[2])

    def __sub__(self, other: "Coordinate") -> "Coordinate":
        return Coordinate(self.x - other[0], self.y - other[1], self.z - other[2])

    def manhattan(self, other: "Coordinate") -> int:
        """Sum of absolute per-axis differences."""
        return abs(self.x - other[0]) + abs(self.y - other[1]) + abs(self.z - other[2])

    @classmethod
    def origin(cls) -> "Coordinate":
        return cls(0, 0, 0)


@dataclass(frozen=True)
class Scanner:
    """A sensor report: identifier plus beacons in the scanner's local frame.

    Attributes:
        identifier: Name taken from the report header (e.g. "scanner 0")
        beacons: Local beacon coordinates, unique within this report
    """

    identifier: str
    beacons: Tuple[Coordinate, ...] = field(default=())

    def __post_init__(self) -> None:
        # Accept any iterable of triples and normalise to a tuple of Coordinate
        object.__setattr__(
            self, "beacons", tuple(Coordinate(*(int(v) for v in b)) for b in self.beacons)
        )

    def __len__(self) -> int:
        return len(self.beacons)


def to_array(cloud: Iterable[Sequence[int]]) -> "NDArray[np.int64]":
    """Convert a cloud to an (N, 3) int64 array (empty clouds give shape (0, 3))."""
    arr = np.asarray(list(cloud), dtype=np.int64)
    if arr.size == 0:
        return np.empty((0, 3), dtype=np.int64)
    if arr.ndim != 2 or arr.shape[1] != 3:
        raise ValueError(f"Expected Nx3 coordinates, got shape {arr.shape}")
    return arr


def to_cloud(points: "NDArray[np.integer]") -> list[Coordinate]:
    """Convert an (N, 3) integer array back to a list of Coordinate."""
    return [Coordinate(*row) for row in points.tolist()]


def translate(points: "NDArray[np.integer]", offset: Sequence[int]) -> "NDArray[np.int64]":
    """Shift every row of an (N, 3) array by offset."""
    if points.size == 0:
        return points.copy()
    return points + np.asarray(offset, dtype=np.int64)


def bounding_box(points: "NDArray[np.integer]") -> Tuple[Coordinate, Coordinate]:
    """Axis-aligned bounding box as (min corner, max corner).

    Raises:
        ValueError: If the array is empty
    """
    if points.size == 0:
        raise ValueError("Cannot compute bounding box of an empty cloud")
    lo = points.min(axis=0).tolist()
    hi = points.max(axis=0).tolist()
    return Coordinate(*lo), Coordinate(*hi)


def extents(points: "NDArray[np.integer]") -> Coordinate:
    """Per-axis size of the bounding box."""
    lo, hi = bounding_box(points)
    return hi - lo
