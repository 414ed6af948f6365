"""
Axis Orientation Operators

A scanner's local frame differs from the reference frame by an unknown
axis remapping. Candidates are expressed as an axis permutation paired with
a sign triple:

    out[k] = signs[k] * point[permutation[k]]

Six permutations times eight sign triples give 48 operators: the 24 proper
rotations of 3-space plus their 24 mirror images. The enumeration order is
fixed so that "first match wins" searches are deterministic.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from itertools import permutations
from typing import Sequence, Tuple, TYPE_CHECKING

import numpy as np

from ..utils.coordinates import Coordinate

if TYPE_CHECKING:
    from numpy.typing import NDArray


SIGN_TRIPLES: Tuple[Tuple[int, int, int], ...] = (
    (1, 1, 1),
    (-1, 1, 1),
    (1, -1, 1),
    (1, 1, -1),
    (-1, -1, 1),
    (1, -1, -1),
    (-1, 1, -1),
    (-1, -1, -1),
)


@dataclass(frozen=True)
class Orientation:
    """Axis permutation plus per-axis sign flips.

    Attributes:
        permutation: Source axis for each output axis, a permutation of (0, 1, 2)
        signs: Sign applied to each output axis, each -1 or +1
    """

    permutation: Tuple[int, int, int]
    signs: Tuple[int, int, int]

    def __post_init__(self) -> None:
        if sorted(self.permutation) != [0, 1, 2]:
            raise ValueError(f"Not an axis permutation: {self.permutation}")
        if any(s not in (-1, 1) for s in self.signs) or len(self.signs) != 3:
            raise ValueError(f"Signs must be three values of -1 or +1, got {self.signs}")

    @classmethod
    def identity(cls) -> "Orientation":
        return cls((0, 1, 2), (1, 1, 1))

    @property
    def determinant(self) -> int:
        """+1 for proper rotations, -1 for mirror transforms."""
        p = self.permutation
        inversions = sum(1 for a in range(3) for b in range(a + 1, 3) if p[a] > p[b])
        parity = -1 if inversions % 2 else 1
        return parity * self.signs[0] * self.signs[1] * self.signs[2]

    @property
    def is_proper(self) -> bool:
        return self.determinant == 1

    def apply(self, point: Sequence[int]) -> Coordinate:
        p, s = self.permutation, self.signs
        return Coordinate(s[0] * point[p[0]], s[1] * point[p[1]], s[2] * point[p[2]])

    def invert(self, point: Sequence[int]) -> Coordinate:
        """Undo apply(): remove the sign flips, then scatter back to source axes."""
        out = [0, 0, 0]
        for k in range(3):
            out[self.permutation[k]] = self.signs[k] * point[k]
        return Coordinate(*out)

    def inverse(self) -> "Orientation":
        """The operator whose apply() equals this operator's invert()."""
        inv = [0, 0, 0]
        for k, src in enumerate(self.permutation):
            inv[src] = k
        return Orientation(tuple(inv), tuple(self.signs[k] for k in inv))  # type: ignore[arg-type]

    def apply_cloud(self, points: "NDArray[np.integer]") -> "NDArray[np.int64]":
        """Apply the operator to every row of an (N, 3) array."""
        if points.size == 0:
            return np.empty((0, 3), dtype=np.int64)
        return points[:, list(self.permutation)] * np.asarray(self.signs, dtype=np.int64)


@lru_cache(maxsize=2)
def generate_orientations(proper_only: bool = False) -> Tuple[Orientation, ...]:
    """
    Enumerate candidate orientation operators in a fixed order.

    Permutations follow itertools.permutations order over (0, 1, 2); for each
    permutation all eight sign triples are produced in SIGN_TRIPLES order.

    Args:
        proper_only: If True, drop mirror transforms (determinant -1),
            keeping the 24 proper rotations in the same relative order.

    Returns:
        Tuple of 48 (or 24) Orientation instances
    """
    operators = tuple(
        Orientation(perm, signs)  # type: ignore[arg-type]
        for perm in permutations(range(3))
        for signs in SIGN_TRIPLES
    )
    if proper_only:
        return tuple(o for o in operators if o.is_proper)
    return operators
