"""
Pairwise Distance Index

Fingerprints a point cloud by the componentwise absolute difference of every
unordered point pair. The vector (|dx|, |dy|, |dz|) does not change when the
whole cloud is translated or when one orientation operator is applied to
every point (sign flips vanish under abs, a permutation permutes the vector
identically for every pair).

A vector shared by two or more pairs cannot identify a pair, so lookups only
ever treat vectors with multiplicity one as usable.
"""

from __future__ import annotations

from collections import Counter, defaultdict
from typing import Dict, Iterator, List, Sequence, Tuple

import numpy as np

from ..utils.coordinates import to_array

Vector = Tuple[int, int, int]
Pair = Tuple[int, int]


class DistanceIndex:
    """
    Mapping from index pairs (i < j) to invariant distance vectors.

    Supports append-only growth: extend() only computes pairs that involve
    at least one newly appended point.
    """

    def __init__(self) -> None:
        self.pairs: Dict[Pair, Vector] = {}
        self._counts: Counter = Counter()
        self._partners: Dict[int, List[Tuple[int, Vector]]] = defaultdict(list)
        self._size = 0

    @classmethod
    def build(cls, cloud: Sequence[Sequence[int]]) -> "DistanceIndex":
        """Index every unordered pair of a cloud. Empty and singleton clouds give an empty index."""
        index = cls()
        index.extend(cloud, 0)
        return index

    def extend(self, cloud: Sequence[Sequence[int]], start: int) -> int:
        """
        Add pairs for points appended to the indexed cloud.

        Args:
            cloud: The full cloud, whose first `start` points are already indexed
            start: Number of points already covered by this index

        Returns:
            Number of pairs added
        """
        if start != self._size:
            raise ValueError(f"Index covers {self._size} points, cannot extend from {start}")

        points = to_array(cloud)
        n = len(points)
        added = 0
        for j in range(max(start, 1), n):
            diffs = np.abs(points[:j] - points[j]).tolist()
            for i, vec in enumerate(diffs):
                vector = (vec[0], vec[1], vec[2])
                self.pairs[(i, j)] = vector
                self._counts[vector] += 1
                self._partners[i].append((j, vector))
                added += 1
        self._size = max(n, start)
        return added

    def has_unique_distance(self, vector: Sequence[int]) -> bool:
        """True iff exactly one indexed pair maps to this vector."""
        return self._counts.get(tuple(vector), 0) == 1

    def multiplicity(self, vector: Sequence[int]) -> int:
        return self._counts.get(tuple(vector), 0)

    def partners(self, i: int) -> Iterator[Tuple[int, Vector]]:
        """Yield (j, vector) for every indexed pair (i, j), in insertion order."""
        return iter(self._partners.get(i, ()))

    @property
    def point_count(self) -> int:
        return self._size

    def __len__(self) -> int:
        return len(self.pairs)

    def __contains__(self, pair: object) -> bool:
        return pair in self.pairs

    def __getitem__(self, pair: Pair) -> Vector:
        return self.pairs[pair]
