"""Synthetic scene helpers for beacon-mapping tests."""

import numpy as np

from beacon_mapping.alignment.orientation import Orientation
from beacon_mapping.utils.coordinates import Coordinate


def random_points(n: int, seed: int, spread: int = 1000) -> list:
    """Distinct random integer points in [-spread, spread]^3."""
    rng = np.random.default_rng(seed)
    points = []
    seen = set()
    while len(points) < n:
        p = Coordinate(*rng.integers(-spread, spread + 1, size=3).tolist())
        if p not in seen:
            seen.add(p)
            points.append(p)
    return points


def to_local(points, orientation: Orientation, translation) -> list:
    """Express reference-frame points in a scanner frame posed by (orientation, translation)."""
    t = Coordinate(*translation)
    return [orientation.invert(Coordinate(*p) - t) for p in points]
