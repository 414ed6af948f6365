"""
Spatial Alignment Module

This module provides the building blocks for aligning a scanner's beacons
with the global map: orientation enumeration, invariant distance indexing,
correspondence matching and exact transform recovery.
"""

from .orientation import Orientation, generate_orientations
from .distance_index import DistanceIndex
from .correspondence import Correspondence, CorrespondenceMatcher
from .transform_solver import Transform, TransformSolver

__all__ = [
    "Orientation",
    "generate_orientations",
    "DistanceIndex",
    "Correspondence",
    "CorrespondenceMatcher",
    "Transform",
    "TransformSolver",
]
