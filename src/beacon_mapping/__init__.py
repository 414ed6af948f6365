"""
Beacon Mapping Package

Registers beacon reports from scanners with unknown position and orientation
into the frame of a reference scanner and merges them into one deduplicated
beacon map. Alignment is exact: candidate axis orientations are matched with
translation-invariant pair fingerprints and verified point for point.
"""

__version__ = "0.1.0"

from .exceptions import AlignmentFailure, BeaconMappingError, ExhaustionError, MalformedInputError
from .utils.coordinates import Coordinate, Scanner
from .alignment import *
from .mapping import *
from .preprocessing import *

__all__ = [
    "alignment",
    "mapping",
    "preprocessing",
    "utils",
    "Coordinate",
    "Scanner",
    "AlignmentFailure",
    "BeaconMappingError",
    "ExhaustionError",
    "MalformedInputError",
    "MapAssembler",
    "parse_scanner_reports",
]
