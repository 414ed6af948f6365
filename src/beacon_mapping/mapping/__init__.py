"""
Map Assembly Module

Owns the global beacon map, the scanner resolution loop and the final
result aggregation.
"""

from .beacon_map import BeaconMap
from .assembler import MapAssembler, ScannerState
from .results import MappingResult, max_scanner_spread, summarize, unique_beacon_count

__all__ = [
    "BeaconMap",
    "MapAssembler",
    "ScannerState",
    "MappingResult",
    "max_scanner_spread",
    "summarize",
    "unique_beacon_count",
]
