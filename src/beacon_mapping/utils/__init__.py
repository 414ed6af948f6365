"""
Utility Functions Module

This module provides common utility functions used across the beacon mapping project.
- Logging setup
- Configuration loading
- Integer coordinate types and cloud helpers
"""

from .logging import setup_logger
from .coordinates import Coordinate, Scanner, bounding_box, extents

__all__ = [
    "setup_logger",
    "Coordinate",
    "Scanner",
    "bounding_box",
    "extents",
]
