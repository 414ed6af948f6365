"""
Exceptions raised while building a beacon map.
"""

from __future__ import annotations

from typing import Optional, Sequence


class BeaconMappingError(Exception):
    """Base class for beacon-mapping errors."""


class MalformedInputError(BeaconMappingError, ValueError):
    """A scanner report could not be parsed."""

    def __init__(self, message: str, *, line_number: Optional[int] = None):
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)
        self.line_number = line_number


class AlignmentFailure(BeaconMappingError):
    """A single attempt to align a scanner against the current map failed.

    Recovered inside the assembler loop by requeueing the scanner.
    """

    def __init__(self, identifier: str, reason: str):
        super().__init__(f"{identifier}: {reason}")
        self.identifier = identifier
        self.reason = reason


class ExhaustionError(BeaconMappingError):
    """The retry ceiling was exceeded with scanners still unresolved.

    The beacon map is incomplete when this is raised.
    """

    def __init__(self, unresolved: Sequence[str], retries: int):
        self.unresolved = list(unresolved)
        self.retries = retries
        super().__init__(
            f"Gave up after {retries} failed alignment attempts; "
            f"unresolved scanners: {', '.join(self.unresolved)}"
        )
