"""
Map Assembly

Drives scanner resolution: the map is seeded with the first scanner (identity
transform) and every other scanner waits in a FIFO queue. Each attempt runs
correspondence matching and exact transform recovery against the current
map; a resolved scanner's whole cloud is transformed and merged, a failed
one goes back to the tail of the queue. A bounded retry counter stops the
loop when the remaining scanners cannot be aligned.
"""

from __future__ import annotations

from collections import deque
from enum import Enum
from typing import Deque, Dict, Iterable, Optional, Sequence, TYPE_CHECKING

from ..alignment.correspondence import DEFAULT_MIN_OVERLAP, CorrespondenceMatcher
from ..alignment.orientation import generate_orientations
from ..alignment.transform_solver import Transform, TransformSolver
from ..exceptions import AlignmentFailure, ExhaustionError
from ..utils.coordinates import Scanner
from ..utils.logging import setup_logger
from .beacon_map import BeaconMap
from .results import MappingResult, summarize

if TYPE_CHECKING:
    from ..utils.config import AppConfig

logger = setup_logger(__name__)

DEFAULT_MAX_RETRIES = 1000


class ScannerState(str, Enum):
    UNRESOLVED = "unresolved"
    RESOLVED = "resolved"
    EXHAUSTED = "exhausted"


class MapAssembler:
    """
    Resolve every scanner into the frame of the first one.

    Args:
        scanners: Scanner reports; the first one defines the reference frame
        min_overlap: Minimum shared beacons for a correspondence
        max_retries: Failed attempts tolerated before giving up
        proper_rotations_only: Search only the 24 proper rotations
    """

    def __init__(
        self,
        scanners: Sequence[Scanner],
        *,
        min_overlap: int = DEFAULT_MIN_OVERLAP,
        max_retries: int = DEFAULT_MAX_RETRIES,
        proper_rotations_only: bool = False,
    ):
        if not scanners:
            raise ValueError("At least one scanner is required")
        if max_retries < 0:
            raise ValueError(f"max_retries must be non-negative, got {max_retries}")

        names = [s.identifier for s in scanners]
        if len(set(names)) != len(names):
            raise ValueError("Scanner identifiers must be unique")

        orientations = generate_orientations(proper_rotations_only)
        self.matcher = CorrespondenceMatcher(orientations, min_overlap=min_overlap)
        self.solver = TransformSolver(orientations)
        self.max_retries = max_retries
        self.retries = 0

        reference, *others = scanners
        self.beacon_map = BeaconMap(reference.beacons)
        self.beacon_map.record(reference.identifier, Transform.identity())

        self.states: Dict[str, ScannerState] = {name: ScannerState.UNRESOLVED for name in names}
        self.states[reference.identifier] = ScannerState.RESOLVED
        self.queue: Deque[Scanner] = deque(others)

    @classmethod
    def from_config(cls, scanners: Sequence[Scanner], config: "AppConfig") -> "MapAssembler":
        return cls(
            scanners,
            min_overlap=config.matching.min_overlap,
            max_retries=config.assembly.max_retries,
            proper_rotations_only=config.matching.orientations == "proper",
        )

    def add(self, points: Iterable[Sequence[int]]) -> int:
        """Merge points into the global map; returns the number of new beacons."""
        return self.beacon_map.add(points)

    def align(self, scanner: Scanner) -> Transform:
        """
        Run one alignment attempt for a scanner against the current map.

        Raises:
            AlignmentFailure: If no correspondence or no exact transform is found
        """
        correspondence = self.matcher.match(self.beacon_map, scanner.beacons)
        if correspondence is None:
            raise AlignmentFailure(scanner.identifier, "no qualifying correspondence")

        matched = [scanner.beacons[i] for i in correspondence.foreign_indices]
        transform = self.solver.solve(self.beacon_map, correspondence.reference_indices, matched)
        if transform is None:
            raise AlignmentFailure(
                scanner.identifier,
                f"correspondence of {len(correspondence)} beacons is not a rigid match",
            )
        return transform

    def resolve(self, scanner: Scanner, transform: Transform) -> int:
        """Transform a scanner's full cloud, merge it and record its pose."""
        if self.states[scanner.identifier] is ScannerState.RESOLVED:
            raise ValueError(f"Scanner '{scanner.identifier}' is already resolved")
        inserted = self.add(transform.apply_cloud(scanner.beacons))
        self.beacon_map.record(scanner.identifier, transform)
        self.states[scanner.identifier] = ScannerState.RESOLVED
        return inserted

    def step(self) -> Optional[Transform]:
        """
        Attempt the scanner at the head of the queue.

        Returns:
            The verified transform, or None if the scanner was requeued
        """
        scanner = self.queue.popleft()
        try:
            transform = self.align(scanner)
        except AlignmentFailure as e:
            self.queue.append(scanner)
            self.retries += 1
            logger.debug("Requeued %s (retry %d): %s", scanner.identifier, self.retries, e.reason)
            return None

        inserted = self.resolve(scanner, transform)
        logger.info(
            "Resolved %s at %s (%d new beacons, %d total)",
            scanner.identifier, tuple(transform.translation), inserted, len(self.beacon_map),
        )
        return transform

    def run(self) -> MappingResult:
        """
        Resolve all queued scanners.

        Raises:
            ExhaustionError: If the retry counter exceeds max_retries
        """
        logger.info(
            "Assembling %d scanners (%d beacons in reference frame)",
            len(self.states), len(self.beacon_map),
        )
        while self.queue:
            self.step()
            if self.queue and self.retries > self.max_retries:
                unresolved = [s.identifier for s in self.queue]
                for name in unresolved:
                    self.states[name] = ScannerState.EXHAUSTED
                logger.error("Retry ceiling %d exceeded; unresolved: %s", self.max_retries, unresolved)
                raise ExhaustionError(unresolved, self.retries)

        result = summarize(self.beacon_map)
        logger.info("Map complete: %d beacons, max scanner spread %d", result.beacon_count, result.max_spread)
        return result
