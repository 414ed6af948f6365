"""
Scanner Report Loader

This module parses textual scanner reports into Scanner records. A report
holds one block per scanner, blocks separated by blank lines:

    --- scanner 0 ---
    404,-588,-901
    528,-643,409
"""

from pathlib import Path
from typing import List, Union

from ..exceptions import MalformedInputError
from ..utils.coordinates import Coordinate, Scanner
from ..utils.logging import setup_logger

logger = setup_logger(__name__)


def _parse_beacon(line: str, line_number: int) -> Coordinate:
    fields = line.split(",")
    if len(fields) != 3:
        raise MalformedInputError(
            f"expected 3 comma-separated coordinates, got {len(fields)}: {line!r}",
            line_number=line_number,
        )
    try:
        return Coordinate(*(int(v) for v in fields))
    except ValueError:
        raise MalformedInputError(f"non-integer coordinate in {line!r}", line_number=line_number)


def parse_scanner_reports(text: str) -> List[Scanner]:
    """
    Parse scanner report text.

    The first line of each block names the scanner; surrounding dashes are
    stripped ("--- scanner 0 ---" -> "scanner 0").

    Raises:
        MalformedInputError: On a malformed beacon line or a duplicate beacon
    """
    scanners: List[Scanner] = []
    name = None
    beacons: List[Coordinate] = []

    def flush() -> None:
        if name is not None:
            scanners.append(Scanner(name, tuple(beacons)))

    for line_number, raw in enumerate(text.splitlines(), start=1):
        line = raw.strip()
        if not line:
            flush()
            name, beacons = None, []
            continue
        if name is None:
            name = line.strip("-").strip() or f"scanner {len(scanners)}"
            continue
        beacon = _parse_beacon(line, line_number)
        if beacon in beacons:
            raise MalformedInputError(f"duplicate beacon {tuple(beacon)} in {name}", line_number=line_number)
        beacons.append(beacon)
    flush()

    return scanners


class ScannerReportLoader:
    """
    Load scanner reports from text files.
    """

    def __init__(self, *, encoding: str = "utf-8"):
        self.encoding = encoding

    def load(self, file_path: Union[str, Path]) -> List[Scanner]:
        """
        Load and parse a report file.

        Raises:
            FileNotFoundError: If the file does not exist
            MalformedInputError: If the report cannot be parsed
        """
        file_path = Path(file_path)
        if not file_path.exists():
            raise FileNotFoundError(f"File not found: {file_path}")

        logger.info(f"Loading scanner reports from {file_path}")
        scanners = parse_scanner_reports(file_path.read_text(encoding=self.encoding))
        logger.info(
            f"Loaded {len(scanners)} scanners with {sum(len(s) for s in scanners)} beacon reports"
        )
        return scanners
