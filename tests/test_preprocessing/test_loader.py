"""
Test suite for scanner report parsing
"""

from pathlib import Path

import pytest

from beacon_mapping.exceptions import MalformedInputError
from beacon_mapping.preprocessing.loader import ScannerReportLoader, parse_scanner_reports
from beacon_mapping.utils.coordinates import Coordinate

SAMPLE_FILE = Path(__file__).parent.parent / "data" / "sample_scanners.txt"


def test_parse_blocks():
    text = "--- scanner 0 ---\n1,2,3\n-4,5,-6\n\n--- scanner 1 ---\n7,8,9\n"
    scanners = parse_scanner_reports(text)

    assert [s.identifier for s in scanners] == ["scanner 0", "scanner 1"]
    assert scanners[0].beacons == (Coordinate(1, 2, 3), Coordinate(-4, 5, -6))
    assert scanners[1].beacons == (Coordinate(7, 8, 9),)


def test_extra_blank_lines_and_whitespace():
    text = "\n\n--- scanner 0 ---\n 1,2,3 \n\n\n\n--- scanner 1 ---\n4,5,6"
    scanners = parse_scanner_reports(text)
    assert len(scanners) == 2
    assert scanners[0].beacons == ((1, 2, 3),)


def test_empty_text():
    assert parse_scanner_reports("") == []


@pytest.mark.parametrize(
    "line, message",
    [
        ("1,2", "expected 3"),
        ("1,2,3,4", "expected 3"),
        ("1,x,3", "non-integer"),
        ("1.5,2,3", "non-integer"),
    ],
)
def test_malformed_lines(line, message):
    text = f"--- scanner 0 ---\n0,0,0\n{line}\n"
    with pytest.raises(MalformedInputError, match=message) as excinfo:
        parse_scanner_reports(text)
    assert excinfo.value.line_number == 3
    # Still a ValueError for callers that only catch builtins
    assert isinstance(excinfo.value, ValueError)


def test_duplicate_beacon_rejected():
    with pytest.raises(MalformedInputError, match="duplicate"):
        parse_scanner_reports("--- scanner 0 ---\n1,2,3\n1,2,3\n")


def test_load_sample_file():
    scanners = ScannerReportLoader().load(SAMPLE_FILE)
    assert len(scanners) == 5
    assert [len(s) for s in scanners] == [25, 25, 26, 25, 26]
    assert scanners[4].beacons[-1] == (30, -46, -14)


def test_load_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        ScannerReportLoader().load(tmp_path / "missing.txt")
