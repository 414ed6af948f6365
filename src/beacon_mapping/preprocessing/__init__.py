"""
Data Preprocessing Module

Parsing of textual scanner reports into Scanner records.
"""

from .loader import ScannerReportLoader, parse_scanner_reports

__all__ = ["ScannerReportLoader", "parse_scanner_reports"]
