"""Definition parser: streams markup files into profiled DefRecords."""

from .model import DefElement, DefIndex, DefRecord, DefStats
from .driver import ScanReport, ScanResult, parse_defs_directory, parse_defs_file
from .tree import DefTreeBuilder, parse_defs_markup

__all__ = [
    "DefElement",
    "DefIndex",
    "DefRecord",
    "DefStats",
    "DefTreeBuilder",
    "ScanReport",
    "ScanResult",
    "parse_defs_directory",
    "parse_defs_file",
    "parse_defs_markup",
]
