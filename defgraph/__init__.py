"""defgraph: parse game definition XML into a cross-referenced definition graph."""

from .parsing import (
    DefElement,
    DefIndex,
    DefRecord,
    DefStats,
    ScanResult,
    parse_defs_directory,
    parse_defs_markup,
)
from .graph import resolve_references
from .extraction import CandidateReferences, extract_references
from .ir import DefGraph, GraphEdge
from .engine import RunResult, run_generation

__all__ = [
    "CandidateReferences",
    "DefElement",
    "DefGraph",
    "DefIndex",
    "DefRecord",
    "DefStats",
    "GraphEdge",
    "RunResult",
    "ScanResult",
    "extract_references",
    "parse_defs_directory",
    "parse_defs_markup",
    "resolve_references",
    "run_generation",
]
