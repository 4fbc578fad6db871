"""Top-level entry point: parse_defs_directory."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from ..errors import ParsingError, ValidationError
from ..graph import resolve_references
from ..ir import DefGraph
from .model import DefIndex, DefRecord
from .tree import parse_defs_markup

DATA_SUBDIR = "Data"
MARKUP_PATTERN = "*.xml"

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ScanReport:
    files_found: int = 0
    files_processed: int = 0
    files_failed: int = 0
    records_found: int = 0
    failures: list[tuple[Path, str]] = field(default_factory=list)


@dataclass(slots=True)
class ScanResult:
    root_dir: Path
    index: DefIndex
    graph: DefGraph
    report: ScanReport


def discover_markup_files(data_dir: Path, pattern: str = MARKUP_PATTERN) -> list[Path]:
    return sorted(path for path in data_dir.rglob(pattern) if path.is_file())


def parse_defs_file(path: Path, root: Path | None = None) -> list[DefRecord]:
    """Read and parse one file; OSError and ParsingError propagate to the caller."""
    return parse_defs_markup(path.read_bytes(), source=path, root=root)


def parse_defs_directory(
    root_dir: Path,
    *,
    data_subdir: str = DATA_SUBDIR,
    pattern: str = MARKUP_PATTERN,
) -> ScanResult:
    data_dir = root_dir / data_subdir
    if not data_dir.is_dir():
        raise ValidationError(f"Data directory not found: {data_dir}")

    logger.info("Scanning directory: %s", data_dir)
    files = discover_markup_files(data_dir, pattern)
    report = ScanReport(files_found=len(files))
    records: list[DefRecord] = []

    for file_path in files:
        try:
            file_records = parse_defs_file(file_path, root_dir)
        except (OSError, ParsingError) as exc:
            report.files_failed += 1
            report.failures.append((file_path, str(exc)))
            logger.warning("Error parsing %s: %s", file_path, exc)
            continue
        report.files_processed += 1
        if file_records:
            logger.info("%s: %d definitions", file_path.name, len(file_records))
        records.extend(file_records)

    report.records_found = len(records)
    logger.info(
        "Scan complete: %d found, %d processed, %d failed, %d definitions",
        report.files_found,
        report.files_processed,
        report.files_failed,
        report.records_found,
    )

    index = DefIndex.build(records, files)
    graph = resolve_references(index)
    return ScanResult(root_dir=root_dir, index=index, graph=graph, report=report)
