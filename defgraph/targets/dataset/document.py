"""Assemble the dataset payload: categories of definitions plus run stats."""
from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from ...parsing import DefRecord, ScanResult
from .flatten import FlattenLimits, flatten_elements
from .naming import format_category_name

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S UTC"


def _definition_payload(record: DefRecord, limits: FlattenLimits) -> dict[str, Any]:
    return {
        "def_name": record.identity,
        "def_type": record.kind,
        "label": record.label,
        "description": record.description,
        "parent_name": record.parent_identity,
        "is_abstract": record.is_abstract,
        "file_path": record.source_file,
        "tags": list(record.tags),
        "elements": flatten_elements(record.children, limits),
        "references_out": list(record.references_out),
        "references_in": list(record.references_in),
        "code_references": list(record.code_references),
        "raw_xml": record.raw_markup,
        "extension": record.extension,
    }


def build_categories(records: list[DefRecord], limits: FlattenLimits) -> list[dict[str, Any]]:
    by_kind: dict[str, list[DefRecord]] = {}
    for record in records:
        by_kind.setdefault(record.kind, []).append(record)

    categories: list[dict[str, Any]] = []
    for kind, kind_records in by_kind.items():
        ordered = sorted(kind_records, key=lambda item: item.identity)
        categories.append(
            {
                "name": kind,
                "display_name": format_category_name(kind),
                "count": len(ordered),
                "definitions": [_definition_payload(record, limits) for record in ordered],
            }
        )
    categories.sort(key=lambda category: category["display_name"])
    return categories


def build_stats(records: list[DefRecord], version: str, now: datetime | None = None) -> dict[str, Any]:
    generated_at = (now or datetime.now(timezone.utc)).strftime(TIMESTAMP_FORMAT)
    return {
        "total_defs": len(records),
        "total_categories": len({record.kind for record in records}),
        "total_files": len({record.source_file for record in records}),
        "game_version": version,
        "generated_at": generated_at,
    }


def build_dataset_payload(
    scan: ScanResult,
    version: str,
    *,
    limits: FlattenLimits = FlattenLimits(),
    now: datetime | None = None,
) -> dict[str, Any]:
    records = scan.index.records
    return {
        "categories": build_categories(records, limits),
        "stats": build_stats(records, version, now),
    }
