"""Dataclasses for parsed definitions: DefElement, DefStats, DefRecord, DefIndex."""
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from ..extraction.extractor import CandidateReferences
from .markup import render_markup

UNKNOWN = "Unknown"


@dataclass(slots=True)
class DefElement:
    name: str
    attributes: dict[str, str] = field(default_factory=dict)
    content: str | None = None
    children: list[DefElement] = field(default_factory=list)
    depth: int = 0

    @property
    def is_leaf(self) -> bool:
        """No content and no children."""
        return self.content is None and not self.children

    @property
    def is_value(self) -> bool:
        return self.content is not None and not self.children

    @property
    def is_structural(self) -> bool:
        return bool(self.children)

    def child(self, name: str) -> DefElement | None:
        for candidate in self.children:
            if candidate.name == name:
                return candidate
        return None

    def to_markup(self, indent: int = 0) -> str:
        return render_markup(self, indent)


@dataclass(slots=True)
class DefStats:
    element_count: int
    max_depth: int
    has_complex_structure: bool


@dataclass(slots=True)
class DefRecord:
    identity: str
    kind: str
    label: str | None
    description: str | None
    parent_identity: str | None
    is_abstract: bool
    tags: list[str]
    stats: DefStats | None
    children: list[DefElement]
    source_file: str
    extension: str
    raw_markup: str
    candidate_refs: CandidateReferences = field(default_factory=CandidateReferences)
    references_out: list[str] = field(default_factory=list)
    references_in: list[str] = field(default_factory=list)
    code_references: list[str] = field(default_factory=list)


@dataclass(slots=True)
class DefIndex:
    files: list[Path]
    records: list[DefRecord]
    by_identity: dict[str, list[int]]

    @classmethod
    def build(cls, records: list[DefRecord], files: list[Path] | None = None) -> DefIndex:
        by_identity: dict[str, list[int]] = {}
        for idx, record in enumerate(records):
            by_identity.setdefault(record.identity, []).append(idx)
        return cls(files=list(files or []), records=records, by_identity=by_identity)

    def get(self, identity: str) -> list[DefRecord]:
        return [self.records[idx] for idx in self.by_identity.get(identity, [])]

    def get_single(self, identity: str) -> DefRecord | None:
        candidates = self.by_identity.get(identity, [])
        if len(candidates) == 1:
            return self.records[candidates[0]]
        return None

    def __len__(self) -> int:
        return len(self.records)
