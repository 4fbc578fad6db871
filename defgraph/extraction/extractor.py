"""Recursive collection of candidate reference tokens from a record subtree."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Sequence

from .rules import ATTRIBUTE, CODE, CONTENT, RECORD, REFERENCE_RULES, TAG, ReferenceRule, classify

if TYPE_CHECKING:
    from ..parsing.model import DefElement


@dataclass(slots=True)
class CandidateReferences:
    """Sorted, deduplicated tokens that may name a record or a code symbol."""
    record_refs: list[str] = field(default_factory=list)
    code_refs: list[str] = field(default_factory=list)


def extract_references(
    elements: Sequence[DefElement],
    rules: tuple[ReferenceRule, ...] = REFERENCE_RULES,
) -> CandidateReferences:
    buckets: dict[str, list[str]] = {RECORD: [], CODE: []}
    _collect(elements, rules, buckets)
    return CandidateReferences(
        record_refs=sorted(set(buckets[RECORD])),
        code_refs=sorted(set(buckets[CODE])),
    )


def _collect(
    elements: Sequence[DefElement],
    rules: tuple[ReferenceRule, ...],
    buckets: dict[str, list[str]],
) -> None:
    for element in elements:
        for bucket in classify(TAG, element.name, rules=rules):
            buckets.setdefault(bucket, []).append(element.name)

        if element.content is not None:
            for bucket in classify(CONTENT, element.name, rules=rules):
                buckets.setdefault(bucket, []).append(element.content)

        for key, value in element.attributes.items():
            for bucket in classify(ATTRIBUTE, element.name, key, rules=rules):
                buckets.setdefault(bucket, []).append(value)

        _collect(element.children, rules, buckets)
