"""Reference extraction: candidate record and code-symbol tokens from element trees."""

from .extractor import CandidateReferences, extract_references
from .rules import REFERENCE_RULES, ReferenceRule, classify

__all__ = [
    "CandidateReferences",
    "REFERENCE_RULES",
    "ReferenceRule",
    "classify",
    "extract_references",
]
