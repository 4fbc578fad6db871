"""Record profiling: identity, label/description, inheritance, tags and stats."""
from __future__ import annotations

from typing import Sequence

from .model import UNKNOWN, DefElement, DefRecord, DefStats

NAME_ATTR = "Name"
PARENT_ATTR = "ParentName"
ABSTRACT_ATTR = "Abstract"
DEF_NAME_TAG = "defName"

# Immediate child tag -> tag label, in output order.
TAG_RULES: tuple[tuple[str, str], ...] = (
    ("costList", "Craftable"),
    ("researchPrerequisites", "Research Required"),
    ("statBases", "Has Stats"),
    ("comps", "Has Components"),
    ("recipes", "Has Recipes"),
)

COMPLEX_ELEMENT_COUNT = 20
COMPLEX_MAX_DEPTH = 4


def find_child_content(root: DefElement, name: str) -> str | None:
    child = root.child(name)
    return child.content if child is not None else None


def resolve_identity(root: DefElement) -> str:
    name = root.attributes.get(NAME_ATTR)
    if name is not None:
        return name
    def_name = find_child_content(root, DEF_NAME_TAG)
    return def_name if def_name is not None else UNKNOWN


def is_abstract(root: DefElement) -> bool:
    return root.attributes.get(ABSTRACT_ATTR) == "True"


def generate_tags(root: DefElement, is_abstract: bool, has_parent: bool) -> list[str]:
    tags: list[str] = []
    if is_abstract:
        tags.append("Abstract")
    if has_parent:
        tags.append("Inherits")
    child_names = {child.name for child in root.children}
    for child_name, tag in TAG_RULES:
        if child_name in child_names:
            tags.append(tag)
    return tags


def count_elements(elements: Sequence[DefElement]) -> int:
    return len(elements) + sum(count_elements(e.children) for e in elements)


def calculate_max_depth(elements: Sequence[DefElement], current_depth: int = 0) -> int:
    if not elements:
        return current_depth
    return max(
        current_depth + 1 if not e.children else calculate_max_depth(e.children, current_depth + 1)
        for e in elements
    )


def calculate_stats(elements: Sequence[DefElement]) -> DefStats | None:
    """Aggregate subtree statistics; None when the record has no children at all."""
    if not elements:
        return None
    element_count = count_elements(elements)
    max_depth = calculate_max_depth(elements)
    return DefStats(
        element_count=element_count,
        max_depth=max_depth,
        has_complex_structure=element_count > COMPLEX_ELEMENT_COUNT or max_depth > COMPLEX_MAX_DEPTH,
    )


def profile_record(root: DefElement, *, source_file: str, extension: str) -> DefRecord:
    parent_identity = root.attributes.get(PARENT_ATTR)
    abstract = is_abstract(root)
    return DefRecord(
        identity=resolve_identity(root),
        kind=root.name,
        label=find_child_content(root, "label"),
        description=find_child_content(root, "description"),
        parent_identity=parent_identity,
        is_abstract=abstract,
        tags=generate_tags(root, abstract, parent_identity is not None),
        stats=calculate_stats(root.children),
        children=root.children,
        source_file=source_file,
        extension=extension,
        raw_markup=root.to_markup(0),
    )
