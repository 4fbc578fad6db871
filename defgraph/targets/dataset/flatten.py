"""Bounded, flattened view of a record's element tree for browsing."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence

from ...parsing.model import DefElement

DEPTH_INDENT = 20


@dataclass(frozen=True, slots=True)
class FlattenLimits:
    max_top_level: int = 15
    max_entries: int = 50
    max_depth: int = 3
    max_children: int = 5

    @classmethod
    def from_options(cls, extra: dict[str, Any]) -> FlattenLimits:
        defaults = cls()
        return cls(
            max_top_level=int(extra.get("max_top_level", defaults.max_top_level)),
            max_entries=int(extra.get("max_entries", defaults.max_entries)),
            max_depth=int(extra.get("max_depth", defaults.max_depth)),
            max_children=int(extra.get("max_children", defaults.max_children)),
        )


def _format_attributes(attributes: dict[str, str]) -> str:
    return " ".join(f'{key}="{value}"' for key, value in attributes.items())


def flatten_elements(
    elements: Sequence[DefElement],
    limits: FlattenLimits = FlattenLimits(),
) -> list[dict[str, Any]]:
    result: list[dict[str, Any]] = []
    for element in elements[: limits.max_top_level]:
        _flatten(element, result, 0, limits)
        if len(result) >= limits.max_entries:
            break
    return result


def _flatten(element: DefElement, result: list[dict[str, Any]], depth: int, limits: FlattenLimits) -> None:
    if depth > limits.max_depth or len(result) >= limits.max_entries:
        return
    result.append(
        {
            "name": element.name,
            "content": element.content,
            "depth": depth * DEPTH_INDENT,
            "attributes": _format_attributes(element.attributes),
            "has_children": bool(element.children),
        }
    )
    for child in element.children[: limits.max_children]:
        _flatten(child, result, depth + 1, limits)
