"""Canonical re-serialization of a DefElement subtree.

Display only, never re-parsed: text and attribute values are written as
parsed, without re-escaping.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .model import DefElement

INDENT = "  "


def render_markup(element: DefElement, indent: int = 0) -> str:
    pad = INDENT * indent
    parts = [f"{pad}<{element.name}"]
    for key, value in element.attributes.items():
        parts.append(f' {key}="{value}"')

    if element.content is None and not element.children:
        parts.append(" />\n")
        return "".join(parts)

    parts.append(">")
    if element.content is not None:
        if element.children:
            parts.append(f"\n{INDENT * (indent + 1)}{element.content}\n")
        else:
            parts.append(element.content)
    else:
        parts.append("\n")

    for child in element.children:
        parts.append(render_markup(child, indent + 1))

    if element.children:
        parts.append(f"{pad}</{element.name}>\n")
    else:
        parts.append(f"</{element.name}>\n")
    return "".join(parts)
