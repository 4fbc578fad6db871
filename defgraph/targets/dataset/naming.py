"""Display-name helpers for definition categories."""
from __future__ import annotations


def format_category_name(name: str) -> str:
    """Convert a camelCase kind name to Title Case (e.g. 'thingDef' -> 'Thing Def')."""
    result: list[str] = []
    prev_lower = False
    for i, ch in enumerate(name):
        if i == 0:
            result.append(ch.upper())
        elif ch.isupper() and prev_lower:
            result.append(" ")
            result.append(ch)
        else:
            result.append(ch)
        prev_lower = ch.islower()
    return "".join(result)
