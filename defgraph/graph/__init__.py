"""Reference graph resolver: builds a DefGraph from a complete DefIndex."""

from .builder import resolve_references

__all__ = [
    "resolve_references",
]
