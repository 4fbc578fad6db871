"""Intermediate representation for the cross-reference graph."""

from .graph import IMPLEMENTED_BY, INHERITS, REFERENCES, DefGraph, GraphEdge

__all__ = [
    "DefGraph",
    "GraphEdge",
    "IMPLEMENTED_BY",
    "INHERITS",
    "REFERENCES",
]
