from __future__ import annotations

from dataclasses import dataclass

REFERENCES = "references"
INHERITS = "inherits"
IMPLEMENTED_BY = "implemented_by"


@dataclass(frozen=True, slots=True)
class GraphEdge:
    """Directed labelled relationship from one record identity to a target.

    Targets are record identities for ``references`` and ``inherits`` edges
    and external code symbols for ``implemented_by`` edges.
    """
    source: str
    target: str
    label: str
    source_index: int | None = None  # position of the source record in its DefIndex


class DefGraph:
    """Directed labelled graph over every definition of a run."""

    __slots__ = ("edges", "_out", "_in")

    def __init__(self) -> None:
        self.edges: list[GraphEdge] = []
        self._out: dict[str, list[GraphEdge]] = {}
        self._in: dict[str, list[GraphEdge]] = {}

    # -- mutators -----------------------------------------------------------

    def add_edge(self, edge: GraphEdge) -> None:
        self.edges.append(edge)
        self._out.setdefault(edge.source, []).append(edge)
        self._in.setdefault(edge.target, []).append(edge)

    # -- queries ------------------------------------------------------------

    def outgoing(self, identity: str, label: str | None = None) -> list[GraphEdge]:
        edges = self._out.get(identity, [])
        if label is not None:
            return [e for e in edges if e.label == label]
        return list(edges)

    def incoming(self, identity: str, label: str | None = None) -> list[GraphEdge]:
        edges = self._in.get(identity, [])
        if label is not None:
            return [e for e in edges if e.label == label]
        return list(edges)

    def edges_with_label(self, label: str) -> list[GraphEdge]:
        return [e for e in self.edges if e.label == label]

    def __len__(self) -> int:
        return len(self.edges)
