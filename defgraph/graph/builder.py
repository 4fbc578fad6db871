"""Build the cross-reference DefGraph for a complete DefIndex.

Resolution needs every record of the run, so it runs once after parsing.
Edges are collected first (record order, then inheritance edges) and then
written back onto the records in one serial pass, which keeps every
``references_in`` list owned by a single writer.
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ..ir import IMPLEMENTED_BY, INHERITS, REFERENCES, DefGraph, GraphEdge

if TYPE_CHECKING:
    from ..parsing.model import DefIndex, DefRecord

logger = logging.getLogger(__name__)


def resolve_references(index: DefIndex) -> DefGraph:
    graph = DefGraph()

    for idx, record in enumerate(index.records):
        _add_references(graph, index, idx, record)
        _add_code_references(graph, idx, record)

    for idx, record in enumerate(index.records):
        _add_inheritance(graph, index, idx, record)

    _apply_edges(graph, index)

    logger.info(
        "Reference mappings built: %d references, %d inheritance links, %d code references",
        len(graph.edges_with_label(REFERENCES)),
        len(graph.edges_with_label(INHERITS)),
        len(graph.edges_with_label(IMPLEMENTED_BY)),
    )
    return graph


def _add_references(graph: DefGraph, index: DefIndex, idx: int, record: DefRecord) -> None:
    for token in record.candidate_refs.record_refs:
        if token == record.identity or token not in index.by_identity:
            continue
        graph.add_edge(GraphEdge(source=record.identity, target=token, label=REFERENCES, source_index=idx))


def _add_code_references(graph: DefGraph, idx: int, record: DefRecord) -> None:
    for symbol in record.candidate_refs.code_refs:
        graph.add_edge(GraphEdge(source=record.identity, target=symbol, label=IMPLEMENTED_BY, source_index=idx))


def _add_inheritance(graph: DefGraph, index: DefIndex, idx: int, record: DefRecord) -> None:
    if not record.parent_identity or record.parent_identity not in index.by_identity:
        return
    graph.add_edge(GraphEdge(source=record.identity, target=record.parent_identity, label=INHERITS, source_index=idx))


def _apply_edges(graph: DefGraph, index: DefIndex) -> None:
    records = index.records
    for record in records:
        record.references_out = []
        record.references_in = []
        record.code_references = []

    for edge in graph.edges:
        source = records[edge.source_index]
        if edge.label == REFERENCES:
            source.references_out.append(edge.target)
            # Every record sharing the target identity gets the back-edge.
            for target_idx in index.by_identity[edge.target]:
                records[target_idx].references_in.append(edge.source)
        elif edge.label == IMPLEMENTED_BY:
            source.code_references.append(edge.target)
        elif edge.label == INHERITS:
            for target_idx in index.by_identity[edge.target]:
                parent = records[target_idx]
                if edge.source not in parent.references_in:
                    parent.references_in.append(edge.source)
