"""Logic for exporting entries as plain, JSON-serialisable descriptors."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from docembed.doc_entry import DocEntry
    from docembed.doc_graph import DocGraph


def to_descriptor(entry: DocEntry, graph: DocGraph) -> dict[str, Any]:
    """Serialize raw entry state; links and other computed values are left out."""
    out: dict[str, Any] = {
        "name": entry.name,
        "description": entry.description,
        "internal_type": entry.doc_type.value,
    }

    parent = graph.parent_of(entry)
    if entry.props is not None:
        out["props"] = [p.name for p in entry.props]
    if parent is not None:
        out["parent"] = parent.name
    if entry.methods is not None:
        out["methods"] = [m.name for m in entry.methods]
    if entry.events is not None:
        out["events"] = [e.name for e in entry.events]
    if entry.params is not None:
        out["params"] = [to_descriptor(p, graph) for p in entry.params]
    if entry.type:
        out["type"] = "".join(entry.type)
    if entry.examples is not None:
        out["examples"] = list(entry.examples)
    return out


def export_graph(graph: DocGraph) -> list[dict[str, Any]]:
    """Export every top-level entry of the graph."""
    return [to_descriptor(e, graph) for e in graph.top_level]
