"""Logic for rendering entry names, links and types for display."""

from __future__ import annotations

from typing import TYPE_CHECKING

from docembed.doc_type import DocType
from docembed.entry_links import canonical_link, is_static

if TYPE_CHECKING:
    from docembed.doc_entry import DocEntry
    from docembed.doc_graph import DocGraph


def display_name(entry: DocEntry, graph: DocGraph) -> str:
    """Return the name used when linking to or titling an entry."""
    if entry.doc_type == DocType.PARAM:
        return _code_name(entry)

    parent = graph.parent_of(entry)
    if parent is None:
        if entry.doc_type == DocType.METHOD:
            return f"{entry.name}()"
        return entry.name

    if entry.doc_type == DocType.PROP:
        return f"{parent.name}{'.' if is_static(entry) else '#'}{entry.name}"
    if entry.doc_type == DocType.METHOD:
        return f"{parent.name}{'.' if is_static(entry) else '#'}{entry.name}()"
    if entry.doc_type == DocType.EVENT:
        return f"{parent.name}#event:{entry.name}"
    return entry.name


def embed_name(entry: DocEntry) -> str:
    """Return the header used for a property row inside an inline group."""
    return _code_name(entry)


def _code_name(entry: DocEntry) -> str:
    name = f"`[{entry.name}]`" if entry.optional else f"`{entry.name}`"
    return f"~~{name}~~" if entry.deprecated else name


def entry_link(entry: DocEntry, graph: DocGraph) -> str:
    """Return ``[display name](canonical link)``, or the bare name without a link."""
    name = display_name(entry, graph)
    url = canonical_link(entry, graph)
    if not url:
        return name
    return f"[{name}]({url})"


def formatted_type(entry: DocEntry, graph: DocGraph) -> str:
    """Render the entry's type, prefixed with ``?`` when nullable."""
    if not entry.type:
        return ""
    return f"{'?' if entry.nullable else ''}{graph.format_type(entry.type)}"
