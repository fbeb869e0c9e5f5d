"""Logic for computing canonical documentation links and source links."""

from __future__ import annotations

from typing import TYPE_CHECKING

from docembed.doc_type import DocType, RepoProfile, Scope

if TYPE_CHECKING:
    from docembed.doc_entry import DocEntry
    from docembed.doc_graph import DocGraph


def is_static(entry: DocEntry) -> bool:
    """Check if the entry is a static member."""
    return entry.scope == Scope.STATIC


def canonical_link(entry: DocEntry, graph: DocGraph) -> str | None:
    """Build the documentation-site URL for an entry.

    Params and constructors have no page or anchor of their own.
    """
    if not graph.base_docs_url:
        return None
    if entry.doc_type in {DocType.PARAM, DocType.CONSTRUCTOR}:
        return None

    parent = graph.parent_of(entry)
    if graph.repo_profile == RepoProfile.FRAGMENT:
        path = _fragment_path(entry, parent)
    else:
        path = _scroll_to_path(entry, parent)
    return f"{graph.base_docs_url}/{path}"


def _scroll_to_path(entry: DocEntry, parent: DocEntry | None) -> str:
    """Path in the ``<kind>/<Parent>?scrollTo=<name>`` convention."""
    if parent is None:
        return f"{entry.doc_type.value}/{entry.name}"
    marker = "s-" if is_static(entry) else ""
    return f"{parent.doc_type.value}/{parent.name}?scrollTo={marker}{entry.name}"


def _fragment_path(entry: DocEntry, parent: DocEntry | None) -> str:
    """Path in the ``<Parent>#<name>`` convention, typedefs under ``global``."""
    if parent is None:
        if entry.doc_type == DocType.TYPEDEF:
            return f"global#{entry.name}"
        return entry.name
    if parent.doc_type == DocType.TYPEDEF:
        return f"global#{parent.name}"

    if is_static(entry):
        marker = "."
    elif entry.doc_type == DocType.EVENT:
        marker = "event:"
    else:
        marker = ""
    return f"{parent.name}#{marker}{entry.name}"


def source_link(entry: DocEntry, graph: DocGraph) -> str | None:
    """Build a link to the line in the repository where the entry is declared."""
    if not graph.repo_url or not entry.meta:
        return None
    meta = entry.meta
    return f"{graph.repo_url}/{meta.path}/{meta.file}#L{meta.line}"
