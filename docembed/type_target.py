"""Logic for resolving an entry's type to a documented entry."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from docembed.doc_entry import DocEntry
    from docembed.doc_graph import DocGraph

IDENTIFIER_RE = re.compile(r"^\w+$")


def resolve_type_target(entry: DocEntry, graph: DocGraph) -> DocEntry | None:
    """Return the first documented entry named by one of the type tokens."""
    if not entry.type:
        return None
    for text in entry.type:
        if not IDENTIFIER_RE.match(text):
            continue
        found = graph.find_child(text.lower())
        if found is not None:
            return found
    return None
