"""Logic for resolving free-form queries to embeds, with a fuzzy fallback."""

from __future__ import annotations

import difflib
import re
from typing import TYPE_CHECKING

from docembed.display_name import display_name, entry_link
from docembed.doc_type import DocType
from docembed.render_embed import render

if TYPE_CHECKING:
    from docembed.doc_entry import DocEntry
    from docembed.doc_graph import DocGraph
    from docembed.embed import Embed
    from docembed.render_options import RenderOptions

QUERY_SEP_RE = re.compile(r"\.|#")
UNSEARCHABLE = {DocType.PARAM, DocType.CONSTRUCTOR}
SEARCH_CUTOFF = 0.6


def search(graph: DocGraph, query: str, limit: int = 10) -> list[DocEntry]:
    """Return up to ``limit`` entries whose names resemble ``query``, best first."""
    keyed: dict[str, DocEntry] = {}
    for entry in graph.iter_entries():
        if entry.doc_type in UNSEARCHABLE:
            continue
        for key in (entry.name.lower(), display_name(entry, graph).lower()):
            keyed.setdefault(key, entry)

    matches = difflib.get_close_matches(
        query.lower(),
        list(keyed),
        n=limit * 2,
        cutoff=SEARCH_CUTOFF,
    )
    results: list[DocEntry] = []
    seen: set[int] = set()
    for key in matches:
        entry = keyed[key]
        if entry.entry_id not in seen:
            seen.add(entry.entry_id)
            results.append(entry)
    return results[:limit]


def resolve_embed(
    graph: DocGraph,
    query: str,
    options: RenderOptions | None = None,
) -> Embed | None:
    """Render the entry named by ``query``, or a list of close matches."""
    elem = graph.get(*QUERY_SEP_RE.split(query))
    if elem is not None:
        return render(elem, graph, options)

    results = search(graph, query)
    if not results:
        return None
    embed = graph.base_embed()
    embed.title = "Search results:"
    embed.description = "\n".join(f"**{entry_link(e, graph)}**" for e in results)
    return embed
