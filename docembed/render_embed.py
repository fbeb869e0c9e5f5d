"""Logic for assembling an entry's complete embed."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from docembed.display_name import entry_link
from docembed.doc_type import Access
from docembed.embed import BLANK, Embed, EmbedField
from docembed.entry_links import canonical_link, source_link
from docembed.flatten_tokens import flatten_tokens
from docembed.layout_fields import formatted_description, layout_fields

if TYPE_CHECKING:
    from docembed.doc_entry import DocEntry
    from docembed.doc_graph import DocGraph
    from docembed.render_options import RenderOptions


def format_inherits(inherits: list[Any], graph: DocGraph) -> str:
    """Format an extends/implements list, joined with ``and``.

    Accepts both generator formats: a flat list of names (``["Base"]``) and a
    list of nested token arrays (``[[["Base"]], [["Other", "<"], ...]]``).
    """
    if inherits and isinstance(inherits[0], list):
        groups = [flatten_tokens(element) for element in inherits]
    else:
        groups = [[str(base)] for base in inherits]
    return " and ".join(graph.format_type(g) for g in groups)


def render_title(entry: DocEntry, graph: DocGraph) -> str:
    """Build the bold, underlined title line with inheritance and markers."""
    title = f"__**{entry_link(entry, graph)}**__"
    if entry.extends:
        title += f" (extends {format_inherits(entry.extends, graph)})"
    if entry.implements:
        title += f" (implements {format_inherits(entry.implements, graph)})"
    if entry.access == Access.PRIVATE:
        title += " **PRIVATE**"
    if entry.deprecated:
        title += " **DEPRECATED**"
    if entry.abstract:
        title += " **ABSTRACT**"
    return title


def render(
    entry: DocEntry,
    graph: DocGraph,
    options: RenderOptions | None = None,
) -> Embed:
    """Render ``entry`` into a presentation block."""
    embed = graph.base_embed()
    title = render_title(entry, graph)
    embed.description = f"{title}\n{formatted_description(entry, graph)}"
    embed.url = canonical_link(entry, graph)
    embed.fields = layout_fields(entry, graph, options)

    source = source_link(entry, graph)
    if source:
        embed.fields.append(EmbedField(name=BLANK, value=f"[View source]({source})"))
    return embed
