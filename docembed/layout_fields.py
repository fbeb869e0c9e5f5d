"""Logic for packing an entry's attributes into ordered embed fields.

Fields are always emitted in this order: constructor, properties, methods,
events, params, type, returns, examples. Inline groups are padded to whole
rows right after they are appended, which relies on that order: each padding
pass only sees the group that was just added.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from docembed.display_name import display_name, embed_name, formatted_type
from docembed.doc_type import Access
from docembed.embed import BLANK, EmbedField
from docembed.entry_links import canonical_link
from docembed.md_codeblock import md_codeblock, md_name_list
from docembed.pad_inline_fields import pad_inline_fields
from docembed.render_options import RenderOptions
from docembed.translate_markup import translate
from docembed.truncate_text import (
    HEADER_LINK_SUFFIX,
    PLAIN_SUFFIX,
    full_text_suffix,
    truncate_text,
)

if TYPE_CHECKING:
    from docembed.doc_entry import DocEntry
    from docembed.doc_graph import DocGraph


def layout_fields(
    entry: DocEntry,
    graph: DocGraph,
    options: RenderOptions | None = None,
) -> list[EmbedField]:
    """Build the ordered field list for an entry's embed (source link excluded)."""
    options = options or RenderOptions()
    fields: list[EmbedField] = []
    attach_constructor(fields, entry, graph)
    attach_props(fields, entry, graph, options)
    attach_methods(fields, entry, options)
    attach_events(fields, entry)
    attach_params(fields, entry, graph)
    attach_type(fields, entry, graph)
    attach_returns(fields, entry, graph)
    attach_examples(fields, entry, graph)
    return fields


def formatted_description(entry: DocEntry, graph: DocGraph) -> str:
    """Translate and truncate an entry's description."""
    return _truncate_for(entry, translate(entry.description, graph), graph)


def _truncate_for(entry: DocEntry, text: str, graph: DocGraph) -> str:
    url = canonical_link(entry, graph)
    suffix = full_text_suffix(url) if url else _header_suffix(graph)
    return truncate_text(text, suffix, graph.settings.description_limit)


def _header_suffix(graph: DocGraph) -> str:
    """Point at the title link, which only exists with a base docs URL."""
    return HEADER_LINK_SUFFIX if graph.base_docs_url else PLAIN_SUFFIX


def _constructor_text(text: str | None, graph: DocGraph) -> str:
    return truncate_text(
        translate(text, graph),
        _header_suffix(graph),
        graph.settings.description_limit,
    )


def _row(*lines: str) -> str:
    """Join non-empty lines of a detail block."""
    return "\n".join(line for line in lines if line)


def _header(*parts: str) -> str:
    return " ".join(p for p in parts if p)


def _visible(
    entries: list[DocEntry],
    options: RenderOptions,
) -> list[DocEntry]:
    if not options.exclude_private_elements:
        return list(entries)
    return [e for e in entries if e.access != Access.PRIVATE]


def _examples_value(examples: list[str], graph: DocGraph) -> str:
    lang = graph.settings.code_language
    return "\n".join(md_codeblock(lang, ex) for ex in examples)


def attach_inline_group(
    fields: list[EmbedField],
    title: str,
    rows: list[str],
    columns: int,
) -> None:
    """Append one inline field per row, the first one titled, then pad the row."""
    if not rows:
        return
    for index, row in enumerate(rows):
        name = title if index == 0 else BLANK
        fields.append(EmbedField(name=name, value=row, inline=True))
    pad_inline_fields(fields, columns)


def attach_constructor(
    fields: list[EmbedField],
    entry: DocEntry,
    graph: DocGraph,
) -> None:
    """Append the constructor signature, its params and its examples."""
    construct = entry.construct
    if construct is None or (not construct.params and not construct.examples):
        return

    params = construct.params or []
    namespace = graph.settings.constructor_namespace
    prefix = f"{namespace}." if namespace else ""
    args = ", ".join(f"[{p.name}]" if p.optional else p.name for p in params)
    signature = md_codeblock(
        graph.settings.code_language,
        f"new {prefix}{construct.name}({args})",
    )
    fields.append(
        EmbedField(
            name="Constructor",
            value=_row(_constructor_text(construct.description, graph), signature),
        )
    )

    rows = [
        _row(
            _header(display_name(p, graph), formatted_type(p, graph)),
            _constructor_text(p.description, graph),
        )
        for p in params
    ]
    attach_inline_group(fields, "Params", rows, graph.settings.inline_columns)

    if construct.examples:
        fields.append(
            EmbedField(
                name="Examples",
                value=_examples_value(construct.examples, graph),
            )
        )


def attach_props(
    fields: list[EmbedField],
    entry: DocEntry,
    graph: DocGraph,
    options: RenderOptions,
) -> None:
    """Append properties, detailed when the entry has no methods or events."""
    if entry.props is None:
        return
    props = _visible(entry.props, options)
    if not props:
        return

    if entry.methods is None and entry.events is None:
        rows = [
            _row(
                _header(embed_name(p), formatted_type(p, graph)),
                formatted_description(p, graph),
            )
            for p in props
        ]
        attach_inline_group(fields, "Properties", rows, graph.settings.inline_columns)
    else:
        names = md_name_list([p.name for p in props])
        fields.append(EmbedField(name="Properties", value=names))


def attach_methods(
    fields: list[EmbedField],
    entry: DocEntry,
    options: RenderOptions,
) -> None:
    """Append a summary of method names."""
    if entry.methods is None:
        return
    methods = _visible(entry.methods, options)
    if not methods:
        return
    names = md_name_list([m.name for m in methods])
    fields.append(EmbedField(name="Methods", value=names))


def attach_events(fields: list[EmbedField], entry: DocEntry) -> None:
    """Append a summary of event names."""
    if not entry.events:
        return
    names = md_name_list([e.name for e in entry.events])
    fields.append(EmbedField(name="Events", value=names))


def attach_params(fields: list[EmbedField], entry: DocEntry, graph: DocGraph) -> None:
    """Append the entry's own params as an inline group."""
    if not entry.params:
        return
    rows = [
        _row(
            _header(display_name(p, graph), formatted_type(p, graph)),
            "**DEPRECATED**" if p.deprecated else "",
            formatted_description(p, graph),
        )
        for p in entry.params
    ]
    attach_inline_group(fields, "Params", rows, graph.settings.inline_columns)


def attach_type(fields: list[EmbedField], entry: DocEntry, graph: DocGraph) -> None:
    """Append the entry's type."""
    if not entry.type:
        return
    fields.append(EmbedField(name="Type", value=formatted_type(entry, graph)))


def attach_returns(fields: list[EmbedField], entry: DocEntry, graph: DocGraph) -> None:
    """Append the return type and return description."""
    if not entry.returns and not entry.returns_type:
        return
    return_type = graph.format_type(entry.returns_type) if entry.returns_type else ""
    text = _truncate_for(entry, translate(entry.returns, graph), graph)
    fields.append(EmbedField(name="Returns", value=_row(return_type, text)))


def attach_examples(fields: list[EmbedField], entry: DocEntry, graph: DocGraph) -> None:
    """Append every example as its own fenced block in one field."""
    if not entry.examples:
        return
    value = _examples_value(entry.examples, graph)
    fields.append(EmbedField(name="Examples", value=value))
