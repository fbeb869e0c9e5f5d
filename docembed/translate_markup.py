"""Logic for translating documentation-comment markup into chat markdown.

Translation runs four independent stages in a fixed order:

1. ``substitute_links``: ``{@link Target|Label}`` cross-references.
2. ``collapse_paragraphs``: soft-wrapped prose becomes a single line.
3. ``convert_callouts``: ``<info>``/``<warn>`` blocks become bold paragraphs.
4. ``convert_tags``: ``<p>``, ``<code>`` and ``<a href>`` tags.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from docembed.display_name import display_name
from docembed.entry_links import canonical_link

if TYPE_CHECKING:
    from docembed.doc_graph import DocGraph

LINK_TAG_RE = re.compile(r"\{@link (.+?)\}")
LINK_LABEL_SEP_RE = re.compile(r"\|| ")
LINK_PATH_SEP_RE = re.compile(r"\.|#")
# Fenced block, or an optional list line followed by a newline that does not
# start another list line.
SOFT_NEWLINE_RE = re.compile(r"(```[\s\S]+?```)|(^[*-].+$)?\n(?![*-])", re.MULTILINE)
CALLOUT_RE = re.compile(r"<(info|warn)>([\s\S]+?)</\1>")
PARAGRAPH_TAG_RE = re.compile(r"</?p>")
CODE_TAG_RE = re.compile(r"</?code>")
ANCHOR_TAG_RE = re.compile(r'<a href="(.+?)">(.+?)</a>')


def substitute_links(text: str, graph: DocGraph) -> str:
    """Replace ``{@link ...}`` tags with markdown links resolved against the graph."""

    def repl(m: re.Match) -> str:
        body = m.group(1)
        sep = LINK_LABEL_SEP_RE.search(body)
        if sep:
            target, label = body[: sep.start()], body[sep.end() :]
        else:
            target, label = body, ""

        elem = graph.get(*LINK_PATH_SEP_RE.split(target.replace("event:", "")))
        if elem is None:
            return f"[{label or target}]({target})"
        return f"[{display_name(elem, graph)}]({canonical_link(elem, graph) or target})"

    return LINK_TAG_RE.sub(repl, text)


def collapse_paragraphs(text: str) -> str:
    """Join soft-wrapped lines, keeping fenced code and list lines intact."""

    def repl(m: re.Match) -> str:
        codeblock, list_line = m.group(1), m.group(2)
        if codeblock or list_line:
            return m.group(0)
        return " "

    return SOFT_NEWLINE_RE.sub(repl, text)


def convert_callouts(text: str) -> str:
    """Turn ``<info>``/``<warn>`` blocks into bold, blank-line-delimited text."""
    return CALLOUT_RE.sub(r"\n**\2**\n", text)


def convert_tags(text: str) -> str:
    """Strip paragraph tags, backtick code tags and rewrite anchors as links."""
    text = PARAGRAPH_TAG_RE.sub("", text)
    text = CODE_TAG_RE.sub("`", text)
    return ANCHOR_TAG_RE.sub(r"[\2](\1)", text)


def translate(text: str | None, graph: DocGraph) -> str:
    """Translate raw documentation markup into display markdown."""
    if not text:
        return ""
    text = substitute_links(text, graph)
    text = collapse_paragraphs(text)
    text = convert_callouts(text)
    return convert_tags(text)
