"""The documentation graph: entry registry, lookups and type formatting."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator, Sequence

from docembed.display_name import entry_link
from docembed.doc_entry import DocEntry
from docembed.doc_type import DocType, RepoProfile, is_top_level_kind
from docembed.embed import Embed
from docembed.render_options import RenderSettings
from docembed.type_target import resolve_type_target

TYPE_SPECIAL_RE = re.compile(r"([<>*])")
WORD_RE = re.compile(r"^\w+$")
UNION_LEFT_RE = re.compile(r"[\w>]$")
UNION_RIGHT_RE = re.compile(r"^\w")


class DocGraph:
    """Read-only view over every entry produced by one documentation build.

    Entries are registered parent-first by the loader. Each entry gets an
    integer ``entry_id`` and refers to its parent by that id only.
    """

    def __init__(
        self,
        *,
        base_docs_url: str | None = None,
        repo_url: str | None = None,
        repo_profile: RepoProfile = RepoProfile.SCROLL_TO,
        settings: RenderSettings | None = None,
    ) -> None:
        """Initialize an empty graph with link configuration."""
        self.base_docs_url = base_docs_url.rstrip("/") if base_docs_url else None
        self.repo_url = repo_url.rstrip("/") if repo_url else None
        self.repo_profile = RepoProfile(repo_profile)
        self.settings = settings or RenderSettings()
        self._entries: list[DocEntry] = []
        self._top_level: list[DocEntry] = []

    # -----------------------------
    # Registry
    # -----------------------------

    def register(self, entry: DocEntry) -> int:
        """Assign an id to ``entry`` and index it. Returns the new id."""
        entry.entry_id = len(self._entries)
        self._entries.append(entry)
        if entry.parent_id is None and is_top_level_kind(entry.doc_type):
            self._top_level.append(entry)
        return entry.entry_id

    def entry(self, entry_id: int) -> DocEntry:
        """Return the entry registered under ``entry_id``."""
        return self._entries[entry_id]

    def parent_of(self, entry: DocEntry) -> DocEntry | None:
        """Return the entry that owns ``entry``, or None at the top level."""
        if entry.parent_id is None:
            return None
        return self._entries[entry.parent_id]

    def iter_entries(self) -> Iterator[DocEntry]:
        """Iterate over all registered entries in registration order."""
        return iter(self._entries)

    @property
    def top_level(self) -> list[DocEntry]:
        """Top-level classes, interfaces and typedefs in generator order."""
        return list(self._top_level)

    # -----------------------------
    # Lookup
    # -----------------------------

    def find_child(
        self,
        query: str,
        exclude: Iterable[DocType] = (),
    ) -> DocEntry | None:
        """Find a top-level entry by case-insensitive name."""
        return _match(self._top_level, query, exclude)

    def find_in(
        self,
        container: DocEntry,
        query: str,
        exclude: Iterable[DocType] = (),
    ) -> DocEntry | None:
        """Find one of ``container``'s owned children by name."""
        return _match(container.owned_children(), query, exclude)

    def get(self, *terms: str, exclude: Iterable[DocType] = ()) -> DocEntry | None:
        """Resolve a path such as ``("Client", "user", "id")``.

        When more terms follow a property whose type names a documented
        entry, lookup continues inside that type.
        """
        exclude = tuple(exclude)
        remaining = [t.lower() for t in terms if t]
        if not remaining:
            return None

        elem = self.find_child(remaining.pop(0), exclude)
        while elem is not None and remaining:
            child = self.find_in(elem, remaining.pop(0), exclude)
            if child is None:
                return None
            target = resolve_type_target(child, self) if remaining else None
            elem = target or child
        return elem

    # -----------------------------
    # Presentation helpers
    # -----------------------------

    def format_type(self, tokens: Sequence[str]) -> str:
        """Render a flat type-token sequence as bold markdown with links."""
        parts = []
        for index, text in enumerate(tokens):
            if TYPE_SPECIAL_RE.search(text):
                parts.append(TYPE_SPECIAL_RE.sub(r"\\\1", text))
                continue

            elem = self.find_child(text.lower()) if WORD_RE.match(text) else None
            prepend_or = (
                index > 0
                and UNION_LEFT_RE.search(tokens[index - 1]) is not None
                and UNION_RIGHT_RE.search(text) is not None
            )
            rendered = entry_link(elem, self) if elem else text
            parts.append(("|" if prepend_or else "") + rendered)

        return f"**{''.join(parts)}**"

    def base_embed(self) -> Embed:
        """Return an embed skeleton carrying the graph's colour and author."""
        s = self.settings
        author = {"name": f"{s.title} Docs ({s.branch})"}
        if s.author_url:
            author["url"] = s.author_url
        if s.icon_url:
            author["icon_url"] = s.icon_url
        return Embed(color=s.color, author=author)


def _match(
    candidates: Iterable[DocEntry],
    query: str,
    exclude: Iterable[DocType],
) -> DocEntry | None:
    """Return the first candidate named ``query``; first match wins."""
    query = query.lower()
    doc_type: DocType | None = None
    if query.endswith("()"):
        query = query[:-2]
        doc_type = DocType.METHOD
    elif query.startswith("e-"):
        query = query[2:]
        doc_type = DocType.EVENT

    excluded = set(exclude)
    for child in candidates:
        if doc_type and child.doc_type != doc_type:
            continue
        if child.doc_type in excluded:
            continue
        if child.name.lower() == query:
            return child
    return None
