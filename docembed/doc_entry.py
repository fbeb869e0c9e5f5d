"""Data model for documentation entries."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from docembed.doc_type import Access, DocType, Scope
from docembed.source_meta import SourceMeta


@dataclass
class DocEntry:
    """One documented construct (class, method, property, param, etc.).

    The variant is selected by ``doc_type``; attributes that do not apply to a
    variant stay at their defaults. Owned children live in ``construct``,
    ``props``, ``methods``, ``events`` and ``params``. A collection set to
    ``None`` is absent, an empty list is present but empty.

    ``parent_id`` indexes the owning graph's registry instead of holding the
    parent itself; use ``DocGraph.parent_of`` to follow it.
    """

    doc_type: DocType
    name: str
    entry_id: int = -1
    parent_id: int | None = None
    description: str | None = None
    meta: SourceMeta | None = None
    deprecated: bool = False
    access: Access = Access.PUBLIC

    # Type-bearing variants
    type: list[str] | None = None
    nullable: bool = False
    optional: bool = False
    scope: Scope | None = None

    # Callables
    examples: list[str] | None = None
    returns: str | None = None
    returns_type: list[str] | None = None

    # Containers
    extends: list[Any] | None = None  # flat or nested (legacy) inherit list
    implements: list[Any] | None = None
    abstract: bool = False
    construct: DocEntry | None = None
    props: list[DocEntry] | None = None
    methods: list[DocEntry] | None = None
    events: list[DocEntry] | None = None
    params: list[DocEntry] | None = None

    def owned_children(self) -> list[DocEntry]:
        """Return the entry's owned children, constructor excluded."""
        children: list[DocEntry] = []
        for group in (self.props, self.methods, self.events, self.params):
            if group:
                children.extend(group)
        return children
