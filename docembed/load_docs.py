"""Logic for building a DocGraph from documentation-generator output.

The generator emits one JSON document with ``classes``, ``interfaces`` and
``typedefs`` arrays. Entries are registered parent-first so every child can
record its parent's id at construction.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Callable
from pathlib import Path
from typing import Any

import yaml

from docembed.doc_entry import DocEntry
from docembed.doc_graph import DocGraph
from docembed.doc_type import Access, DocType, RepoProfile, Scope, is_container_kind
from docembed.errors import DocFormatError
from docembed.flatten_tokens import flatten_tokens
from docembed.load_config import settings_from_config
from docembed.render_options import RenderSettings
from docembed.source_meta import SourceMeta

logger = logging.getLogger(__name__)

TOP_LEVEL_SECTIONS = (
    ("classes", DocType.CLASS),
    ("interfaces", DocType.INTERFACE),
    ("typedefs", DocType.TYPEDEF),
)

ChildBuilder = Callable[[DocGraph, dict[str, Any], int], DocEntry]


def load_docs_file(path: Path) -> dict[str, Any]:
    """Read generator output from a ``.json`` or ``.yml``/``.yaml`` file."""
    text = path.read_text(encoding="utf-8")
    if path.suffix.lower() in {".yml", ".yaml"}:
        data = yaml.safe_load(text)
    else:
        data = json.loads(text)
    if not isinstance(data, dict):
        msg = f"Documentation root must be a mapping: {path}"
        raise DocFormatError(msg)
    return data


def build_graph(
    data: dict[str, Any],
    *,
    base_docs_url: str | None = None,
    repo_url: str | None = None,
    repo_profile: RepoProfile | str = RepoProfile.SCROLL_TO,
    settings: RenderSettings | None = None,
) -> DocGraph:
    """Index every documented entry into a new graph."""
    graph = DocGraph(
        base_docs_url=base_docs_url,
        repo_url=repo_url,
        repo_profile=RepoProfile(repo_profile),
        settings=settings,
    )
    for section, doc_type in TOP_LEVEL_SECTIONS:
        for record in data.get(section) or []:
            if is_container_kind(doc_type):
                _build_container(graph, record, doc_type)
            else:
                _build_typedef(graph, record)

    logger.debug(
        "Indexed %d entries (%d top-level)",
        sum(1 for _ in graph.iter_entries()),
        len(graph.top_level),
    )
    return graph


def graph_from_config(data: dict[str, Any], config: dict[str, Any]) -> DocGraph:
    """Build a graph using the link and render settings of a loaded config."""
    docs = config.get("docs") or {}
    return build_graph(
        data,
        base_docs_url=docs.get("base_docs_url"),
        repo_url=docs.get("repo_url"),
        repo_profile=docs.get("repo_profile") or RepoProfile.SCROLL_TO,
        settings=settings_from_config(config),
    )


# -----------------------------
# Field parsing
# -----------------------------


def _enum_value(enum_cls: type, raw: Any, name: str, default: Any) -> Any:
    if raw is None:
        return default
    try:
        return enum_cls(str(raw).lower())
    except ValueError:
        msg = f"Unknown {enum_cls.__name__.lower()} {raw!r} on {name!r}"
        raise DocFormatError(msg) from None


def _type_tokens(raw: Any, name: str) -> list[str] | None:
    """Validate and flatten a nested type-token array."""
    if raw is None:
        return None
    if not isinstance(raw, list):
        msg = f"Type of {name!r} must be a token array, got {type(raw).__name__}"
        raise DocFormatError(msg)
    tokens = flatten_tokens(raw)
    if not tokens:
        msg = f"Type of {name!r} is empty"
        raise DocFormatError(msg)
    if not all(isinstance(t, str) for t in tokens):
        msg = f"Type of {name!r} contains non-string tokens"
        raise DocFormatError(msg)
    return tokens


def _source_meta(raw: Any, name: str) -> SourceMeta | None:
    if not raw:
        return None
    if not isinstance(raw, dict) or "file" not in raw or "line" not in raw:
        msg = f"Source meta of {name!r} needs 'file' and 'line'"
        raise DocFormatError(msg)
    try:
        line = int(raw["line"])
    except (TypeError, ValueError):
        msg = f"Source line of {name!r} must be an integer, got {raw['line']!r}"
        raise DocFormatError(msg) from None
    return SourceMeta(
        path=str(raw.get("path") or "").strip("/"),
        file=str(raw["file"]),
        line=line,
    )


def _returns(raw: Any, name: str) -> tuple[str | None, list[str] | None]:
    """Split a return record into (description, type tokens).

    Accepts a plain description, a bare type array or a
    ``{"types": [...], "description": "..."}`` record.
    """
    if raw is None:
        return None, None
    if isinstance(raw, str):
        return raw, None
    if isinstance(raw, dict):
        types = raw.get("types")
        return raw.get("description"), _type_tokens(types, name) if types else None
    return None, _type_tokens(raw, name)


def _examples(raw: Any, name: str) -> list[str] | None:
    if raw is None:
        return None
    if not isinstance(raw, list):
        msg = f"Examples of {name!r} must be a list, got {type(raw).__name__}"
        raise DocFormatError(msg)
    return [str(ex) for ex in raw]


def _new_entry(
    data: dict[str, Any],
    doc_type: DocType,
    parent_id: int | None,
) -> DocEntry:
    """Create an entry with the attributes every variant shares."""
    if not isinstance(data, dict) or not data.get("name"):
        msg = f"{doc_type.value} entry without a name: {data!r}"
        raise DocFormatError(msg)
    name = str(data["name"])
    return DocEntry(
        doc_type=doc_type,
        name=name,
        parent_id=parent_id,
        description=data.get("description"),
        meta=_source_meta(data.get("meta"), name),
        deprecated=bool(data.get("deprecated", False)),
        access=_enum_value(Access, data.get("access"), name, Access.PUBLIC),
        type=_type_tokens(data.get("type"), name),
        nullable=bool(data.get("nullable", False)),
        optional=bool(data.get("optional", False)),
        scope=_enum_value(Scope, data.get("scope"), name, None),
        examples=_examples(data.get("examples"), name),
    )


# -----------------------------
# Builders
# -----------------------------


def _build_children(
    graph: DocGraph,
    records: list[dict[str, Any]] | None,
    parent_id: int,
    builder: ChildBuilder,
) -> list[DocEntry] | None:
    """Build one owned collection; None when the record has no such key."""
    if records is None:
        return None
    children = []
    seen: set[str] = set()
    for record in records:
        child = builder(graph, record, parent_id)
        key = child.name.lower()
        if key in seen:
            logger.warning(
                "Duplicate %s %r under %r; lookups resolve to the first one",
                child.doc_type.value,
                child.name,
                graph.entry(parent_id).name,
            )
        seen.add(key)
        children.append(child)
    return children


def _build_param(graph: DocGraph, data: dict[str, Any], parent_id: int) -> DocEntry:
    entry = _new_entry(data, DocType.PARAM, parent_id)
    graph.register(entry)
    return entry


def _build_prop(graph: DocGraph, data: dict[str, Any], parent_id: int) -> DocEntry:
    entry = _new_entry(data, DocType.PROP, parent_id)
    graph.register(entry)
    return entry


def _build_method(graph: DocGraph, data: dict[str, Any], parent_id: int) -> DocEntry:
    entry = _new_entry(data, DocType.METHOD, parent_id)
    entry.returns, entry.returns_type = _returns(data.get("returns"), entry.name)
    entry_id = graph.register(entry)
    entry.params = _build_children(graph, data.get("params"), entry_id, _build_param)
    return entry


def _build_event(graph: DocGraph, data: dict[str, Any], parent_id: int) -> DocEntry:
    entry = _new_entry(data, DocType.EVENT, parent_id)
    entry_id = graph.register(entry)
    entry.params = _build_children(graph, data.get("params"), entry_id, _build_param)
    return entry


def _build_constructor(
    graph: DocGraph,
    data: dict[str, Any],
    parent_id: int,
) -> DocEntry:
    data = {"name": graph.entry(parent_id).name, **data}
    entry = _new_entry(data, DocType.CONSTRUCTOR, parent_id)
    entry_id = graph.register(entry)
    entry.params = _build_children(graph, data.get("params"), entry_id, _build_param)
    return entry


def _build_container(
    graph: DocGraph,
    data: dict[str, Any],
    doc_type: DocType,
) -> DocEntry:
    entry = _new_entry(data, doc_type, None)
    entry.extends = data.get("extends") or None
    entry.implements = data.get("implements") or None
    entry.abstract = bool(data.get("abstract", False))
    entry_id = graph.register(entry)

    construct = data.get("construct")
    if construct is not None and not isinstance(construct, dict):
        msg = f"Constructor of {entry.name!r} must be a mapping"
        raise DocFormatError(msg)
    if construct:
        entry.construct = _build_constructor(graph, construct, entry_id)
    entry.props = _build_children(graph, data.get("props"), entry_id, _build_prop)
    entry.methods = _build_children(graph, data.get("methods"), entry_id, _build_method)
    entry.events = _build_children(graph, data.get("events"), entry_id, _build_event)
    return entry


def _build_typedef(graph: DocGraph, data: dict[str, Any]) -> DocEntry:
    """Typedefs own properties only; params and returns in the record are ignored."""
    entry = _new_entry(data, DocType.TYPEDEF, None)
    entry_id = graph.register(entry)
    entry.props = _build_children(graph, data.get("props"), entry_id, _build_prop)
    return entry
