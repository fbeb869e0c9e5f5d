"""Render a documentation entry as an embed, or export descriptors, as JSON."""

import argparse
import json
import logging
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from docembed.deep_merge import deep_merge
from docembed.errors import DocFormatError
from docembed.load_config import load_config
from docembed.load_docs import graph_from_config, load_docs_file
from docembed.render_options import RenderOptions
from docembed.search_entries import QUERY_SEP_RE, resolve_embed
from docembed.to_descriptor import export_graph, to_descriptor


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse CLI arguments."""
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "docs_file",
        type=Path,
        help="Documentation generator output (.json, .yml or .yaml)",
    )
    parser.add_argument(
        "query",
        nargs="?",
        help="Entry path such as Client, Client#login or Message.author.id",
    )
    parser.add_argument("--config", help="Path to configuration file")
    parser.add_argument(
        "--export",
        action="store_true",
        help="Print export descriptors instead of an embed",
    )
    parser.add_argument(
        "--exclude-private",
        action="store_true",
        help="Hide private properties and methods",
    )
    parser.add_argument("--base-docs-url", help="Override docs.base_docs_url")
    parser.add_argument("--repo-url", help="Override docs.repo_url")
    parser.add_argument(
        "--profile",
        choices=["scroll-to", "fragment"],
        help="Override docs.repo_profile",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser.parse_args(argv)


def _config_overrides(args: argparse.Namespace) -> dict[str, Any]:
    docs: dict[str, Any] = {}
    if args.base_docs_url:
        docs["base_docs_url"] = args.base_docs_url
    if args.repo_url:
        docs["repo_url"] = args.repo_url
    if args.profile:
        docs["repo_profile"] = args.profile
    return {"docs": docs} if docs else {}


def main(argv: Sequence[str] | None = None) -> int:
    """Load the documentation file and print the requested JSON."""
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if not args.docs_file.exists():
        msg = f"Documentation file not found: {args.docs_file}"
        raise SystemExit(msg)

    config = deep_merge(load_config(args.config), _config_overrides(args))
    try:
        graph = graph_from_config(load_docs_file(args.docs_file), config)
    except DocFormatError as e:
        msg = f"Invalid documentation input: {e}"
        raise SystemExit(msg) from e

    payload: Any
    if args.export:
        if args.query:
            elem = graph.get(*QUERY_SEP_RE.split(args.query))
            if elem is None:
                msg = f"No documentation found for: {args.query}"
                raise SystemExit(msg)
            payload = to_descriptor(elem, graph)
        else:
            payload = export_graph(graph)
    else:
        if not args.query:
            msg = "A query is required unless --export is given"
            raise SystemExit(msg)
        render = config.get("render") or {}
        exclude_private = args.exclude_private or bool(
            render.get("exclude_private_elements")
        )
        options = RenderOptions(exclude_private_elements=exclude_private)
        embed = resolve_embed(graph, args.query, options)
        if embed is None:
            msg = f"No documentation found for: {args.query}"
            raise SystemExit(msg)
        payload = embed.to_dict()

    print(json.dumps(payload, indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
