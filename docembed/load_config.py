"""Logic for loading and merging configuration files."""

import copy
import logging
from pathlib import Path
from typing import Any

import yaml

from docembed.deep_merge import deep_merge
from docembed.doc_type import RepoProfile
from docembed.render_options import RenderSettings

logger = logging.getLogger(__name__)

DEFAULT_CONFIG: dict[str, Any] = {
    "docs": {
        "base_docs_url": None,
        "repo_url": None,
        "repo_profile": RepoProfile.SCROLL_TO.value,
        "title": "Documentation",
        "branch": "main",
    },
    "render": {
        "description_limit": 1000,
        "inline_columns": 3,
        "code_language": "js",
        "constructor_namespace": "",
        "exclude_private_elements": False,
    },
    "embed": {
        "color": 0x2296F3,
        "author_url": None,
        "icon_url": None,
    },
}


def load_config(path: str | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults."""
    config = copy.deepcopy(DEFAULT_CONFIG)
    if path:
        p = Path(path)
        if p.exists():
            user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
            config = deep_merge(config, user_config)
            logger.info("Loaded config from %s", p)
        else:
            logger.warning("Config file not found: %s. Using defaults.", p)
    return config


def _int_or_default(value: Any, default: int) -> int:
    return default if value is None else int(value)


def settings_from_config(config: dict[str, Any]) -> RenderSettings:
    """Build render settings from the 'docs', 'render' and 'embed' sections."""
    docs = config.get("docs") or {}
    render = config.get("render") or {}
    embed = config.get("embed") or {}
    return RenderSettings(
        description_limit=_int_or_default(render.get("description_limit"), 1000),
        inline_columns=_int_or_default(render.get("inline_columns"), 3),
        code_language=str(render.get("code_language") or "js"),
        constructor_namespace=str(render.get("constructor_namespace") or ""),
        title=str(docs.get("title") or "Documentation"),
        branch=str(docs.get("branch") or "main"),
        color=_int_or_default(embed.get("color"), 0x2296F3),
        author_url=embed.get("author_url"),
        icon_url=embed.get("icon_url"),
    )
