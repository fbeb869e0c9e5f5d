"""Data models for per-render options and graph-wide render settings."""

from dataclasses import dataclass


@dataclass(frozen=True)
class RenderOptions:
    """Options a caller passes with a single render."""

    exclude_private_elements: bool = False


@dataclass(frozen=True)
class RenderSettings:
    """Graph-wide presentation settings, usually built from config."""

    description_limit: int = 1000
    inline_columns: int = 3
    code_language: str = "js"
    constructor_namespace: str = ""  # e.g. "Discord" -> new Discord.Client()
    title: str = "Documentation"
    branch: str = "main"
    color: int = 0x2296F3
    author_url: str | None = None
    icon_url: str | None = None
