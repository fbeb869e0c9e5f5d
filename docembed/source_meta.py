"""Data models for source locations."""

from dataclasses import dataclass


@dataclass(frozen=True)
class SourceMeta:
    """Where an entry was declared in the documented repository."""

    path: str  # directory relative to the repo root, e.g. src/client
    file: str
    line: int
