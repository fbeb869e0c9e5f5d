"""Data models for presentation blocks (chat-message embeds)."""

from dataclasses import dataclass, field
from typing import Any

# Zero-width space: renders as an empty field name or value.
BLANK = "\u200b"


@dataclass
class EmbedField:
    """One named field of an embed."""

    name: str
    value: str
    inline: bool = False

    def to_dict(self) -> dict[str, Any]:
        """Convert to the wire shape; ``inline`` is only emitted when true."""
        out: dict[str, Any] = {"name": self.name, "value": self.value}
        if self.inline:
            out["inline"] = True
        return out


@dataclass
class Embed:
    """A presentation block: description, link target and ordered fields."""

    description: str = ""
    url: str | None = None
    title: str | None = None
    color: int | None = None
    author: dict[str, str] | None = None
    fields: list[EmbedField] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-serialisable mapping."""
        out: dict[str, Any] = {
            "description": self.description,
            "url": self.url,
            "fields": [f.to_dict() for f in self.fields],
        }
        if self.title is not None:
            out["title"] = self.title
        if self.color is not None:
            out["color"] = self.color
        if self.author:
            out["author"] = dict(self.author)
        return out
