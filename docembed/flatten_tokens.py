"""Logic for flattening nested type-token arrays."""

from typing import Any


def flatten_tokens(value: Any) -> list[str]:
    """Flatten arbitrarily nested token lists, depth-first, into one list."""
    if value is None:
        return []
    if not isinstance(value, (list, tuple)):
        return [value]
    out: list[Any] = []
    for v in value:
        out.extend(flatten_tokens(v))
    return out
