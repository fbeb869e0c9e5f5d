"""Error types raised while loading documentation input."""


class DocFormatError(ValueError):
    """Raised when generator output violates the documented input contract."""
