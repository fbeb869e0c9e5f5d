"""Logic for capping free-text field bodies at the description limit."""

DEFAULT_DESCRIPTION_LIMIT = 1000
HEADER_LINK_SUFFIX = (
    "...\nDescription truncated. Click header link above to read full description."
)
PLAIN_SUFFIX = "...\nDescription truncated."


def full_text_suffix(url: str | None) -> str:
    """Suffix pointing at the canonical page holding the full text."""
    return f"...\nDescription truncated. View full description [here]({url})."


def truncate_text(
    text: str,
    suffix: str,
    limit: int = DEFAULT_DESCRIPTION_LIMIT,
) -> str:
    """Cut ``text`` to ``limit`` characters and append ``suffix`` when it overflows."""
    if len(text) <= limit:
        return text
    return text[:limit] + suffix
