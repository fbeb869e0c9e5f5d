"""Utility for generating Markdown code blocks."""


def md_codeblock(lang: str, code: str) -> str:
    """Generate a fenced Markdown code block around ``code`` as given."""
    return f"```{lang}\n{code}\n```"


def md_name_list(names: list[str]) -> str:
    """Render names as space-separated inline code spans."""
    return " ".join(f"`{n}`" for n in names)
