"""Logic for padding inline embed fields to whole rows."""

from docembed.embed import BLANK, EmbedField

DEFAULT_COLUMNS = 3


def inline_run_length(fields: list[EmbedField]) -> int:
    """Count the inline fields after the last non-inline field (or the start)."""
    count = 0
    for f in reversed(fields):
        if not f.inline:
            break
        count += 1
    return count


def pad_inline_fields(fields: list[EmbedField], columns: int = DEFAULT_COLUMNS) -> int:
    """Append blank inline fields until the trailing inline run fills its row.

    Assumes fields are appended group by group in layout order, so the
    trailing inline run is the group that was just added. Returns the number
    of padding fields appended.
    """
    missing = (columns - inline_run_length(fields) % columns) % columns
    for _ in range(missing):
        fields.append(EmbedField(name=BLANK, value=BLANK, inline=True))
    return missing
