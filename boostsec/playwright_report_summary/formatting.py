"""Formatting helpers shared by the summary renderer."""

from collections.abc import Sequence
from decimal import ROUND_HALF_UP, Decimal

SECOND = 1000
MINUTE = 60 * SECOND
HOUR = 60 * MINUTE
DAY = 24 * HOUR

TABLE_ALIGNMENT = [":---", ":---:", ":---:", ":---:"]


def n(label: str, count: float) -> str:
    """Pluralize a label by appending "s" unless count is exactly 1."""
    return label if count == 1 else f"{label}s"


def upper_case_first(text: str) -> str:
    """Uppercase the first character of a string."""
    return text[:1].upper() + text[1:]


def _format_number(value: float) -> str:
    if value == int(value):
        return str(int(value))
    return str(value)


def format_duration(milliseconds: float) -> str:
    """Format a millisecond count as a human readable duration.

    Args:
        milliseconds: Duration in milliseconds

    Returns:
        Comma-separated non-zero components, e.g. "2 minutes, 1.5 seconds".
        Zero gives an empty string.

    """
    remaining = milliseconds

    days = int(remaining // DAY)
    remaining %= DAY

    hours = int(remaining // HOUR)
    remaining %= HOUR

    minutes = int(remaining // MINUTE)
    remaining %= MINUTE

    seconds = float(
        (Decimal(str(remaining)) / SECOND).quantize(Decimal("0.1"), ROUND_HALF_UP)
    )

    parts = [
        (days, "day"),
        (hours, "hour"),
        (minutes, "minute"),
        (seconds, "second"),
    ]
    return ", ".join(
        f"{_format_number(value)} {n(label, value)}" for value, label in parts if value
    )


def render_markdown_table(
    rows: Sequence[Sequence[str]], headers: Sequence[str] | None = None
) -> str:
    """Render rows as a pipe-delimited markdown table.

    The first column is left aligned, the others centered. Only the first
    four columns get an alignment marker.
    """
    if not rows:
        return ""

    align = TABLE_ALIGNMENT[: len(rows[0])]
    lines = [list(headers)] if headers else []
    lines.append(align)
    lines.extend(list(row) for row in rows)
    return "\n".join(f"| {' | '.join(columns)} |" for columns in lines)
