"""Icon sets used when rendering report summaries."""

from typing import Literal

IconStyle = Literal["octicons", "emojis"]

ICONS: dict[str, dict[str, str]] = {
    "octicons": {
        "failed": "stop",
        "passed": "check-circle",
        "flaky": "alert",
        "skipped": "skip",
        "stats": "pulse",
        "duration": "clock",
        "link": "link-external",
        "report": "package",
        "commit": "git-pull-request",
    },
    "emojis": {
        "failed": "❌",
        "passed": "✅",
        "flaky": "⚠️",
        "skipped": "⏭️",
        "stats": "📊",
        "duration": "⏱️",
        "link": "🔗",
        "report": "📋",
        "commit": "🔀",
    },
}

ICON_COLORS = {
    "failed": "da3633",
    "passed": "3fb950",
    "flaky": "d29922",
    "skipped": "0967d9",
}
DEFAULT_ICON_COLOR = "abb4bf"

OCTICONS_URL = "https://icongr.am/octicons/{name}.svg?size=14&color={color}"


def icon_for(category: str, style: IconStyle = "octicons") -> str:
    """Return the markdown glyph for a category in the given icon style.

    Args:
        category: Status or stat name (e.g., "failed", "duration")
        style: Icon style key

    Returns:
        Emoji or markdown image; empty string for unknown categories

    Raises:
        ValueError: If the icon style is unknown

    """
    if style not in ICONS:
        raise ValueError(
            f"Unknown icon style: {style}. Must be one of: {', '.join(ICONS)}"
        )

    icon = ICONS[style].get(category)
    if not icon:
        return ""

    if style == "emojis":
        return icon

    color = ICON_COLORS.get(category, DEFAULT_ICON_COLOR)
    url = OCTICONS_URL.format(name=icon, color=color)
    return f"![{category}]({url})"
