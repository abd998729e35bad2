"""shields.io badge URLs for a maturity level."""

from urllib.parse import quote

BADGE_STYLES = ("flat", "plastic", "for-the-badge")


def badge_color(level: int) -> str:
    if level <= 2:
        return "red"
    if level <= 4:
        return "yellow"
    if level <= 6:
        return "green"
    return "blue"


def badge_url(level: int, style: str = "flat") -> str:
    """Build the shields.io static badge URL for ``level``.

    Raises:
        ValueError: If ``style`` is not a supported badge style
    """
    if style not in BADGE_STYLES:
        raise ValueError(f"Unknown badge style: {style!r}. Choose from: {', '.join(BADGE_STYLES)}")
    label = quote("context frame", safe="")
    message = quote(f"level {level}", safe="")
    return (
        f"https://img.shields.io/badge/{label}-{message}-{badge_color(level)}"
        f"?style={quote(style, safe='')}"
    )


def badge_markdown(level: int, style: str = "flat") -> str:
    return f"![Context Frame]({badge_url(level, style)})"
