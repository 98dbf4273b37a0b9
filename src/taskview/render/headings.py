"""Heading styles for section titles in the task detail view."""

from ..models.status import HeadingStyle

_HEADING_STYLES = {
    1: HeadingStyle(color="bright-white", bold=True),
    2: HeadingStyle(color="cyan"),
    3: HeadingStyle(color="white"),
}


def get_heading_style(level: int) -> HeadingStyle:
    return _HEADING_STYLES.get(level, _HEADING_STYLES[3])


def format_heading(text: str, level: int) -> str:
    """
    Wrap heading text in color tags for its level.

    Tag names drop the dash of compound colors ("bright-white" becomes
    ``{brightwhite-fg}``).
    """
    style = get_heading_style(level)
    tag = style.color.replace("-", "")
    colored = f"{{{tag}-fg}}{text}{{/{tag}-fg}}"
    if style.bold:
        return f"{{bold}}{colored}{{/bold}}"
    return colored
