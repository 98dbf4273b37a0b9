"""
Status label styling.

Statuses form a small closed vocabulary. Unknown labels, including casing
variants such as "done", fall back to DEFAULT_STATUS_STYLE instead of raising.
"""

from typing import Dict

from ..models.status import StatusStyle

STATUS_STYLES: Dict[str, StatusStyle] = {
    "Done": StatusStyle(icon="✔", color="green"),
    "In Progress": StatusStyle(icon="◒", color="yellow"),
    "Blocked": StatusStyle(icon="●", color="red"),
    "To Do": StatusStyle(icon="○", color="white"),
    "Review": StatusStyle(icon="◆", color="blue"),
    "Testing": StatusStyle(icon="▣", color="cyan"),
}

DEFAULT_STATUS_STYLE = StatusStyle(icon="○", color="white")


def get_status_style(status: str) -> StatusStyle:
    return STATUS_STYLES.get(status, DEFAULT_STATUS_STYLE)


def get_status_color(status: str) -> str:
    return get_status_style(status).color


def get_status_icon(status: str) -> str:
    return get_status_style(status).icon


def format_status_with_icon(status: str) -> str:
    """'✔ Done', '◒ In Progress', ..."""
    return f"{get_status_icon(status)} {status}"


def format_status_tag(status: str) -> str:
    """Iconised status wrapped in its color tag, e.g. '{green-fg}✔ Done{/}'."""
    return f"{{{get_status_color(status)}-fg}}{format_status_with_icon(status)}{{/}}"
