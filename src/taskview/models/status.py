"""Display styles for task statuses and headings."""

from dataclasses import dataclass


@dataclass(frozen=True)
class StatusStyle:
    """Icon glyph and color name used to draw a status label."""

    icon: str
    color: str


@dataclass(frozen=True)
class HeadingStyle:
    color: str
    bold: bool = False
