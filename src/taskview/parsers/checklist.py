"""
Parser for markdown checkbox lines.

Main API:
    parse_checkbox_line(line)   → ChecklistItem | None
    parse_checkbox_lines(text)  → List[ChecklistItem]
"""

from typing import List, Optional

from ..models.checklist import ChecklistItem
from .patterns import match_checkbox_line


def parse_checkbox_line(line: str) -> Optional[ChecklistItem]:
    """
    Parse one markdown line into a ChecklistItem.

    Returns None for anything that is not a dash-bracket checkbox (plain
    bullets, headings, prose, ``[y]`` and other unknown states).
    """
    if not line:
        return None
    matched = match_checkbox_line(line)
    if matched is None:
        return None
    checked, rest = matched
    return ChecklistItem(text=rest.strip(), checked=checked)


def parse_checkbox_lines(text: Optional[str]) -> List[ChecklistItem]:
    """Parse every checkbox line in text, skipping all other lines."""
    if not text:
        return []
    items: List[ChecklistItem] = []
    for line in text.splitlines():
        item = parse_checkbox_line(line)
        if item is not None:
            items.append(item)
    return items
