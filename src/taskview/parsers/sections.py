"""
Heading-delimited section lookup for task documents.

A section starts at a heading whose title matches (case-insensitively, at
any level) and runs until the next heading of the same or a higher level.
Lines inside fenced code blocks are never treated as headings.
"""

import logging
import re
from typing import List, Optional, Tuple

log = logging.getLogger(__name__)

_HEADING = re.compile(r"^ {0,3}(#{1,6})(?:[ \t]+(.*?))?[ \t]*$")
_CLOSING_HASHES = re.compile(r"(?:^|[ \t]+)#+$")
_FENCE = re.compile(r"^ {0,3}(```|~~~)")


def find_heading(line: str) -> Optional[Tuple[int, str]]:
    """Return (level, title) or None if line is not an ATX heading."""
    m = _HEADING.match(line)
    if not m:
        return None
    title = _CLOSING_HASHES.sub("", m.group(2) or "").strip()
    return len(m.group(1)), title


def _section_bounds(lines: List[str], title: str) -> Optional[Tuple[int, int]]:
    wanted = title.strip().casefold()
    start: Optional[int] = None
    level = 0
    fence: Optional[str] = None

    for i, line in enumerate(lines):
        fence_match = _FENCE.match(line)
        if fence_match:
            marker = fence_match.group(1)
            if fence is None:
                fence = marker
            elif marker == fence:
                fence = None
            continue
        if fence is not None:
            continue

        heading = find_heading(line)
        if heading is None:
            continue
        heading_level, heading_title = heading
        if start is None:
            if heading_title.casefold() == wanted:
                start, level = i + 1, heading_level
        elif heading_level <= level:
            return start, i

    if start is None:
        return None
    return start, len(lines)


def extract_section(document: Optional[str], title: str) -> Optional[str]:
    """
    Return the raw body of the section called ``title``.

    Args:
        document: Full markdown text of a task file
        title: Heading text to look for, e.g. "Acceptance Criteria"

    Returns:
        The lines between the heading and the end of the section, joined
        with "\\n", or None when the document has no such heading.
    """
    if not document:
        return None
    lines = document.splitlines()
    bounds = _section_bounds(lines, title)
    if bounds is None:
        log.debug("No '%s' section found", title)
        return None
    start, end = bounds
    log.debug("Found '%s' section spanning lines %d-%d", title, start, end)
    return "\n".join(lines[start:end])


def extract_description_section(document: Optional[str]) -> Optional[str]:
    """Trimmed body of the Description section, or None if missing or empty."""
    body = extract_section(document, "Description")
    if body is None:
        return None
    return body.strip() or None
