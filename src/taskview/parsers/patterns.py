"""
Shared textual patterns for task markdown.

The compiled patterns are module constants; Python pattern objects keep no
scan position between calls, and every helper here builds its own match or
iterator, so repeated scans never see each other's state.
"""

import re
from typing import Iterator, Optional, Tuple

# "- [x] text", "-[ ] text", "  - [X]   text"
CHECKBOX_LINE = re.compile(r"^\s*- ?\[([ xX])\](.*)$")

# Only the leading marker, with whatever whitespace follows it
CHECKBOX_PREFIX = re.compile(r"^\s*- ?\[[ xX]\]\s*")

# Any `span`; classification as a path happens in render.code_paths
BACKTICKED_PATH = re.compile(r"`([^`]+)`")

_CHECKED_MARKS = frozenset({"x", "X"})


def match_checkbox_line(line: str) -> Optional[Tuple[bool, str]]:
    """Return (checked, remaining text) or None if line is not a checkbox line."""
    m = CHECKBOX_LINE.match(line)
    if not m:
        return None
    return m.group(1) in _CHECKED_MARKS, m.group(2)


def has_checkbox_prefix(line: str) -> bool:
    return CHECKBOX_PREFIX.match(line) is not None


def strip_checkbox_prefix(line: str) -> str:
    """Remove a leading '- [x] ' / '- [ ] ' marker; other lines are returned as-is."""
    return CHECKBOX_PREFIX.sub("", line, count=1)


def iter_backticked(text: str) -> Iterator[Tuple[str, str]]:
    """
    Yield (span, inner) for every backticked span in text, left to right.

    ``span`` includes the backticks, ``inner`` does not.
    """
    for m in BACKTICKED_PATH.finditer(text or ""):
        yield m.group(0), m.group(1)
