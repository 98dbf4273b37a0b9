"""
Inline code-path handling.

Backticked spans that look like file paths (``src/cli.ts``, ``package.json``)
are pulled out of prose in terminal mode and shown on their own gray line
below it. Spans that look like code (``variable``, ``123``) stay inline.

Main API:
    is_code_path(content)             → bool
    extract_code_paths(text)          → List[str]
    style_code_path(path)             → str
    transform_code_paths(text)        → str   (terminal)
    transform_code_paths_plain(text)  → str   (no styling)
"""

import re
from typing import List, Optional, Tuple

from ..parsers.patterns import iter_backticked

PATH_STYLE_OPEN = "{gray-fg}"
PATH_STYLE_CLOSE = "{/gray-fg}"

_PATH_SEPARATOR = re.compile(r"[/\\]")
_FILE_EXTENSION = re.compile(r"\.[^\s/\\()]+$")
_NUMERIC = re.compile(r"^\d+(?:\.\d+)*$")
# A backticked span plus at most one blank before it
_SPAN_SEAM = re.compile(r"[ \t]?`([^`]+)`")
_INDENT = re.compile(r"^[ \t]*")


def is_code_path(content: str) -> bool:
    """True when content has a path separator or ends in a file extension."""
    if not content:
        return False
    if _PATH_SEPARATOR.search(content):
        return True
    if _NUMERIC.match(content):
        return False
    return _FILE_EXTENSION.search(content) is not None


def _path_spans(line: str) -> List[Tuple[str, str]]:
    return [(span, inner) for span, inner in iter_backticked(line) if is_code_path(inner)]


def extract_code_paths(text: Optional[str]) -> List[str]:
    """Inner text of every backticked path in text, left to right."""
    if not text:
        return []
    return [inner for _, inner in _path_spans(text)]


def style_code_path(path: str) -> str:
    return f"{PATH_STYLE_OPEN}`{path}`{PATH_STYLE_CLOSE}"


def _transform_line(line: str) -> List[str]:
    spans = _path_spans(line)
    if not spans:
        return [line]

    indent = _INDENT.match(line).group(0)
    prose = line[len(indent):]
    prose = _SPAN_SEAM.sub(lambda m: "" if is_code_path(m.group(1)) else m.group(0), prose)
    prose = prose.strip()

    out = [indent + prose] if prose else []
    out.extend(indent + style_code_path(inner) for _, inner in spans)
    return out


def transform_code_paths(text: Optional[str]) -> Optional[str]:
    """
    Move backticked paths onto their own styled lines.

    Each path follows the line it was taken from, in order. A line left empty
    by the removal is dropped; lines without paths are kept verbatim. None and
    "" are returned unchanged.
    """
    if not text:
        return text
    out: List[str] = []
    for line in text.split("\n"):
        # CRLF input keeps its "\r" on every line produced from a source line
        eol = "\r" if line.endswith("\r") else ""
        if eol:
            line = line[:-1]
        out.extend(part + eol for part in _transform_line(line))
    return "\n".join(out)


def transform_code_paths_plain(text: Optional[str]) -> Optional[str]:
    """Plain-output counterpart of transform_code_paths: paths stay inline."""
    return text
