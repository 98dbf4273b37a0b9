from .patterns import (
    BACKTICKED_PATH,
    CHECKBOX_LINE,
    CHECKBOX_PREFIX,
    has_checkbox_prefix,
    iter_backticked,
    match_checkbox_line,
    strip_checkbox_prefix,
)
from .checklist import parse_checkbox_line, parse_checkbox_lines
from .sections import extract_description_section, extract_section, find_heading

__all__ = [
    "CHECKBOX_LINE",
    "CHECKBOX_PREFIX",
    "BACKTICKED_PATH",
    "match_checkbox_line",
    "has_checkbox_prefix",
    "strip_checkbox_prefix",
    "iter_backticked",
    "parse_checkbox_line",
    "parse_checkbox_lines",
    "find_heading",
    "extract_section",
    "extract_description_section",
]
