"""
Acceptance-criteria rendering.

Criteria sections mix checkbox lines with free-form notes. Checkbox lines are
re-rendered through the checklist formatter; notes keep their text but get
the same leading padding so they line up with the brackets.
"""

import logging
from typing import List, Optional

from ..models.checklist import OptionsLike, resolve_options
from ..parsers.checklist import parse_checkbox_line
from ..parsers.sections import extract_section
from .checklist import format_checklist_item

log = logging.getLogger(__name__)

ACCEPTANCE_CRITERIA_TITLE = "Acceptance Criteria"


def align_acceptance_criteria(section_text: Optional[str], options: OptionsLike = None) -> List[str]:
    """
    Turn the body of a criteria section into aligned display lines.

    Blank lines are dropped; every other line yields exactly one output line.
    """
    if not section_text:
        return []
    opts = resolve_options(options)
    lines: List[str] = []
    for line in section_text.splitlines():
        stripped = line.strip()
        if not stripped:
            continue
        item = parse_checkbox_line(line)
        if item is not None:
            lines.append(format_checklist_item(item, opts))
        else:
            lines.append(f"{opts.padding}{stripped}")
    return lines


def extract_and_format_acceptance_criteria(document: Optional[str], options: OptionsLike = None) -> List[str]:
    """Find the Acceptance Criteria section of a task document and align it."""
    body = extract_section(document, ACCEPTANCE_CRITERIA_TITLE)
    if body is None:
        return []
    lines = align_acceptance_criteria(body, options)
    log.debug("Formatted %d acceptance criteria lines", len(lines))
    return lines
