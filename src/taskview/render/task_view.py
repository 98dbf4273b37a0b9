"""
Task detail composition.

Puts the individual renderers together into the two views the board shows
for a selected task: the styled body used inside the terminal UI, and the
plain-text dump used when output is not a terminal.
"""

import logging
from typing import Iterable, List, Optional

from ..models.checklist import FormatOptions
from ..models.task import TaskCard
from ..parsers.sections import extract_description_section, extract_section
from ..settings import should_style_output
from .code_paths import transform_code_paths, transform_code_paths_plain
from .criteria import ACCEPTANCE_CRITERIA_TITLE, align_acceptance_criteria
from .headings import format_heading
from .status import format_status_tag, format_status_with_icon

log = logging.getLogger(__name__)

TUI_CHECKLIST_OPTIONS = FormatOptions(
    checked_symbol="{green-fg}✓{/}",
    unchecked_symbol="{gray-fg}○{/}",
    padding=" ",
)

NO_DESCRIPTION = "{gray-fg}No description provided{/}"
NO_CRITERIA = "{gray-fg}No acceptance criteria defined{/}"
RULE_WIDTH = 50


def render_task_body(document: Optional[str], fallback_criteria: Iterable[str] = ()) -> str:
    """
    Styled Description and Acceptance Criteria blocks of a task document.

    Args:
        document: Full markdown body of the task file
        fallback_criteria: Criteria already parsed by the storage layer,
            shown as bullets when the document has no criteria lines

    Returns:
        Tagged text ready for a tags-enabled terminal box
    """
    body: List[str] = [format_heading("Description", 2)]
    description = extract_description_section(document)
    body.append(transform_code_paths(description) if description else NO_DESCRIPTION)
    body.append("")

    body.append(format_heading(ACCEPTANCE_CRITERIA_TITLE, 2))
    criteria = align_acceptance_criteria(
        extract_section(document, ACCEPTANCE_CRITERIA_TITLE), TUI_CHECKLIST_OPTIONS
    )
    fallback = [text for text in fallback_criteria if text]
    if criteria:
        body.append(transform_code_paths("\n".join(criteria)))
    elif fallback:
        body.append(transform_code_paths("\n".join(f" • {text}" for text in fallback)))
    else:
        body.append(NO_CRITERIA)
    return "\n".join(body)


def _at(handle: str) -> str:
    return handle if handle.startswith("@") else f"@{handle}"


def format_task_plain_text(task: TaskCard, content: str) -> str:
    """Unstyled rendering of a task for pipes and redirected output."""
    lines = [task.header, "=" * RULE_WIDTH, ""]
    lines.append(f"Status: {format_status_with_icon(task.status)}")
    if task.assignee:
        lines.append(f"Assignee: {', '.join(_at(a) for a in task.assignee)}")
    if task.reporter:
        lines.append(f"Reporter: {_at(task.reporter)}")
    lines.append(f"Created: {task.created_date}")
    if task.updated_date:
        lines.append(f"Updated: {task.updated_date}")
    if task.labels:
        lines.append(f"Labels: {', '.join(task.labels)}")
    if task.milestone:
        lines.append(f"Milestone: {task.milestone}")
    if task.parent_task_id:
        lines.append(f"Parent: {task.parent_task_id}")
    if task.subtasks:
        lines.append(f"Subtasks: {len(task.subtasks)}")
    if task.dependencies:
        lines.append(f"Dependencies: {', '.join(task.dependencies)}")

    lines += ["", "Description:", "-" * RULE_WIDTH]
    lines.append(transform_code_paths_plain(task.description or "No description provided"))
    lines.append("")
    if task.acceptance_criteria:
        lines += ["Acceptance Criteria:", "-" * RULE_WIDTH]
        lines.extend(transform_code_paths_plain(c) for c in task.acceptance_criteria)
        lines.append("")
    lines += ["Content:", "-" * RULE_WIDTH]
    lines.append(transform_code_paths_plain(content or ""))
    return "\n".join(lines)


def render_task(task: TaskCard, content: str, styled: Optional[bool] = None) -> str:
    """Styled body or plain text for a task; ``styled=None`` asks the environment."""
    if styled is None:
        styled = should_style_output()
    log.debug("Rendering task %s (%s)", task.id, "styled" if styled else "plain")
    if not styled:
        return format_task_plain_text(task, content)
    header = [format_heading(task.header, 1), format_status_tag(task.status), ""]
    return "\n".join(header) + "\n" + render_task_body(content, task.acceptance_criteria)
