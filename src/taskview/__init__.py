"""taskview - markdown-to-terminal rendering for task files."""

__version__ = "0.1.0"

from .models import ChecklistItem, FormatOptions, StatusStyle, TaskCard
from .parsers import (
    CHECKBOX_LINE,
    CHECKBOX_PREFIX,
    BACKTICKED_PATH,
    extract_section,
    parse_checkbox_line,
    parse_checkbox_lines,
)
from .render import (
    align_acceptance_criteria,
    extract_and_format_acceptance_criteria,
    extract_code_paths,
    format_checklist,
    format_checklist_item,
    format_heading,
    format_status_with_icon,
    get_status_color,
    get_status_icon,
    get_status_style,
    is_code_path,
    render_task,
    style_code_path,
    transform_code_paths,
    transform_code_paths_plain,
)
from .settings import should_style_output

__all__ = [
    "ChecklistItem",
    "FormatOptions",
    "StatusStyle",
    "TaskCard",
    "CHECKBOX_LINE",
    "CHECKBOX_PREFIX",
    "BACKTICKED_PATH",
    "parse_checkbox_line",
    "parse_checkbox_lines",
    "extract_section",
    "format_checklist_item",
    "format_checklist",
    "align_acceptance_criteria",
    "extract_and_format_acceptance_criteria",
    "is_code_path",
    "extract_code_paths",
    "style_code_path",
    "transform_code_paths",
    "transform_code_paths_plain",
    "get_status_style",
    "get_status_color",
    "get_status_icon",
    "format_status_with_icon",
    "format_heading",
    "render_task",
    "should_style_output",
]
