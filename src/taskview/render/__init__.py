from .checklist import format_checklist, format_checklist_item
from .criteria import align_acceptance_criteria, extract_and_format_acceptance_criteria
from .code_paths import (
    extract_code_paths,
    is_code_path,
    style_code_path,
    transform_code_paths,
    transform_code_paths_plain,
)
from .status import (
    DEFAULT_STATUS_STYLE,
    STATUS_STYLES,
    format_status_tag,
    format_status_with_icon,
    get_status_color,
    get_status_icon,
    get_status_style,
)
from .headings import format_heading, get_heading_style
from .task_view import (
    TUI_CHECKLIST_OPTIONS,
    format_task_plain_text,
    render_task,
    render_task_body,
)

__all__ = [
    "format_checklist_item",
    "format_checklist",
    "align_acceptance_criteria",
    "extract_and_format_acceptance_criteria",
    "is_code_path",
    "extract_code_paths",
    "style_code_path",
    "transform_code_paths",
    "transform_code_paths_plain",
    "STATUS_STYLES",
    "DEFAULT_STATUS_STYLE",
    "get_status_style",
    "get_status_color",
    "get_status_icon",
    "format_status_with_icon",
    "format_status_tag",
    "get_heading_style",
    "format_heading",
    "TUI_CHECKLIST_OPTIONS",
    "render_task_body",
    "format_task_plain_text",
    "render_task",
]
