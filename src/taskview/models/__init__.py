from .checklist import (
    DEFAULT_FORMAT_OPTIONS,
    ChecklistItem,
    FormatOptions,
    OptionsLike,
    bracket_column,
    resolve_options,
)
from .status import HeadingStyle, StatusStyle
from .task import TaskCard

__all__ = [
    "ChecklistItem",
    "FormatOptions",
    "OptionsLike",
    "DEFAULT_FORMAT_OPTIONS",
    "resolve_options",
    "bracket_column",
    "StatusStyle",
    "HeadingStyle",
    "TaskCard",
]
