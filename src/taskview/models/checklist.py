"""
Checklist data models.

ChecklistItem is what the parser produces for one recognised checkbox line;
FormatOptions controls how the formatter renders it back. Both are immutable
so a single instance can be shared across repaints.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict


@dataclass(frozen=True)
class ChecklistItem:
    """A single checkbox line: its trimmed text and checked state."""

    text: str
    checked: bool = False


class FormatOptions(BaseModel):
    """
    Rendering options for checklist lines.

    Every field is optional and falls back to its documented default, so
    callers only pass the parts they want to change.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    checked_symbol: str = "x"
    unchecked_symbol: str = " "
    padding: str = " "

    def symbol_for(self, checked: bool) -> str:
        return self.checked_symbol if checked else self.unchecked_symbol


OptionsLike = Union[FormatOptions, Mapping[str, Any], None]

DEFAULT_FORMAT_OPTIONS = FormatOptions()


def resolve_options(options: OptionsLike = None, **overrides: Any) -> FormatOptions:
    """
    Merge partial overrides over the defaults, left to right.

    Args:
        options: None, a FormatOptions, or a mapping of field overrides
        **overrides: Final overrides; these win over ``options``

    Returns:
        A validated FormatOptions. The shared default is never modified.
    """
    if isinstance(options, FormatOptions):
        if not overrides:
            return options
        base = options.model_dump()
    else:
        base = dict(options or {})
    if not base and not overrides:
        return DEFAULT_FORMAT_OPTIONS
    return FormatOptions(**{**base, **overrides})


def bracket_column(options: Optional[FormatOptions] = None) -> int:
    """Column at which the opening bracket sits for the given options."""
    return len((options or DEFAULT_FORMAT_OPTIONS).padding)
