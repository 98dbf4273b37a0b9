"""
Checklist rendering.

Every line produced for one set of options starts with the same padding, so
the opening brackets of a rendered checklist always share a column no matter
how long each item's text is.
"""

from typing import Iterable, List

from ..models.checklist import ChecklistItem, OptionsLike, resolve_options


def format_checklist_item(item: ChecklistItem, options: OptionsLike = None) -> str:
    """Render an item as ``padding + "[" + symbol + "] " + text``."""
    opts = resolve_options(options)
    return f"{opts.padding}[{opts.symbol_for(item.checked)}] {item.text}"


def format_checklist(items: Iterable[ChecklistItem], options: OptionsLike = None) -> List[str]:
    """Render each item on its own line, in order."""
    opts = resolve_options(options)
    return [format_checklist_item(item, opts) for item in items]
