"""
Environment-driven render settings.

NO_COLOR        any non-empty value disables styling
TASKVIEW_PLAIN  1/true/yes/on forces plain output, 0/false/no/off forces styling
Otherwise output is styled only when the target stream is a terminal.
"""

import os
import sys
from typing import Mapping, Optional, TextIO

_TRUTHY = frozenset({"1", "true", "yes", "on"})
_FALSY = frozenset({"0", "false", "no", "off"})


def _parse_flag(raw: Optional[str]) -> Optional[bool]:
    """Parse an on/off environment value; None when unset or unrecognised."""
    if raw is None:
        return None
    value = raw.strip().lower()
    if value in _TRUTHY:
        return True
    if value in _FALSY:
        return False
    return None


def should_style_output(
    stream: Optional[TextIO] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> bool:
    """Decide between tagged terminal output and plain text."""
    env = os.environ if environ is None else environ
    if env.get("NO_COLOR"):
        return False
    plain = _parse_flag(env.get("TASKVIEW_PLAIN"))
    if plain is not None:
        return not plain
    stream = sys.stdout if stream is None else stream
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())
