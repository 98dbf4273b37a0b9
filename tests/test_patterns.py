"""
Tests for parsers/patterns.py.

Covers:
- CHECKBOX_LINE: accepted marker variants, rejected shapes
- CHECKBOX_PREFIX: detection and stripping
- BACKTICKED_PATH: repeated scans are independent
"""

import sys
from pathlib import Path

# Add src to path so imports work without installation
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

import pytest

from taskview.parsers.patterns import (
    BACKTICKED_PATH,
    CHECKBOX_LINE,
    has_checkbox_prefix,
    iter_backticked,
    match_checkbox_line,
    strip_checkbox_prefix,
)


# ---------------------------------------------------------------------------
# CHECKBOX_LINE
# ---------------------------------------------------------------------------

class TestCheckboxLine:
    @pytest.mark.parametrize("line", [
        "- [x] Checked item",
        "  - [x] Indented checked item",
        "- [x]   Item with extra spaces",
        "-[x] No space after dash",
        "- [X] Upper-case mark",
        "- [ ] Unchecked item",
        "  - [ ] Indented unchecked item",
        "-[ ] No space after dash",
    ])
    def test_matches(self, line):
        assert CHECKBOX_LINE.match(line) is not None

    @pytest.mark.parametrize("line", [
        "Regular text",
        "- Regular bullet point",
        "- [ Missing closing bracket",
        "- [y] Invalid checkbox state",
        "[x] Missing dash prefix",
        "## Header",
        "-  [x] Two spaces after dash",
        "",
    ])
    def test_rejects(self, line):
        assert CHECKBOX_LINE.match(line) is None

    def test_match_returns_state_and_rest(self):
        assert match_checkbox_line("- [X]  done") == (True, "  done")
        assert match_checkbox_line("- [ ] todo") == (False, " todo")
        assert match_checkbox_line("plain") is None


# ---------------------------------------------------------------------------
# CHECKBOX_PREFIX
# ---------------------------------------------------------------------------

class TestCheckboxPrefix:
    @pytest.mark.parametrize("text", ["- [x] ", "- [ ] ", "-[x] ", "- [x]"])
    def test_detects_prefix(self, text):
        assert has_checkbox_prefix(text)

    def test_no_prefix(self):
        assert not has_checkbox_prefix("Some prose - [x] later")

    def test_strip(self):
        assert strip_checkbox_prefix("- [x] Ship it") == "Ship it"
        assert strip_checkbox_prefix("  -[ ]   Spaced") == "Spaced"

    def test_strip_leaves_other_lines(self):
        assert strip_checkbox_prefix("Regular text") == "Regular text"


# ---------------------------------------------------------------------------
# BACKTICKED_PATH
# ---------------------------------------------------------------------------

class TestBacktickedSpans:
    @pytest.mark.parametrize("text", [
        "`src/cli.ts`",
        "`package.json`",
        "`/Users/name/project/file.ts`",
        "`./relative/path.js`",
        "`../parent/file.md`",
        "`C:\\Windows\\file.exe`",
    ])
    def test_pattern_finds_span(self, text):
        assert BACKTICKED_PATH.search(text) is not None

    def test_multiple_spans_in_order(self):
        spans = list(iter_backticked("a `one` b `two` c"))
        assert spans == [("`one`", "one"), ("`two`", "two")]

    def test_repeated_scans_are_independent(self):
        text = "Check `src/cli.ts` and `package.json`"
        first = list(iter_backticked(text))
        second = list(iter_backticked(text))
        assert first == second
        assert len(first) == 2

    def test_partial_scan_does_not_leak(self):
        text = "`a.ts` `b.ts`"
        scan = iter_backticked(text)
        next(scan)
        assert [inner for _, inner in iter_backticked(text)] == ["a.ts", "b.ts"]

    def test_none_yields_nothing(self):
        assert list(iter_backticked(None)) == []

    def test_unclosed_backtick(self):
        assert list(iter_backticked("a `dangling span")) == []
