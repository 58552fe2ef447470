"""Unit tests for tradescout.utils.text and tradescout.utils.date_utils."""

from __future__ import annotations

from datetime import date, datetime, timezone

import pytest

from tradescout.utils.date_utils import epoch_millis, format_long_date
from tradescout.utils.text import (
    clean_markdown,
    extract_likely_event_names,
    extract_relevant_epc,
    is_heading_line,
    sanitize_filename_component,
    strip_control_chars,
)


# ── Markdown ─────────────────────────────────────────────────────────────────────

class TestCleanMarkdown:
    def test_strips_bold(self):
        assert clean_markdown("1. **Gulfood** in Dubai") == "1. Gulfood in Dubai"

    def test_strips_headings(self):
        assert clean_markdown("## Calendar Plan") == "Calendar Plan"
        assert clean_markdown("### Step 1") == "Step 1"

    def test_plain_text_untouched(self):
        assert clean_markdown("  plain  ") == "plain"

    def test_heading_detection(self):
        assert is_heading_line("## Plan")
        assert is_heading_line("  ### Sub")
        assert not is_heading_line("# Title")
        assert not is_heading_line("Plain")


# ── EPC extraction ───────────────────────────────────────────────────────────────

class TestExtractRelevantEpc:
    def test_reads_first_line(self):
        text = "Relevant EPC: Council for Leather Exports (CLE)\nMore text"
        assert extract_relevant_epc(text) == "Council for Leather Exports (CLE)"

    def test_case_insensitive_and_last_line(self):
        assert extract_relevant_epc("intro\nrelevant epc: APEDA") == "APEDA"

    def test_absent(self):
        assert extract_relevant_epc("No council mentioned") is None
        assert extract_relevant_epc("") is None


# ── Event name detection ─────────────────────────────────────────────────────────

def test_extract_likely_event_names():
    text = "Intro\n1. **Gulfood 2027**\n   - Dubai\n2. **Anuga**: Cologne\n- not numbered **x**\n10. **SIAL**"
    assert extract_likely_event_names(text) == ["Gulfood 2027", "Anuga", "SIAL"]


def test_extract_likely_event_names_none():
    assert extract_likely_event_names("No list here") == []


def test_strip_control_chars_keeps_whitespace():
    assert strip_control_chars("a\x00b\x0bc\x0cd\x1fe\tf\ng\rh") == "abcde\tf\ng\rh"


# ── File names ───────────────────────────────────────────────────────────────────

@pytest.mark.parametrize(
    "raw, expected",
    [
        ("Tea & Spices!!", "TeaSpices"),
        ("Leather Bags", "LeatherBags"),
        ("Very Long Product Name Beyond Limit", "VeryLongProductNameB"),
        ("!!!", ""),
    ],
)
def test_sanitize_filename_component(raw, expected):
    assert sanitize_filename_component(raw) == expected


# ── Dates ────────────────────────────────────────────────────────────────────────

def test_format_long_date():
    assert format_long_date(date(2026, 10, 19)) == "October 19, 2026"
    assert format_long_date(date(2027, 3, 5)) == "March 5, 2027"


def test_epoch_millis():
    moment = datetime(2026, 10, 19, 0, 0, 0, 500000, tzinfo=timezone.utc)
    assert epoch_millis(moment) == 1792368000500
