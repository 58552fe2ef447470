"""Unit tests for tradescout.analysis.response_parser.

Covers:
- split_response: delimiter present, absent, repeated
- extract_events: payload array, fenced fallback, malformed JSON, empty cases
- Field mapping: camelCase keys, optional fields, non-object elements
"""

from __future__ import annotations

import pytest

from tradescout.analysis.response_parser import extract_events, split_response
from tradescout.models.events import EventRecord

DELIM = "___JSON_START___"


# ── split_response ───────────────────────────────────────────────────────────────

class TestSplitResponse:
    def test_splits_on_delimiter(self):
        display, payload = split_response(f"  Narrative here \n{DELIM}\n [1] ")
        assert display == "Narrative here"
        assert payload == "[1]"

    def test_no_delimiter_gives_empty_payload(self):
        display, payload = split_response("Only a narrative.")
        assert display == "Only a narrative."
        assert payload == ""

    def test_payload_stops_at_second_delimiter(self):
        _, payload = split_response(f"a{DELIM}b{DELIM}c")
        assert payload == "b"

    def test_empty_text(self):
        assert split_response("") == ("", "")

    def test_custom_delimiter(self):
        assert split_response("x||y", delimiter="||") == ("x", "y")


# ── extract_events ───────────────────────────────────────────────────────────────

class TestExtractEvents:
    def test_parses_payload_array(self, sample_search_reply):
        _, payload = split_response(sample_search_reply)
        events = extract_events(payload, sample_search_reply)
        assert len(events) == 2
        assert events[0].event_name == "Gulf Leather Expo 2027"
        assert events[0].url == "https://example.org/gulf-leather-expo"
        assert events[1].type == "Delegation"
        assert events[1].url is None

    def test_array_found_inside_surrounding_prose(self):
        payload = 'PART 2: JSON Data\n[{"eventName": "A", "date": "d", "location": "l", "type": "t"}]\nThanks!'
        events = extract_events(payload, payload)
        assert [e.event_name for e in events] == ["A"]

    def test_fenced_block_used_without_delimiter(self):
        text = (
            "Narrative\n```json\n"
            '[{"eventName": "B", "date": "d", "location": "l", "type": "Exhibition"}]\n```'
        )
        events = extract_events("", text)
        assert len(events) == 1
        assert events[0].event_name == "B"

    def test_fenced_block_used_when_payload_is_malformed(self):
        text = (
            "Narrative\n```json\n"
            '[{"eventName": "C", "date": "d", "location": "l", "type": "t"}]\n```\n'
            f"{DELIM}\n[{{broken json}}]"
        )
        _, payload = split_response(text)
        events = extract_events(payload, text)
        assert [e.event_name for e in events] == ["C"]

    @pytest.mark.parametrize(
        "payload",
        [
            "[{not json}]",
            '[{"eventName": "A",}]',
            '[{"eventName": "A", "date"',
        ],
        ids=["unquoted", "trailing-comma", "truncated"],
    )
    def test_malformed_payload_without_fence_returns_empty(self, payload):
        assert extract_events(payload, payload) == []

    def test_nothing_to_parse_returns_empty(self):
        assert extract_events("", "Plain narrative without data.") == []

    def test_non_array_fenced_json_returns_empty(self):
        text = '```json\n{"eventName": "X"}\n```'
        assert extract_events("", text) == []

    def test_missing_required_fields_default_to_empty(self):
        events = extract_events('[{"eventName": "Only name"}]', "")
        assert events == [EventRecord(event_name="Only name", date="", location="", type="")]

    def test_non_object_elements_skipped(self):
        payload = (
            '[{"eventName": "A", "date": "d", "location": "l", "type": "t"}, "stray",'
            ' {"eventName": "B", "date": "d", "location": "l", "type": "t"}]'
        )
        events = extract_events(payload, payload)
        assert [e.event_name for e in events] == ["A", "B"]

    def test_unknown_keys_ignored(self):
        payload = '[{"eventName": "A", "date": "d", "location": "l", "type": "t", "booth": 12}]'
        events = extract_events(payload, payload)
        assert events[0].to_dict()["eventName"] == "A"
        assert "booth" not in events[0].to_dict()

    def test_order_preserved(self):
        payload = (
            '[{"eventName": "First", "date": "", "location": "", "type": ""},'
            ' {"eventName": "Second", "date": "", "location": "", "type": ""}]'
        )
        assert [e.event_name for e in extract_events(payload, payload)] == ["First", "Second"]
