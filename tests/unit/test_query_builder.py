"""Unit tests for tradescout.analysis.query_builder.

Covers:
- Location instruction: blank vs non-blank location
- Search prompt: date constraint, delimiter, JSON structure request
- Analysis and venue prompts
- Venue tool config coordinate handling
"""

from __future__ import annotations

from datetime import date

import pytest

from tradescout.analysis.query_builder import GLOBAL_SEARCH_INSTRUCTION, QueryBuilder

TODAY = date(2026, 10, 19)


@pytest.fixture
def builder():
    return QueryBuilder()


class TestLocationInstruction:
    def test_blank_location_searches_globally(self, builder):
        assert builder.build_location_instruction("") == GLOBAL_SEARCH_INSTRUCTION
        assert builder.build_location_instruction("   ") == GLOBAL_SEARCH_INSTRUCTION
        assert builder.build_location_instruction(None) == GLOBAL_SEARCH_INSTRUCTION

    def test_location_is_a_strict_filter(self, builder):
        instruction = builder.build_location_instruction(" Dubai ")
        assert '"Dubai"' in instruction
        assert "FILTER OUT ALL events" in instruction


class TestSearchPrompt:
    def test_global_search_prompt(self, builder):
        prompt = builder.build_search_prompt("Frozen Shrimp", "", today=TODAY)
        assert "October 19, 2026" in prompt
        assert "ONLY list events happening AFTER October 19, 2026" in prompt
        assert '"Frozen Shrimp"' in prompt
        assert GLOBAL_SEARCH_INSTRUCTION in prompt
        assert "FILTER OUT" not in prompt

    def test_located_search_prompt(self, builder):
        prompt = builder.build_search_prompt("Leather Bags", "Dubai", today=TODAY)
        assert '"Leather Bags"' in prompt
        assert 'in or near "Dubai"' in prompt
        assert GLOBAL_SEARCH_INSTRUCTION not in prompt

    def test_prompt_requests_epc_line_and_two_parts(self, builder):
        prompt = builder.build_search_prompt("Tea", today=TODAY)
        assert 'Start response with "Relevant EPC: [EPC Name]"' in prompt
        assert prompt.count("___JSON_START___") == 2
        assert '"eventName"' in prompt
        assert "DO NOT include any JSON code blocks in PART 1" in prompt

    def test_custom_delimiter(self):
        prompt = QueryBuilder(delimiter="<<<JSON>>>").build_search_prompt("Tea", today=TODAY)
        assert "<<<JSON>>>" in prompt
        assert "___JSON_START___" not in prompt


class TestAnalysisAndVenuePrompts:
    def test_analysis_prompt_embeds_context_and_profile(self, builder):
        prompt = builder.build_analysis_prompt("Relevant EPC: CLE\n1. Expo", "Startup seeking distributors")
        assert "Relevant EPC: CLE\n1. Expo" in prompt
        assert "Startup seeking distributors" in prompt
        assert "Senior Trade Consultant for Kinetick International" in prompt
        assert "Visa Application" in prompt
        assert "Work backwards from the event date" in prompt

    def test_consultant_firm_override(self):
        prompt = QueryBuilder(consultant_firm="Acme Trade").build_analysis_prompt("ctx", "goal")
        assert "Senior Trade Consultant for Acme Trade" in prompt

    def test_venue_prompt(self, builder):
        prompt = builder.build_venue_prompt("Gulfood 2027")
        assert prompt == (
            'Where is the "Gulfood 2027" taking place? Provide the address and venue details.'
        )


class TestVenueToolConfig:
    def test_finite_pair_passes_through(self, builder):
        assert builder.build_venue_tool_config(25.2, 55.27) == (25.2, 55.27)

    def test_out_of_range_values_not_checked(self, builder):
        assert builder.build_venue_tool_config(120.0, -400.0) == (120.0, -400.0)

    @pytest.mark.parametrize(
        "lat, lon",
        [(None, 55.0), (25.0, None), (None, None), (float("nan"), 1.0), (1.0, float("inf")), ("x", 1.0)],
    )
    def test_unusable_coordinates_give_none(self, builder, lat, lon):
        assert builder.build_venue_tool_config(lat, lon) is None
