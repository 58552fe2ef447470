"""Shared pytest fixtures for Trade Scout tests.

Conventions:
- Fixture data lives in tests/fixtures/ as static text/JSON files
- mock_llm_client returns canned replies without real API calls
- Geolocation is mocked at the requests.Session level
- No real external HTTP calls are made in any test
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict
from unittest.mock import MagicMock

import pytest

_FIXTURES_DIR = Path(__file__).parent / "fixtures"

SEARCH_MODEL = "test-search-model"
ANALYSIS_MODEL = "test-analysis-model"
VENUE_MODEL = "test-venue-model"

SAMPLE_ANALYSIS_REPLY = """## Top Recommendations
1. **Gulf Leather Expo 2027**: strongest buyer footfall for mid-sized makers.

## Actionable Calendar Plan
- Booth booking: by October 30, 2026
- Visa application: by November 20, 2026
"""

SAMPLE_VENUE_REPLY = "Dubai World Trade Centre, Sheikh Zayed Road, Trade Centre 2, Dubai."


# ── Raw fixture data loaders ─────────────────────────────────────────────────────

@pytest.fixture(scope="session")
def sample_search_reply() -> str:
    """Two-part search reply: narrative, delimiter, JSON array of 2 events."""
    return (_FIXTURES_DIR / "sample_search_reply.txt").read_text(encoding="utf-8")


@pytest.fixture(scope="session")
def grounding_chunks_raw() -> Dict[str, Any]:
    """Grounding chunks (REST/camelCase shape) for search and venue replies."""
    with open(_FIXTURES_DIR / "sample_grounding_chunks.json", encoding="utf-8") as f:
        return json.load(f)


# ── Config fixture ───────────────────────────────────────────────────────────────

@pytest.fixture
def test_scout_config(tmp_path):
    """ScoutConfig with fake credentials, no geolocation, temp export dir."""
    from config.settings import ScoutConfig

    return ScoutConfig(
        llm_backend="gemini",
        search_model=SEARCH_MODEL,
        analysis_model=ANALYSIS_MODEL,
        venue_model=VENUE_MODEL,
        api_key="test-key",
        use_geolocation=False,
        export_dir=str(tmp_path / "reports"),
        log_level="WARNING",
    )


# ── Mock LLM client ──────────────────────────────────────────────────────────────

@pytest.fixture
def mock_llm_client(sample_search_reply, grounding_chunks_raw):
    """Mock LLMClient whose generate() answers by model identifier.

    - search model   → sample_search_reply with web chunks
    - analysis model → SAMPLE_ANALYSIS_REPLY
    - venue model    → SAMPLE_VENUE_REPLY with maps chunks
    """
    from tradescout.clients.llm_client import LLMClient, LLMResponse

    client = MagicMock(spec=LLMClient)
    client.backend = "mock"

    def _fake_generate(prompt, model=None, **kwargs):
        if model == SEARCH_MODEL:
            return LLMResponse(sample_search_reply, list(grounding_chunks_raw["search"]))
        if model == ANALYSIS_MODEL:
            return LLMResponse(SAMPLE_ANALYSIS_REPLY)
        if model == VENUE_MODEL:
            return LLMResponse(SAMPLE_VENUE_REPLY, list(grounding_chunks_raw["venue"]))
        return LLMResponse("")

    client.generate.side_effect = _fake_generate
    return client


@pytest.fixture
def mock_geolocation_client():
    """Mock GeolocationClient returning fixed Dubai coordinates."""
    from tradescout.clients.geolocation_client import GeolocationClient

    client = MagicMock(spec=GeolocationClient)
    client.locate.return_value = (25.2048, 55.2708)
    return client


# ── Session fixture ──────────────────────────────────────────────────────────────

@pytest.fixture
def test_session(test_scout_config, mock_llm_client, mock_geolocation_client):
    """TradeScoutSession wired to mocks; no network access."""
    from tradescout.session import TradeScoutSession

    return TradeScoutSession(
        config=test_scout_config,
        llm_client=mock_llm_client,
        geolocation_client=mock_geolocation_client,
        session_id="test0001",
    )


# ── Response mock helper for geolocation HTTP tests ──────────────────────────────

@pytest.fixture
def http_response_factory():
    """Build a MagicMock standing in for requests.Response.

    Usage:
        def test_something(http_response_factory):
            resp = http_response_factory(json_data={"latitude": 1.0, "longitude": 2.0})
    """
    import requests

    def _make(status_code: int = 200, json_data: Any = None, json_error: Exception = None):
        resp = MagicMock()
        resp.status_code = status_code
        if status_code >= 400:
            resp.raise_for_status.side_effect = requests.HTTPError(f"HTTP {status_code}")
        else:
            resp.raise_for_status.return_value = None
        if json_error is not None:
            resp.json.side_effect = json_error
        else:
            resp.json.return_value = json_data
        return resp

    return _make
