"""Assembly of model replies into typed outcome envelopes.

Pure assembly: splits and extracts search replies, normalizes grounding
chunks into citations, and substitutes fixed texts for empty replies.
Grounding chunks may arrive as google-genai SDK objects or as plain dicts
(camelCase or snake_case keys); both are read the same way.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, List, Optional

from config.defaults import EMPTY_ANALYSIS_TEXT, EMPTY_SEARCH_TEXT, EMPTY_VENUE_TEXT
from tradescout.analysis.response_parser import extract_events, split_response
from tradescout.models.events import CitationChunk, MapCitation, ReviewSnippet, WebCitation
from tradescout.models.outcomes import AnalysisOutcome, SearchOutcome, VenueOutcome

logger = logging.getLogger(__name__)


def build_search_outcome(
    full_text: Optional[str],
    grounding_chunks: Optional[Iterable[Any]] = None,
) -> SearchOutcome:
    """Build a SearchOutcome from a raw search reply.

    Args:
        full_text: Model reply text; empty replies become EMPTY_SEARCH_TEXT.
        grounding_chunks: Raw grounding chunks returned with the reply.

    Returns:
        SearchOutcome with the narrative part, parsed events and citations.
    """
    text = full_text or EMPTY_SEARCH_TEXT
    display_part, json_part = split_response(text)
    events = extract_events(json_part, text)
    citations = parse_grounding_chunks(grounding_chunks)
    logger.info(
        "Search outcome: %d structured events | %d citations | delimiter %s",
        len(events),
        len(citations),
        "present" if json_part else "absent",
    )
    return SearchOutcome(narrative_text=display_part, events=events, citations=citations)


def build_analysis_outcome(text: Optional[str]) -> AnalysisOutcome:
    """Wrap an analysis reply, substituting a fixed text when empty."""
    return AnalysisOutcome(narrative_text=text or EMPTY_ANALYSIS_TEXT)


def build_venue_outcome(
    event_name: str,
    text: Optional[str],
    grounding_chunks: Optional[Iterable[Any]] = None,
) -> VenueOutcome:
    """Wrap a venue reply with its map citations."""
    return VenueOutcome(
        event_name=event_name,
        narrative_text=text or EMPTY_VENUE_TEXT,
        citations=parse_grounding_chunks(grounding_chunks),
    )


def parse_grounding_chunks(chunks: Optional[Iterable[Any]]) -> List[CitationChunk]:
    """Normalize raw grounding chunks into WebCitation / MapCitation records.

    A chunk carrying both a web and a maps entry yields two citations. Chunks
    with neither, or without a URI, are dropped.

    Args:
        chunks: SDK GroundingChunk objects or dicts; None is treated as empty.

    Returns:
        Citations in input order.
    """
    citations: List[CitationChunk] = []
    for chunk in chunks or []:
        web = _field(chunk, "web")
        if web is not None:
            uri = _field(web, "uri")
            if uri:
                citations.append(WebCitation(uri=str(uri), title=str(_field(web, "title") or "")))

        maps = _field(chunk, "maps")
        if maps is not None:
            uri = _field(maps, "uri")
            if uri:
                citations.append(
                    MapCitation(
                        uri=str(uri),
                        title=str(_field(maps, "title") or ""),
                        review_snippets=_parse_review_snippets(maps),
                    )
                )
    return citations


def _parse_review_snippets(maps: Any) -> List[ReviewSnippet]:
    snippets: List[ReviewSnippet] = []
    sources = _field(maps, "place_answer_sources", "placeAnswerSources")
    if sources is None:
        return snippets
    # The SDK exposes a single object; the REST payload exposes a list
    if not isinstance(sources, (list, tuple)):
        sources = [sources]
    for source in sources:
        for snippet in _field(source, "review_snippets", "reviewSnippets") or []:
            snippets.append(
                ReviewSnippet(
                    review_text=str(_field(snippet, "review_text", "reviewText", "review") or ""),
                    source_uri=str(
                        _field(snippet, "source_uri", "sourceUri", "google_maps_uri") or ""
                    ),
                )
            )
    return snippets


def _field(obj: Any, *names: str) -> Any:
    """Read the first present attribute or key among names."""
    if obj is None:
        return None
    for name in names:
        if isinstance(obj, dict):
            if obj.get(name) is not None:
                return obj[name]
        else:
            value = getattr(obj, name, None)
            if value is not None:
                return value
    return None
