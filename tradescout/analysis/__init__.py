"""Trade Scout reply parsing, prompt building and result assembly."""

from tradescout.analysis.aggregator import (
    build_analysis_outcome,
    build_search_outcome,
    build_venue_outcome,
    parse_grounding_chunks,
)
from tradescout.analysis.query_builder import QueryBuilder
from tradescout.analysis.response_parser import extract_events, split_response

__all__ = [
    "QueryBuilder",
    "split_response",
    "extract_events",
    "build_search_outcome",
    "build_analysis_outcome",
    "build_venue_outcome",
    "parse_grounding_chunks",
]
