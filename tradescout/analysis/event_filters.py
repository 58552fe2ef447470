"""Derived views over a search outcome.

Type filtering, card badge categories and citation selection used when the
results are presented. No model calls and no mutation of the outcome.
"""

from __future__ import annotations

from typing import Iterable, List, Sequence

from config.defaults import ALL_TYPES
from tradescout.models.events import CitationChunk, EventRecord


def unique_event_types(events: Iterable[EventRecord]) -> List[str]:
    """Return distinct non-empty event types in first-seen order."""
    seen: List[str] = []
    for event in events:
        if event.type and event.type not in seen:
            seen.append(event.type)
    return seen


def filter_events_by_type(
    events: Sequence[EventRecord],
    selected_type: str = ALL_TYPES,
) -> List[EventRecord]:
    """Return events whose type equals selected_type (exact match).

    Args:
        events: Events of the current search outcome.
        selected_type: A type label, or ALL_TYPES for no filtering.

    Returns:
        Filtered events in input order.
    """
    if selected_type == ALL_TYPES:
        return list(events)
    return [e for e in events if e.type == selected_type]


def event_badge(event_type: str) -> str:
    """Classify an event type into a badge category.

    Returns:
        "delegation", "exhibition" or "other".
    """
    lowered = (event_type or "").lower()
    if "delegation" in lowered:
        return "delegation"
    if "exhibition" in lowered:
        return "exhibition"
    return "other"


def citations_of_kind(citations: Iterable[CitationChunk], kind: str) -> List[CitationChunk]:
    """Select citations of one kind ("web" or "map")."""
    return [c for c in citations if c.kind == kind]
