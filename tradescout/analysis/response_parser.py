"""Parsing of the two-part search reply returned by the model.

The search prompt asks for a narrative, then the literal delimiter
``___JSON_START___``, then a JSON array of events. Compliance is probabilistic,
so extraction searches in a fixed order and degrades to an empty list:

1. the first greedy ``[ {...} ]`` span inside the post-delimiter part;
2. a fenced ```` ```json ```` block anywhere in the full reply;
3. nothing.

Parse failures are logged and never propagate to the caller.
"""

from __future__ import annotations

import json
import logging
import re
from typing import Any, List, Optional, Tuple

from config.defaults import JSON_DELIMITER
from tradescout.models.events import EventRecord

logger = logging.getLogger(__name__)

# Greedy: from the first "[ {" to the last "} ]"
_ARRAY_PATTERN = re.compile(r"\[\s*\{[\s\S]*\}\s*\]")

# Non-greedy body of the first ```json fenced block
_FENCED_JSON_PATTERN = re.compile(r"```json\s*([\s\S]*?)\s*```")

_REQUIRED_FIELDS = (
    ("eventName", "event_name"),
    ("date", "date"),
    ("location", "location"),
    ("type", "type"),
)
_OPTIONAL_FIELDS = (
    ("description", "description"),
    ("url", "url"),
)


def split_response(text: str, delimiter: str = JSON_DELIMITER) -> Tuple[str, str]:
    """Split a search reply into its narrative and JSON parts.

    Args:
        text: Full model reply.
        delimiter: Literal separator token.

    Returns:
        ``(display_part, json_part)``, both trimmed. ``json_part`` is the text
        between the first delimiter and the next one (or the end), and is empty
        when the delimiter is absent.
    """
    parts = (text or "").split(delimiter)
    display_part = parts[0].strip()
    json_part = parts[1].strip() if len(parts) > 1 else ""
    return display_part, json_part


def extract_events(json_part: str, full_text: str) -> List[EventRecord]:
    """Extract structured events from a search reply.

    Args:
        json_part: Post-delimiter part from split_response (may be empty).
        full_text: The complete reply, used for the fenced-block fallback.

    Returns:
        Parsed events in model order; empty when nothing usable was found.
    """
    match = _ARRAY_PATTERN.search(json_part or "")
    if match:
        events = _parse_event_array(match.group(0), source="payload")
        if events is not None:
            return events

    fenced = _FENCED_JSON_PATTERN.search(full_text or "")
    if fenced and fenced.group(1):
        events = _parse_event_array(fenced.group(1), source="fenced block")
        if events is not None:
            return events

    logger.info("No structured event payload found: falling back to narrative only")
    return []


def _parse_event_array(raw: str, source: str) -> Optional[List[EventRecord]]:
    """Parse a JSON array of event objects.

    Args:
        raw: Candidate JSON text.
        source: Label used in log messages.

    Returns:
        List of EventRecord, or None if the text is not a JSON array.
    """
    try:
        data = json.loads(raw)
    except (json.JSONDecodeError, ValueError) as exc:
        logger.warning("Failed to parse event JSON from %s: %s", source, exc)
        return None

    if not isinstance(data, list):
        logger.warning("Event JSON from %s is %s, not an array", source, type(data).__name__)
        return None

    events: List[EventRecord] = []
    for item in data:
        event = _to_event_record(item)
        if event is not None:
            events.append(event)
    logger.debug("Parsed %d events from %s", len(events), source)
    return events


def _to_event_record(item: Any) -> Optional[EventRecord]:
    """Map one JSON element onto EventRecord; unknown keys are ignored."""
    if not isinstance(item, dict):
        logger.debug("Skipping non-object event element: %r", item)
        return None

    kwargs = {attr: _as_text(item.get(key)) or "" for key, attr in _REQUIRED_FIELDS}
    for key, attr in _OPTIONAL_FIELDS:
        kwargs[attr] = _as_text(item.get(key))
    return EventRecord(**kwargs)


def _as_text(value: Any) -> Optional[str]:
    if value is None:
        return None
    if isinstance(value, str):
        return value
    return str(value)
