"""Renderer-independent content of an exported trade report."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import date
from typing import List, Optional, Sequence

from config.defaults import ANALYSIS_PLACEHOLDER, EPC_PLACEHOLDER
from tradescout.models.events import EventRecord
from tradescout.utils.text import extract_relevant_epc, strip_control_chars


@dataclass
class ReportContent:
    """Everything both report renderers need, resolved once."""

    product: str
    generated_on: str
    identified_epc: str
    events: List[EventRecord] = field(default_factory=list)
    analysis_text: str = ANALYSIS_PLACEHOLDER
    narrative_text: str = ""


def compose_report_content(
    product: str,
    narrative_text: str,
    events: Optional[Sequence[EventRecord]] = None,
    analysis_text: Optional[str] = None,
    generated_on: Optional[date] = None,
) -> ReportContent:
    """Resolve placeholders and the EPC line for a report.

    Control characters in model text are removed here so both renderers
    receive identical, storable content.

    Args:
        product: Product/service the search was run for.
        narrative_text: Search narrative (markdown).
        events: Structured events; may be empty.
        analysis_text: Analysis narrative; ANALYSIS_PLACEHOLDER when absent.
        generated_on: Report date; defaults to today.

    Returns:
        ReportContent ready for rendering.
    """
    generated_on = generated_on or date.today()
    narrative_text = strip_control_chars(narrative_text or "")
    return ReportContent(
        product=strip_control_chars(product),
        generated_on=generated_on.isoformat(),
        identified_epc=extract_relevant_epc(narrative_text) or EPC_PLACEHOLDER,
        events=[_clean_event(e) for e in events or []],
        analysis_text=strip_control_chars(analysis_text or "") or ANALYSIS_PLACEHOLDER,
        narrative_text=narrative_text,
    )


def _clean_event(event: EventRecord) -> EventRecord:
    return replace(
        event,
        event_name=strip_control_chars(event.event_name),
        date=strip_control_chars(event.date),
        location=strip_control_chars(event.location),
        type=strip_control_chars(event.type),
        description=_optional_text(event.description),
        url=_optional_text(event.url),
    )


def _optional_text(value: Optional[str]) -> Optional[str]:
    return strip_control_chars(value) if value is not None else None
