"""Trade Scout session: owner of all result slots for one user.

Holds four independent request/response slots (search, analysis, venue,
export), the type filter and the invalidation edges between them.

Lifecycle rules:
  - A new search clears the analysis, venue and export slots and resets the
    type filter before the search slot is set.
  - Analysis requires a successful search; export requires a search outcome.
  - A failed request marks only its own slot as ERROR; nothing is retried.
  - Requests run synchronously; the latest completed request wins.

Usage:
    from config.settings import ScoutConfig
    from tradescout.session import TradeScoutSession

    session = TradeScoutSession(ScoutConfig())
    session.search("Leather Bags", "Dubai")
    session.analyze("Mid-sized manufacturer looking for B2B distributors")
    session.export()
"""

from __future__ import annotations

import uuid
from pathlib import Path
from typing import Any, List, Optional, Sequence, Tuple

from config.defaults import ALL_TYPES, EXPORT_FORMATS
from config.settings import ScoutConfig
from tradescout.agents.analysis_agent import AnalysisAgent
from tradescout.agents.base import BaseAgent
from tradescout.agents.export_agent import ExportAgent
from tradescout.agents.search_agent import SearchAgent
from tradescout.agents.venue_agent import VenueAgent
from tradescout.analysis.event_filters import (
    citations_of_kind,
    event_badge,
    filter_events_by_type,
    unique_event_types,
)
from tradescout.analysis.query_builder import QueryBuilder
from tradescout.clients.geolocation_client import GeolocationClient
from tradescout.clients.llm_client import LLMClient
from tradescout.models.epc import EPCCategory, match_epc_category
from tradescout.models.events import CitationChunk, EventRecord
from tradescout.models.export import ExportResult
from tradescout.models.outcomes import (
    AnalysisOutcome,
    ResultSlot,
    SearchOutcome,
    VenueOutcome,
)
from tradescout.utils.logging_utils import get_session_logger
from tradescout.utils.text import extract_likely_event_names, extract_relevant_epc


class TradeScoutSession:
    """Session state and actions for one exporter.

    Args:
        config: Runtime configuration; built from the environment when omitted.
        llm_client: LLM client; built from config when omitted.
        geolocation_client: Coordinate lookup for venue requests.
        query_builder: Prompt builder.
        session_id: Identifier used in log lines.
    """

    def __init__(
        self,
        config: Optional[ScoutConfig] = None,
        llm_client: Optional[LLMClient] = None,
        geolocation_client: Optional[GeolocationClient] = None,
        query_builder: Optional[QueryBuilder] = None,
        session_id: Optional[str] = None,
    ) -> None:
        self.config = config or ScoutConfig()
        self.session_id = session_id or uuid.uuid4().hex[:8]
        self.logger = get_session_logger(__name__, self.session_id)

        if not self.config.has_credentials:
            self.logger.error(
                "No API key configured for backend %r: model calls will fail",
                self.config.llm_backend,
            )

        self.llm_client = llm_client or LLMClient.from_config(self.config)
        self.geolocation_client = geolocation_client or GeolocationClient(
            url=self.config.geolocation_url,
            timeout=self.config.geolocation_timeout,
        )
        self.query_builder = query_builder or QueryBuilder()

        # ── User inputs ───────────────────────────────────────────────────────
        self.product_query: str = ""
        self.location_query: str = ""
        self.user_profile: str = ""
        self.selected_event_for_map: str = ""
        self.selected_type: str = ALL_TYPES

        # ── Result slots ──────────────────────────────────────────────────────
        self.search_slot: ResultSlot[SearchOutcome] = ResultSlot()
        self.analysis_slot: ResultSlot[AnalysisOutcome] = ResultSlot()
        self.venue_slot: ResultSlot[VenueOutcome] = ResultSlot()
        self.export_slot: ResultSlot[ExportResult] = ResultSlot()

    # ── Actions ───────────────────────────────────────────────────────────────

    def search(self, product: str, location: str = "") -> ResultSlot[SearchOutcome]:
        """Search upcoming events; invalidates analysis, venue and export.

        A blank product is ignored.
        """
        if not product or not product.strip():
            self.logger.debug("Search ignored: product is blank")
            return self.search_slot

        self.product_query = product.strip()
        self.location_query = location or ""

        self.analysis_slot.clear()
        self.venue_slot.clear()
        self.export_slot.clear()
        self.selected_event_for_map = ""
        self.selected_type = ALL_TYPES

        return self._run_action(
            self.search_slot, SearchAgent(), self.product_query, self.location_query
        )

    def analyze(self, user_profile: str) -> ResultSlot[AnalysisOutcome]:
        """Request a strategic plan for the current search results.

        Ignored without a search outcome or with a blank profile.
        """
        search = self.search_result
        if search is None or not user_profile or not user_profile.strip():
            self.logger.debug("Analysis ignored: no search outcome or blank profile")
            return self.analysis_slot

        self.user_profile = user_profile
        return self._run_action(
            self.analysis_slot, AnalysisAgent(), search.narrative_text, user_profile
        )

    def locate(
        self,
        event_name: str,
        latitude: Optional[float] = None,
        longitude: Optional[float] = None,
    ) -> ResultSlot[VenueOutcome]:
        """Look up an event's venue, biased by the user's position when known.

        Ignored without a search outcome; venues are only offered for listed events.
        """
        if self.search_result is None:
            self.logger.debug("Venue lookup ignored: no search outcome")
            return self.venue_slot

        self.selected_event_for_map = event_name

        if (latitude is None or longitude is None) and self.config.use_geolocation:
            coords = self.geolocation_client.locate()
            if coords is not None:
                latitude, longitude = coords
            else:
                self.logger.warning("Proceeding with venue lookup without coordinates")
                latitude = longitude = None

        return self._run_action(self.venue_slot, VenueAgent(), event_name, latitude, longitude)

    def export(
        self,
        formats: Sequence[str] = EXPORT_FORMATS,
        output_dir: Optional[str | Path] = None,
    ) -> ResultSlot[ExportResult]:
        """Write the report documents; ignored without a search outcome."""
        if self.search_result is None:
            self.logger.debug("Export ignored: no search outcome")
            return self.export_slot
        return self._run_action(self.export_slot, ExportAgent(), formats, output_dir)

    def export_word(self, output_dir: Optional[str | Path] = None) -> ResultSlot[ExportResult]:
        return self.export(("docx",), output_dir)

    def export_pdf(self, output_dir: Optional[str | Path] = None) -> ResultSlot[ExportResult]:
        return self.export(("pdf",), output_dir)

    def select_type(self, event_type: str) -> List[EventRecord]:
        """Set the type filter and return the filtered events."""
        self.selected_type = event_type or ALL_TYPES
        return self.filtered_events

    def _run_action(self, slot: ResultSlot, agent: BaseAgent, *args: Any) -> ResultSlot:
        slot.start()
        try:
            result = agent.run_timed(self, *args)
        except Exception as exc:
            self.logger.warning("%s request failed, slot set to ERROR", agent.name)
            slot.fail(str(exc) or exc.__class__.__name__)
            return slot
        slot.succeed(result)
        return slot

    # ── Derived views ─────────────────────────────────────────────────────────

    @property
    def search_result(self) -> Optional[SearchOutcome]:
        return self.search_slot.result

    @property
    def analysis_result(self) -> Optional[AnalysisOutcome]:
        return self.analysis_slot.result

    @property
    def venue_result(self) -> Optional[VenueOutcome]:
        return self.venue_slot.result

    @property
    def relevant_epc(self) -> Optional[str]:
        """Council named on the narrative's ``Relevant EPC:`` line."""
        if self.search_result is None:
            return None
        return extract_relevant_epc(self.search_result.narrative_text)

    @property
    def epc_category(self) -> EPCCategory:
        return match_epc_category(self.relevant_epc)

    @property
    def has_structured_data(self) -> bool:
        return bool(self.search_result and self.search_result.events)

    @property
    def event_types(self) -> List[str]:
        if self.search_result is None:
            return []
        return unique_event_types(self.search_result.events)

    @property
    def filtered_events(self) -> List[EventRecord]:
        if self.search_result is None:
            return []
        return filter_events_by_type(self.search_result.events, self.selected_type)

    @property
    def badged_events(self) -> List[Tuple[EventRecord, str]]:
        """Filtered events paired with their badge: delegation, exhibition or other."""
        return [(event, event_badge(event.type)) for event in self.filtered_events]

    @property
    def detected_event_names(self) -> List[str]:
        """Event names read from the narrative when no structured data exists."""
        if self.search_result is None or self.has_structured_data:
            return []
        return extract_likely_event_names(self.search_result.narrative_text)

    @property
    def web_citations(self) -> List[CitationChunk]:
        if self.search_result is None:
            return []
        return citations_of_kind(self.search_result.citations, "web")

    @property
    def map_citations(self) -> List[CitationChunk]:
        if self.venue_result is None:
            return []
        return citations_of_kind(self.venue_result.citations, "map")
