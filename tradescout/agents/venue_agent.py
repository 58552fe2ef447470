"""VenueAgent: locate the venue of a named event with map grounding."""

from __future__ import annotations

import logging
from typing import Any, Optional

from tradescout.agents.base import BaseAgent
from tradescout.analysis.aggregator import build_venue_outcome
from tradescout.clients.llm_client import GROUNDING_MAPS
from tradescout.models.outcomes import VenueOutcome

logger = logging.getLogger(__name__)


class VenueAgent(BaseAgent):
    """Ask the model where an event takes place."""

    name = "VenueAgent"
    version = "1.0.0"

    def run(
        self,
        context: Any,
        event_name: str,
        latitude: Optional[float] = None,
        longitude: Optional[float] = None,
    ) -> VenueOutcome:
        """Look up one event's venue.

        Args:
            context: TradeScoutSession with config, llm_client and query_builder.
            event_name: Event to locate.
            latitude: Optional user latitude biasing map retrieval.
            longitude: Optional user longitude biasing map retrieval.

        Returns:
            VenueOutcome with the venue text and map citations.
        """
        cfg = context.config
        qb = context.query_builder
        prompt = qb.build_venue_prompt(event_name)
        lat_lng = qb.build_venue_tool_config(latitude, longitude)
        logger.info(
            "VenueAgent: locating %r (%s)",
            event_name,
            "with coordinates" if lat_lng else "no coordinates",
        )
        response = context.llm_client.generate(
            prompt,
            model=cfg.venue_model,
            grounding=[GROUNDING_MAPS],
            lat_lng=lat_lng,
        )
        return build_venue_outcome(event_name, response.text, response.grounding_chunks)
