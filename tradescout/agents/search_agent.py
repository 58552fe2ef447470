"""SearchAgent: find upcoming trade events for a product.

Sends the search prompt with web-search grounding, then splits and extracts
the reply into a SearchOutcome. Model failures propagate; extraction
failures degrade to an empty event list.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Any, Optional

from tradescout.agents.base import BaseAgent
from tradescout.analysis.aggregator import build_search_outcome
from tradescout.clients.llm_client import GROUNDING_WEB
from tradescout.models.outcomes import SearchOutcome

logger = logging.getLogger(__name__)


class SearchAgent(BaseAgent):
    """Query the model for upcoming events relevant to a product."""

    name = "SearchAgent"
    version = "1.0.0"

    def run(
        self,
        context: Any,
        product: str,
        location: Optional[str] = None,
        today: Optional[date] = None,
    ) -> SearchOutcome:
        """Run one event search.

        Args:
            context: TradeScoutSession with config, llm_client and query_builder.
            product: Product or service to search for.
            location: Optional location filter; blank means global.
            today: Override for the prompt date.

        Returns:
            SearchOutcome with narrative, events and web citations.
        """
        cfg = context.config
        prompt = context.query_builder.build_search_prompt(product, location, today=today)
        logger.info(
            "SearchAgent: searching events for %r (location=%r)", product, location or "global"
        )

        response = context.llm_client.generate(
            prompt,
            model=cfg.search_model,
            grounding=[GROUNDING_WEB],
        )
        return build_search_outcome(response.text, response.grounding_chunks)
