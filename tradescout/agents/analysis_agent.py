"""AnalysisAgent: strategic attendance plan for the current search results."""

from __future__ import annotations

import logging
from typing import Any

from tradescout.agents.base import BaseAgent
from tradescout.analysis.aggregator import build_analysis_outcome
from tradescout.models.outcomes import AnalysisOutcome

logger = logging.getLogger(__name__)


class AnalysisAgent(BaseAgent):
    """Rank found events against a user profile and schedule preparation backwards."""

    name = "AnalysisAgent"
    version = "1.0.0"

    def run(self, context: Any, prior_narrative: str, user_profile: str) -> AnalysisOutcome:
        """Request the strategic analysis.

        Args:
            context: TradeScoutSession with config, llm_client and query_builder.
            prior_narrative: Narrative of the current SearchOutcome.
            user_profile: Business size and goals.

        Returns:
            AnalysisOutcome with the plan text.
        """
        cfg = context.config
        prompt = context.query_builder.build_analysis_prompt(prior_narrative, user_profile)
        logger.info(
            "AnalysisAgent: requesting plan (thinking budget %d)", cfg.analysis_thinking_budget
        )
        response = context.llm_client.generate(
            prompt,
            model=cfg.analysis_model,
            thinking_budget=cfg.analysis_thinking_budget,
        )
        return build_analysis_outcome(response.text)
