"""Trade Scout agents: one per user action."""

from tradescout.agents.analysis_agent import AnalysisAgent
from tradescout.agents.base import AgentStatus, BaseAgent
from tradescout.agents.export_agent import ExportAgent
from tradescout.agents.search_agent import SearchAgent
from tradescout.agents.venue_agent import VenueAgent

__all__ = [
    "AgentStatus",
    "BaseAgent",
    "SearchAgent",
    "AnalysisAgent",
    "VenueAgent",
    "ExportAgent",
]
