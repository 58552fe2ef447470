"""Trade Scout configuration package."""

from config.defaults import (
    ANALYSIS_MODEL,
    ANALYSIS_PLACEHOLDER,
    JSON_DELIMITER,
    LLM_BACKEND,
    SEARCH_MODEL,
    VENUE_MODEL,
)
from config.settings import ScoutConfig

__all__ = [
    "ScoutConfig",
    "JSON_DELIMITER",
    "ANALYSIS_PLACEHOLDER",
    "LLM_BACKEND",
    "SEARCH_MODEL",
    "ANALYSIS_MODEL",
    "VENUE_MODEL",
]
