"""Trade Scout: ScoutConfig and environment-based configuration loading.

All runtime configuration flows through ScoutConfig. API keys come exclusively
from environment variables.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Optional

from dotenv import load_dotenv

from config.defaults import (
    ANALYSIS_MODEL,
    ANALYSIS_THINKING_BUDGET,
    ANTHROPIC_MODEL,
    DEFAULT_LOG_LEVEL,
    EXPORT_DIR,
    GEOLOCATION_TIMEOUT,
    GEOLOCATION_URL,
    LLM_BACKEND,
    LLM_DEFAULT_MAX_TOKENS,
    OLLAMA_HOST,
    OLLAMA_MODEL,
    SEARCH_MODEL,
    VENUE_MODEL,
)

# Load .env file if present; silently skip if missing
load_dotenv()


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


@dataclass
class ScoutConfig:
    """Single configuration object shared by the session and all agents."""

    # ── LLM backend ───────────────────────────────────────────────────────────
    llm_backend: str = field(default_factory=lambda: os.getenv("LLM_BACKEND", LLM_BACKEND))
    search_model: str = field(default_factory=lambda: os.getenv("SEARCH_MODEL", SEARCH_MODEL))
    analysis_model: str = field(
        default_factory=lambda: os.getenv("ANALYSIS_MODEL", ANALYSIS_MODEL)
    )
    venue_model: str = field(default_factory=lambda: os.getenv("VENUE_MODEL", VENUE_MODEL))
    analysis_thinking_budget: int = ANALYSIS_THINKING_BUDGET
    anthropic_model: str = field(
        default_factory=lambda: os.getenv("ANTHROPIC_MODEL", ANTHROPIC_MODEL)
    )
    ollama_model: str = field(default_factory=lambda: os.getenv("OLLAMA_MODEL", OLLAMA_MODEL))
    ollama_host: str = field(default_factory=lambda: os.getenv("OLLAMA_HOST", OLLAMA_HOST))
    llm_max_tokens: int = LLM_DEFAULT_MAX_TOKENS

    # ── API credentials (from environment only) ────────────────────────────────
    api_key: Optional[str] = field(
        default_factory=lambda: os.getenv("API_KEY") or os.getenv("GEMINI_API_KEY")
    )
    anthropic_api_key: Optional[str] = field(
        default_factory=lambda: os.getenv("ANTHROPIC_API_KEY")
    )

    # ── Geolocation ────────────────────────────────────────────────────────────
    use_geolocation: bool = field(default_factory=lambda: _env_flag("USE_GEOLOCATION", True))
    geolocation_url: str = field(
        default_factory=lambda: os.getenv("GEOLOCATION_URL", GEOLOCATION_URL)
    )
    geolocation_timeout: float = GEOLOCATION_TIMEOUT

    # ── Output and logging ─────────────────────────────────────────────────────
    export_dir: str = field(default_factory=lambda: os.getenv("EXPORT_DIR", EXPORT_DIR))
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL))

    def __post_init__(self) -> None:
        self.llm_backend = self.llm_backend.lower()

    @property
    def has_credentials(self) -> bool:
        """True when the active backend has the credential it needs."""
        if self.llm_backend == "gemini":
            return bool(self.api_key)
        if self.llm_backend == "anthropic":
            return bool(self.anthropic_api_key)
        return True
