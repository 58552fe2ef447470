"""Multi-backend LLM client for Trade Scout.

Provides a backend-agnostic generate() interface that dispatches to Gemini
(google-genai), the Anthropic API or Ollama depending on ScoutConfig.llm_backend.

All agent code must call LLMClient.generate(): never import a provider SDK directly.

Design rules:
- Grounding (web search, maps retrieval) and thinking budgets are Gemini
  features; the text-only backends ignore them.
- No retries: a failed call is logged and re-raised to the caller once.
- SDK clients are created lazily on first use.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, List, Optional, Sequence, Tuple

logger = logging.getLogger(__name__)

# Grounding tool identifiers accepted by generate()
GROUNDING_WEB = "google_search"
GROUNDING_MAPS = "google_maps"


@dataclass
class LLMResponse:
    """Text reply plus the raw grounding chunks that support it."""

    text: str = ""
    grounding_chunks: List[Any] = field(default_factory=list)


class LLMClient:
    """Backend-agnostic LLM client.

    Args:
        backend: LLM backend name ("gemini", "anthropic" or "ollama").
        api_key: Gemini API key (from environment).
        anthropic_model: Anthropic model ID.
        anthropic_api_key: Anthropic API key (from environment).
        ollama_model: Ollama model name.
        ollama_host: Ollama server URL.
        max_tokens: Output token budget for the text-only backends.
    """

    def __init__(
        self,
        backend: str = "gemini",
        api_key: Optional[str] = None,
        anthropic_model: str = "claude-sonnet-4-6",
        anthropic_api_key: Optional[str] = None,
        ollama_model: str = "gemma3:27b",
        ollama_host: str = "http://localhost:11434",
        max_tokens: int = 4096,
    ) -> None:
        self.backend = backend.lower()
        self.api_key = api_key
        self.anthropic_model = anthropic_model
        self.anthropic_api_key = anthropic_api_key
        self.ollama_model = ollama_model
        self.ollama_host = ollama_host
        self.max_tokens = max_tokens
        self._gemini_client: Optional[Any] = None
        self._anthropic_client: Optional[Any] = None
        self._ollama_client: Optional[Any] = None

    @classmethod
    def from_config(cls, cfg: Any) -> "LLMClient":
        """Build a client from a ScoutConfig."""
        return cls(
            backend=cfg.llm_backend,
            api_key=cfg.api_key,
            anthropic_model=cfg.anthropic_model,
            anthropic_api_key=cfg.anthropic_api_key,
            ollama_model=cfg.ollama_model,
            ollama_host=cfg.ollama_host,
            max_tokens=cfg.llm_max_tokens,
        )

    # ── Lazy SDK initialisation ───────────────────────────────────────────────

    def _get_gemini_client(self) -> Any:
        """Lazily initialize and return the google-genai client."""
        if self._gemini_client is None:
            try:
                from google import genai  # type: ignore[import]
            except ImportError:
                raise ImportError(
                    "google-genai package is required for the Gemini backend. "
                    "Install with: pip install google-genai"
                )
            self._gemini_client = genai.Client(api_key=self.api_key or "")
        return self._gemini_client

    def _get_anthropic_client(self) -> Any:
        """Lazily initialize and return the Anthropic client."""
        if self._anthropic_client is None:
            try:
                import anthropic  # type: ignore[import]
            except ImportError:
                raise ImportError(
                    "anthropic package is required for the Anthropic backend. "
                    "Install with: pip install anthropic"
                )
            self._anthropic_client = anthropic.Anthropic(api_key=self.anthropic_api_key)
        return self._anthropic_client

    def _get_ollama_client(self) -> Any:
        """Lazily initialize and return the Ollama client."""
        if self._ollama_client is None:
            try:
                import ollama  # type: ignore[import]
            except ImportError:
                raise ImportError(
                    "ollama package is required for the Ollama backend. "
                    "Install with: pip install ollama"
                )
            self._ollama_client = ollama.Client(host=self.ollama_host)
        return self._ollama_client

    # ── Backend calls ─────────────────────────────────────────────────────────

    def _build_gemini_config(
        self,
        grounding: Sequence[str],
        lat_lng: Optional[Tuple[float, float]],
        thinking_budget: Optional[int],
    ) -> Any:
        """Translate generic request options into a GenerateContentConfig."""
        from google.genai import types  # type: ignore[import]

        kwargs: dict = {}
        tools = []
        if GROUNDING_WEB in grounding:
            tools.append(types.Tool(google_search=types.GoogleSearch()))
            kwargs["response_modalities"] = ["TEXT"]
        if GROUNDING_MAPS in grounding:
            tools.append(types.Tool(google_maps=types.GoogleMaps()))
        if tools:
            kwargs["tools"] = tools
        if lat_lng is not None:
            kwargs["tool_config"] = types.ToolConfig(
                retrieval_config=types.RetrievalConfig(
                    lat_lng=types.LatLng(latitude=lat_lng[0], longitude=lat_lng[1])
                )
            )
        if thinking_budget:
            kwargs["thinking_config"] = types.ThinkingConfig(thinking_budget=thinking_budget)
        return types.GenerateContentConfig(**kwargs)

    def _call_gemini(
        self,
        prompt: str,
        model: str,
        grounding: Sequence[str],
        lat_lng: Optional[Tuple[float, float]],
        thinking_budget: Optional[int],
    ) -> LLMResponse:
        """Execute a call against the Gemini API.

        Returns:
            LLMResponse with the reply text and first-candidate grounding chunks.
        """
        client = self._get_gemini_client()
        config = self._build_gemini_config(grounding, lat_lng, thinking_budget)
        response = client.models.generate_content(model=model, contents=prompt, config=config)

        chunks: List[Any] = []
        candidates = getattr(response, "candidates", None) or []
        if candidates:
            metadata = getattr(candidates[0], "grounding_metadata", None)
            if metadata is not None:
                chunks = list(getattr(metadata, "grounding_chunks", None) or [])
        return LLMResponse(text=response.text or "", grounding_chunks=chunks)

    def _call_anthropic(self, prompt: str) -> LLMResponse:
        """Execute a call against the Anthropic API (no grounding)."""
        client = self._get_anthropic_client()
        response = client.messages.create(
            model=self.anthropic_model,
            max_tokens=self.max_tokens,
            messages=[{"role": "user", "content": prompt}],
        )
        text = ""
        if response.content and len(response.content) > 0:
            text = response.content[0].text or ""
        return LLMResponse(text=text)

    def _call_ollama(self, prompt: str) -> LLMResponse:
        """Execute a call against the Ollama API (no grounding)."""
        client = self._get_ollama_client()
        response = client.chat(
            model=self.ollama_model,
            messages=[{"role": "user", "content": prompt}],
            options={"num_predict": self.max_tokens},
        )
        text = ""
        if response and hasattr(response, "message") and response.message:
            text = response.message.content or ""
        return LLMResponse(text=text)

    def generate(
        self,
        prompt: str,
        model: Optional[str] = None,
        grounding: Optional[Sequence[str]] = None,
        lat_lng: Optional[Tuple[float, float]] = None,
        thinking_budget: Optional[int] = None,
    ) -> LLMResponse:
        """Execute a single LLM call.

        Args:
            prompt: User prompt string.
            model: Gemini model identifier (ignored by the other backends).
            grounding: Grounding tools to enable (GROUNDING_WEB / GROUNDING_MAPS).
            lat_lng: Optional coordinates biasing map retrieval.
            thinking_budget: Optional thinking token budget.

        Returns:
            LLMResponse with text and grounding chunks.

        Raises:
            Exception: Whatever the backend raised; the call is not retried.
        """
        grounding = list(grounding or [])
        try:
            if self.backend == "gemini":
                if not model:
                    raise ValueError("A model identifier is required for the Gemini backend")
                return self._call_gemini(prompt, model, grounding, lat_lng, thinking_budget)

            if grounding or lat_lng or thinking_budget:
                logger.debug(
                    "LLMClient: backend %s ignores grounding/thinking options", self.backend
                )
            if self.backend == "anthropic":
                return self._call_anthropic(prompt)
            if self.backend == "ollama":
                return self._call_ollama(prompt)
            raise ValueError(f"Unknown LLM backend: {self.backend!r}")
        except Exception as exc:
            logger.error("LLM call failed (backend=%s, model=%s): %s", self.backend, model, exc)
            raise
