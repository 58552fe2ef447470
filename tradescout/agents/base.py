"""BaseAgent ABC and AgentStatus constants for Trade Scout.

Every user action (search, analyze, locate, export) is carried out by one
agent implementing run(). The base class enforces the standard interface:
run, validate_output, reset.
"""

from __future__ import annotations

import logging
import time
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from tradescout.session import TradeScoutSession

logger = logging.getLogger(__name__)


class AgentStatus:
    """Status codes used in ExportResult.status."""

    OK = "OK"
    PARTIAL = "PARTIAL"


class BaseAgent(ABC):
    """Abstract base class for all Trade Scout agents.

    Agents hold no session data: inputs are passed to run() and the result is
    stored on the session by the caller. Collaborators (LLM client, query
    builder) are read from the session.
    """

    name: str = "BaseAgent"
    version: str = "1.0.0"

    @abstractmethod
    def run(self, context: "TradeScoutSession", *args: Any, **kwargs: Any) -> Any:
        """Execute the agent and return a typed result.

        Args:
            context: Owning session with configuration and collaborators.

        Returns:
            A typed outcome dataclass (subclass-specific).
        """

    def validate_output(self, result: Any) -> bool:
        """Post-run validation of structured output.

        Args:
            result: The typed result produced by run().

        Returns:
            True if output is valid, False if validation failed.
        """
        return result is not None

    def reset(self) -> None:
        """Clear internal state for re-use.

        Override if the agent keeps any mutable state between runs.
        """

    def run_timed(self, context: "TradeScoutSession", *args: Any, **kwargs: Any) -> Any:
        """Execute run() and log elapsed time.

        Returns:
            Result from run().
        """
        start = time.monotonic()
        try:
            result = self.run(context, *args, **kwargs)
            elapsed = time.monotonic() - start
            logger.info("Agent %s completed in %.2fs", self.name, elapsed)
            return result
        except Exception as exc:
            elapsed = time.monotonic() - start
            logger.error(
                "Agent %s failed after %.2fs: %s",
                self.name,
                elapsed,
                exc,
                exc_info=True,
            )
            raise
