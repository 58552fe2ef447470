"""Logging utilities for Trade Scout.

Provides YAML-based logging configuration and session-id context injection.
All loggers are namespaced under 'tradescout'.
"""

from __future__ import annotations

import logging
import logging.config
import os
from pathlib import Path
from typing import Any, MutableMapping, Optional

import yaml


def configure_logging(
    config_path: Optional[str] = None,
    log_level: Optional[str] = None,
) -> None:
    """Configure logging from the YAML configuration file.

    Falls back to basicConfig if the YAML file is not found.

    Args:
        config_path: Path to logging.yaml (defaults to config/logging.yaml).
        log_level: Override log level (e.g., "DEBUG", "INFO", "WARNING").
    """
    if config_path is None:
        config_path = str(Path(__file__).parent.parent.parent / "config" / "logging.yaml")

    if os.path.exists(config_path):
        with open(config_path, "r", encoding="utf-8") as f:
            cfg = yaml.safe_load(f)

        if log_level and "loggers" in cfg:
            for logger_cfg in cfg["loggers"].values():
                logger_cfg["level"] = log_level.upper()

        logging.config.dictConfig(cfg)
    else:
        logging.basicConfig(
            level=getattr(logging, (log_level or "INFO").upper(), logging.INFO),
            format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        )


def get_logger(name: str) -> logging.Logger:
    """Get a namespaced logger under 'tradescout'.

    Args:
        name: Module or component name (e.g., "agents.search_agent").

    Returns:
        Logger instance with full 'tradescout.<name>' namespace.
    """
    if name.startswith("tradescout"):
        return logging.getLogger(name)
    return logging.getLogger(f"tradescout.{name}")


class SessionContextAdapter(logging.LoggerAdapter):
    """Logger adapter that prefixes every message with the session id.

    Usage:
        logger = get_session_logger("session", session_id="a1b2c3d4")
        logger.info("Search started")
        # Output: [INFO] tradescout.session: [a1b2c3d4] Search started
    """

    def process(
        self, msg: str, kwargs: MutableMapping[str, Any]
    ) -> tuple[str, MutableMapping[str, Any]]:
        session_id = self.extra.get("session_id", "unknown")
        return f"[{session_id}] {msg}", kwargs


def get_session_logger(name: str, session_id: str) -> SessionContextAdapter:
    """Get a session-aware logger adapter.

    Args:
        name: Module or component name.
        session_id: Short identifier of the owning TradeScoutSession.

    Returns:
        LoggerAdapter that prefixes all messages with [session_id].
    """
    return SessionContextAdapter(get_logger(name), {"session_id": session_id})
