"""Export file utilities for Trade Scout.

Handles report file naming, atomic byte writes and checksums.
No business logic: file I/O and naming only.
"""

from __future__ import annotations

import hashlib
import logging
import os
import tempfile
from datetime import datetime
from pathlib import Path
from typing import Optional

from config.defaults import BRAND_NAME, FILENAME_PRODUCT_MAX_CHARS
from tradescout.utils.date_utils import epoch_millis
from tradescout.utils.text import sanitize_filename_component

logger = logging.getLogger(__name__)


def report_filename(product: str, ext: str, now: Optional[datetime] = None) -> str:
    """Build ``<Brand>_Trade_Report_<product>_<epoch-ms>.<ext>``.

    Args:
        product: Raw product string; reduced to at most 20 alphanumerics.
        ext: File extension without the dot (e.g. "pdf").
        now: Moment used for the timestamp; defaults to the current time.

    Returns:
        File name (no directory).
    """
    safe_name = sanitize_filename_component(product, FILENAME_PRODUCT_MAX_CHARS)
    return f"{BRAND_NAME}_Trade_Report_{safe_name}_{epoch_millis(now)}.{ext}"


def save_bytes(data: bytes, path: str | Path) -> Path:
    """Atomically write bytes to a file.

    Uses a write-to-temp-then-rename strategy to prevent partial writes.
    Creates parent directories if they do not exist.

    Args:
        data: Content to write.
        path: Output file path.

    Returns:
        The written path.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    with tempfile.NamedTemporaryFile(
        mode="wb",
        dir=path.parent,
        delete=False,
        suffix=".tmp",
    ) as tmp:
        tmp.write(data)
        tmp_path = tmp.name

    try:
        os.replace(tmp_path, path)
    except OSError as exc:
        os.unlink(tmp_path)
        logger.error("Atomic rename failed for %s: %s", path, exc)
        raise

    logger.info("Exported %s (%d bytes)", path, len(data))
    return path


def file_checksum(path: str | Path) -> str:
    """Compute the SHA-256 hex digest of a file.

    Args:
        path: Path to the file.

    Returns:
        SHA-256 hex digest string, or empty string if the file is unreadable.
    """
    path = Path(path)
    if not path.exists():
        return ""
    try:
        sha = hashlib.sha256()
        with open(path, "rb") as f:
            for chunk in iter(lambda: f.read(65536), b""):
                sha.update(chunk)
        return sha.hexdigest()
    except OSError as exc:
        logger.warning("Checksum failed for %s: %s", path, exc)
        return ""
