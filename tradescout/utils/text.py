"""Text processing utilities for Trade Scout.

Pure functions for markdown stripping, EPC detection and file-name
sanitization. All functions are stateless with no I/O or external calls.
"""

from __future__ import annotations

import re
from typing import List, Optional

# "Relevant EPC: <name>" line the search prompt asks the model to lead with
_EPC_PATTERN = re.compile(r"Relevant EPC: (.*?)(?:\n|$)", re.IGNORECASE)

# Numbered or dashed list items whose title is in bold, e.g. "1. **Gulfood 2027**"
_LIST_TITLE_PATTERN = re.compile(r"^[\d-]+\.\s\*\*(.*?)\*\*")

_BOLD_PATTERN = re.compile(r"\*\*(.*?)\*\*")
_NON_ALNUM_PATTERN = re.compile(r"[^A-Za-z0-9]")

# C0 control characters other than tab, newline and carriage return; not valid in XML 1.0
_CONTROL_CHAR_PATTERN = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f]")


def clean_markdown(text: str) -> str:
    """Strip bold and heading markers so text can be inserted verbatim.

    Args:
        text: A line or block of model-generated markdown.

    Returns:
        Text without ``**`` bold markers or ``#`` heading runs, trimmed.
    """
    text = _BOLD_PATTERN.sub(r"\1", text)
    text = text.replace("###", "").replace("##", "")
    return text.strip()


def strip_control_chars(text: str) -> str:
    """Remove control characters that document formats cannot store."""
    return _CONTROL_CHAR_PATTERN.sub("", text)


def is_heading_line(line: str) -> bool:
    """Return True if a markdown line is a level-2 (or deeper) heading."""
    return line.strip().startswith("##")


def extract_relevant_epc(text: str) -> Optional[str]:
    """Return the council named on the ``Relevant EPC:`` line, if any.

    Args:
        text: Search narrative text.

    Returns:
        The trimmed council name, or None when the line is absent.
    """
    if not text:
        return None
    match = _EPC_PATTERN.search(text)
    if not match:
        return None
    return match.group(1).strip() or None


def extract_likely_event_names(text: str) -> List[str]:
    """Pick bolded list-item titles out of a narrative.

    Used when no structured payload could be parsed, so the venue lookup can
    still be offered for events named in the free text.

    Args:
        text: Search narrative text.

    Returns:
        Event names in order of appearance.
    """
    names: List[str] = []
    for line in text.split("\n"):
        match = _LIST_TITLE_PATTERN.match(line)
        if match and match.group(1):
            names.append(match.group(1))
    return names


def sanitize_filename_component(value: str, max_chars: int = 20) -> str:
    """Keep only ASCII letters and digits, truncated to max_chars.

    Args:
        value: Raw user input, e.g. a product name.
        max_chars: Maximum length of the returned string.

    Returns:
        Alphanumeric-only string, possibly empty.
    """
    return _NON_ALNUM_PATTERN.sub("", value)[:max_chars]
