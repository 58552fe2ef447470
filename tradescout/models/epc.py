"""Export Promotion Council categories.

The search narrative names the relevant council in free text; match_epc_category
maps that text back onto a known council when possible.
"""

from __future__ import annotations

import re
from enum import Enum
from typing import Optional


class EPCCategory(str, Enum):
    """Indian Export Promotion Councils surfaced in search narratives."""

    APEDA = "APEDA (Agricultural & Processed Food Products)"
    EEPC = "EEPC India (Engineering Export Promotion Council)"
    GJEPC = "GJEPC (Gem & Jewellery Export Promotion Council)"
    CHEMEXCIL = "CHEMEXCIL (Basic Chemicals, Cosmetics & Dyes)"
    CLE = "CLE (Council for Leather Exports)"
    EPCH = "EPCH (Export Promotion Council for Handicrafts)"
    PHARMEXCIL = "PHARMEXCIL (Pharmaceuticals)"
    SEPC = "SEPC (Services Export Promotion Council)"
    TEPC = "TEPC (Telecom Equipment and Services)"
    TEXPROCIL = "TEXPROCIL (Cotton Textiles)"
    OTHER = "Other / Not Sure"


def match_epc_category(text: Optional[str]) -> EPCCategory:
    """Return the council whose acronym appears in text, or OTHER.

    Args:
        text: Free-text council name, e.g. "Council for Leather Exports (CLE)".

    Returns:
        The matching EPCCategory, EPCCategory.OTHER when nothing matches.
    """
    if not text:
        return EPCCategory.OTHER
    for category in EPCCategory:
        if category is EPCCategory.OTHER:
            continue
        if re.search(rf"\b{category.name}\b", text, re.IGNORECASE):
            return category
    return EPCCategory.OTHER
