"""Prompt construction for Trade Scout.

Builds the three natural-language prompts sent to the model: the event
search, the strategic analysis and the venue lookup. Every builder is a pure
function of its inputs; the current date is injected by the caller or
defaults to today.

Prompt rules:
- The search prompt must carry a strict "after today" constraint.
- A location filter is emitted only for a non-blank location; otherwise the
  model is told to search globally.
- The search prompt requests the two-part reply parsed by response_parser.
"""

from __future__ import annotations

import logging
import math
from datetime import date
from typing import Optional, Tuple

from config.defaults import COMPANY_NAME, JSON_DELIMITER
from tradescout.utils.date_utils import format_long_date

logger = logging.getLogger(__name__)

GLOBAL_SEARCH_INSTRUCTION = "Search for events globally."


class QueryBuilder:
    """Composes the search, analysis and venue prompts.

    Args:
        delimiter: Literal token separating narrative and JSON parts of the
            search reply.
        consultant_firm: Firm name used in the analysis persona.
    """

    def __init__(
        self,
        delimiter: str = JSON_DELIMITER,
        consultant_firm: str = COMPANY_NAME,
    ) -> None:
        self.delimiter = delimiter
        self.consultant_firm = consultant_firm

    def build_location_instruction(self, location: Optional[str]) -> str:
        """Return the location filter sentence for the search prompt.

        Args:
            location: Optional target location; blank means global.

        Returns:
            A strict filter naming the location, or the global-search instruction.
        """
        if location and location.strip():
            return (
                "CRITICAL INSTRUCTION: The user is ONLY interested in events taking "
                f'place in or near "{location.strip()}". FILTER OUT ALL events that '
                "are not in this location."
            )
        return GLOBAL_SEARCH_INSTRUCTION

    def build_search_prompt(
        self,
        product: str,
        location: Optional[str] = None,
        today: Optional[date] = None,
    ) -> str:
        """Build the upcoming-event search prompt.

        Args:
            product: Product or service the exporter deals in.
            location: Optional target location filter.
            today: Date treated as "today"; defaults to the current date.

        Returns:
            Prompt requesting a narrative, the delimiter, then a JSON array.
        """
        today_str = format_long_date(today)
        location_instruction = self.build_location_instruction(location)

        return f"""
Current Date: {today_str}.
I am an exporter dealing in: "{product.strip()}".

1. First, identify the specific Export Promotion Council (EPC) in India relevant to this product. Start response with "Relevant EPC: [EPC Name]".
2. Then, find UPCOMING trade events, exhibitions, buyer-seller meets, and delegation meetings relevant to this product sector.

STRICT TIME CONSTRAINT:
- ONLY list events happening AFTER {today_str}.
- DO NOT list events that have already passed.

{location_instruction}

Please provide the output in two distinct parts separated by the delimiter "{self.delimiter}".

PART 1: Descriptive List
Provide a structured list of at least 5 relevant upcoming events.
For each event, include:
1. Event Name
2. Date & Location (Be specific about the city/country)
3. Brief Description (Focus on why it matters for this specific product)
4. Key link/website (if available)

DO NOT include any JSON code blocks in PART 1.

{self.delimiter}

PART 2: JSON Data
Strictly output a JSON array of the found events.
Structure: [{{"eventName": "...", "date": "...", "location": "...", "type": "Exhibition/Delegation/etc", "description": "...", "url": "..."}}]
""".strip()

    def build_analysis_prompt(self, prior_narrative: str, user_profile: str) -> str:
        """Build the strategic-fit analysis prompt.

        Args:
            prior_narrative: Narrative text of the current search outcome.
            user_profile: Business size and goals described by the user.

        Returns:
            Prompt requesting ranked recommendations and a backward-scheduled plan.
        """
        return f"""
You are a Senior Trade Consultant for {self.consultant_firm}.

Context (List of found events and identified EPC):
{prior_narrative}

User Profile/Goal:
{user_profile.strip()}

Task:
Analyze the events listed above.
1. Recommend the top 2-3 events that strongly align with the User Profile.
2. Explain the "Strategic Value" of attending these specific events (e.g., networking, market entry, competitor analysis).
3. **Actionable Calendar Plan**: Create a strategic timeline for the top recommended events.
   - Work backwards from the event date.
   - Suggest specific dates/windows for:
     * Booth Booking (Early bird deadlines)
     * Visa Application (Based on location processing times)
     * Sample Shipment & Customs paperwork
     * Flight/Hotel bookings
4. Provide a brief preparation tip for the selected events.

Use a professional, analytical tone.
""".strip()

    def build_venue_prompt(self, event_name: str) -> str:
        """Build the venue lookup prompt for a named event."""
        return (
            f'Where is the "{event_name.strip()}" taking place? '
            "Provide the address and venue details."
        )

    def build_venue_tool_config(
        self,
        latitude: Optional[float],
        longitude: Optional[float],
    ) -> Optional[Tuple[float, float]]:
        """Return the coordinates used to bias map grounding, if usable.

        Coordinates are not range-checked; any finite pair passes through.

        Args:
            latitude: User latitude or None.
            longitude: User longitude or None.

        Returns:
            ``(latitude, longitude)`` or None when either is missing or not finite.
        """
        if latitude is None or longitude is None:
            return None
        try:
            lat, lon = float(latitude), float(longitude)
        except (TypeError, ValueError):
            logger.debug("Ignoring non-numeric coordinates: %r, %r", latitude, longitude)
            return None
        if not (math.isfinite(lat) and math.isfinite(lon)):
            logger.debug("Ignoring non-finite coordinates: %r, %r", latitude, longitude)
            return None
        return lat, lon
