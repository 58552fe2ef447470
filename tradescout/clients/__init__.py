"""Trade Scout external service clients."""

from tradescout.clients.geolocation_client import GeolocationClient
from tradescout.clients.llm_client import GROUNDING_MAPS, GROUNDING_WEB, LLMClient, LLMResponse

__all__ = [
    "LLMClient",
    "LLMResponse",
    "GeolocationClient",
    "GROUNDING_WEB",
    "GROUNDING_MAPS",
]
