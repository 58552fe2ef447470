"""Approximate user geolocation for venue lookups.

Resolves the caller's coordinates from an IP geolocation JSON endpoint. The
lookup only biases map grounding, so every failure is non-fatal: it is logged
and reported as "no coordinates".
"""

from __future__ import annotations

import logging
from typing import Optional, Tuple

import requests

logger = logging.getLogger(__name__)

# Keys used by common IP geolocation services for the coordinate pair
_COORD_KEYS = (("latitude", "longitude"), ("lat", "lon"), ("lat", "lng"))


class GeolocationClient:
    """Fetch approximate coordinates with a short timeout.

    Args:
        url: Endpoint returning a JSON object with latitude/longitude.
        timeout: Request timeout in seconds.
        session: Optional requests.Session to reuse.
    """

    def __init__(
        self,
        url: str = "https://ipapi.co/json/",
        timeout: float = 5.0,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.url = url
        self.timeout = timeout
        self._session = session or requests.Session()

    def locate(self) -> Optional[Tuple[float, float]]:
        """Return ``(latitude, longitude)`` or None on any failure."""
        try:
            response = self._session.get(self.url, timeout=self.timeout)
            response.raise_for_status()
            data = response.json()
        except (requests.RequestException, ValueError) as exc:
            logger.warning("Geolocation lookup failed or timed out: %s", exc)
            return None

        if not isinstance(data, dict):
            logger.warning("Geolocation response is not a JSON object")
            return None

        for lat_key, lon_key in _COORD_KEYS:
            if data.get(lat_key) is not None and data.get(lon_key) is not None:
                try:
                    return float(data[lat_key]), float(data[lon_key])
                except (TypeError, ValueError):
                    break
        logger.warning("Geolocation response carried no usable coordinates")
        return None
