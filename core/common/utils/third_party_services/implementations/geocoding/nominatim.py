import logging
from typing import Any, Dict, Optional, Tuple

import requests
from django.conf import settings

from core.common.includes.third_party_services.interfaces.geocoding import GeocoderInterface, GeocoderError

logger = logging.getLogger("agora")


class NominatimGeocoder(GeocoderInterface):
    """OpenStreetMap Nominatim geocoding provider implementation."""

    def __init__(self):
        config = getattr(settings, 'GEOCODING', {})
        self.base_url = config.get('BASE_URL', 'https://nominatim.openstreetmap.org')
        self.user_agent = config.get('USER_AGENT', '')
        self.timeout = config.get('TIMEOUT', 10)

        if not self.user_agent:
            raise GeocoderError("Nominatim requires GEOCODING['USER_AGENT'] to be configured")

    def _make_request(self, endpoint: str, params: Dict[str, Any]) -> Any:
        """Make HTTP request to Nominatim API."""
        url = f"{self.base_url}{endpoint}"
        headers = {'User-Agent': self.user_agent}

        try:
            response = requests.get(url, headers=headers, params=params, timeout=self.timeout)
            response.raise_for_status()
            return response.json()
        except requests.exceptions.RequestException as e:
            logger.error(f"Nominatim API request failed: {e}")
            raise GeocoderError(f"API request failed: {str(e)}") from e

    def geocode(self, address: str) -> Optional[Tuple[float, float]]:
        """Resolve an address with Nominatim's search endpoint."""
        results = self._make_request('/search', {'q': address, 'format': 'jsonv2', 'limit': 1})
        if not results:
            return None

        try:
            return float(results[0]['lat']), float(results[0]['lon'])
        except (KeyError, TypeError, ValueError) as e:
            raise GeocoderError(f"Unexpected Nominatim response: {results[0]!r}") from e
