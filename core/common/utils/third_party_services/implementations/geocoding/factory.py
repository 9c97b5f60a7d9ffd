import logging
from typing import Optional

from core.common.includes.third_party_services.interfaces.geocoding import GeocoderInterface, GeocoderError
from core.common.utils.third_party_services.implementations.geocoding.nominatim import NominatimGeocoder

logger = logging.getLogger("agora")


class GeocoderFactory:
    """Factory for creating geocoding provider instances."""

    _providers = {
        "nominatim": NominatimGeocoder,
    }

    @classmethod
    def get_provider(cls, provider_type: Optional[str]) -> Optional[GeocoderInterface]:
        """Get a geocoding provider instance, None when geocoding is disabled."""
        if not provider_type:
            return None

        if provider_type not in cls._providers:
            raise GeocoderError(f"Unsupported geocoding provider: {provider_type}")

        try:
            return cls._providers[provider_type]()
        except GeocoderError as e:
            logger.error(f"Failed to initialize geocoding provider {provider_type}: {e}")
            raise
