from typing import Optional, Tuple
from abc import ABC, abstractmethod


class GeocoderError(Exception):
    """Base exception for geocoding provider errors."""
    pass


class GeocoderInterface(ABC):
    """Abstract interface for geocoding providers."""

    @abstractmethod
    def geocode(self, address: str) -> Optional[Tuple[float, float]]:
        """Resolve an address to a (latitude, longitude) pair, None when nothing matches."""
        pass
