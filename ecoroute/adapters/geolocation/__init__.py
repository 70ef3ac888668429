"""Geolocation adapters - Implementations of GeolocationPort.

Available implementations:
- StaticGeolocationProvider: Position from configuration
- NullGeolocationProvider: Location access denied
"""

from .static_provider import NullGeolocationProvider, StaticGeolocationProvider

__all__ = ["StaticGeolocationProvider", "NullGeolocationProvider"]
