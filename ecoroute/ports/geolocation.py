"""Geolocation port - Abstraction for the device position.

The position is acquired once at startup and passed explicitly to
the request builder, so the core never reads platform state.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Protocol

if TYPE_CHECKING:
    from ..domain.models import GeoLocation


class GeolocationPort(Protocol):
    """Port for device position providers.

    Implementations:
    - adapters/geolocation/static_provider.py (StaticGeolocationProvider)
    - adapters/geolocation/static_provider.py (NullGeolocationProvider)
    """

    def current_location(self) -> Optional[GeoLocation]:
        """Return the device position.

        Returns:
            The position, or None when it is denied or unavailable.
        """
        ...
