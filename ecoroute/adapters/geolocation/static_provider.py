"""Configuration-backed geolocation providers.

A server-side process has no browser permission prompt, so the device
position comes from configuration. Missing or invalid coordinates mean
"location unavailable", which the rest of the application tolerates.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from ...config import GeolocationConfig, get_config
from ...domain.models import GeoLocation


@dataclass
class StaticGeolocationProvider:
    """Fixed position read from GeolocationConfig.

    Implements GeolocationPort.

    Attributes:
        config: Geolocation configuration
    """

    config: GeolocationConfig = field(
        default_factory=lambda: get_config().geolocation
    )

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def current_location(self) -> Optional[GeoLocation]:
        """Return the configured position, or None if unavailable."""
        if not self.config.enabled:
            self._logger.info("Geolocation disabled by configuration")
            return None

        if self.config.latitude is None or self.config.longitude is None:
            self._logger.warning("Geolocation unavailable: no coordinates configured")
            return None

        try:
            return GeoLocation(
                latitude=self.config.latitude,
                longitude=self.config.longitude,
            )
        except ValueError as e:
            self._logger.warning(
                "Geolocation unavailable: invalid coordinates",
                extra={"error": str(e)},
            )
            return None


@dataclass
class NullGeolocationProvider:
    """Provider for when location access is denied. Always None."""

    def current_location(self) -> Optional[GeoLocation]:
        return None
