"""Centralized configuration using Pydantic Settings.

This module provides a single source of truth for all configuration:
model selection, API credentials, the optional fixed device position,
the Gradio server and logging.

Configuration can be overridden via environment variables:
- ECOROUTE_GENAI_MODEL=gemini-2.5-pro
- GEMINI_API_KEY=...
- ECOROUTE_GEO_LATITUDE=48.85 / ECOROUTE_GEO_LONGITUDE=2.35
- ECOROUTE_LOG_LEVEL=DEBUG
- etc.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal, Optional

from pydantic import AliasChoices, Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class GenAIConfig(BaseSettings):
    """Generative model configuration.

    Environment variables prefixed with ECOROUTE_GENAI_. The API key is
    also read from GEMINI_API_KEY or API_KEY.
    """

    model_config = SettingsConfigDict(
        env_prefix="ECOROUTE_GENAI_", populate_by_name=True
    )

    api_key: Optional[SecretStr] = Field(
        default=None,
        validation_alias=AliasChoices(
            "ECOROUTE_GENAI_API_KEY", "GEMINI_API_KEY", "API_KEY"
        ),
    )
    model: str = "gemini-2.5-flash"
    temperature: Optional[float] = None
    timeout_ms: Optional[int] = None
    maps_grounding: bool = True


class GeolocationConfig(BaseSettings):
    """Device position configuration.

    Environment variables prefixed with ECOROUTE_GEO_. When latitude or
    longitude is missing the position is treated as unavailable.
    """

    model_config = SettingsConfigDict(env_prefix="ECOROUTE_GEO_")

    enabled: bool = True
    latitude: Optional[float] = None
    longitude: Optional[float] = None


class UIConfig(BaseSettings):
    """Gradio front-end configuration.

    Environment variables prefixed with ECOROUTE_UI_.
    """

    model_config = SettingsConfigDict(env_prefix="ECOROUTE_UI_")

    title: str = "EcoRoute AI"
    server_name: str = "127.0.0.1"
    server_port: int = 7860
    default_vehicle: Literal["EV", "Hybrid", "Gas"] = "EV"


class ObservabilityConfig(BaseSettings):
    """Logging and observability configuration.

    Environment variables prefixed with ECOROUTE_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="ECOROUTE_LOG_")

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    structured: bool = False  # Set True for JSON logging


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

    Sub-configurations can be accessed via attributes:

        config = get_config()
        print(config.genai.model)
        print(config.geolocation.latitude)

    Environment variables prefixed with ECOROUTE_.
    """

    model_config = SettingsConfigDict(env_prefix="ECOROUTE_")

    genai: GenAIConfig = Field(default_factory=GenAIConfig)
    geolocation: GeolocationConfig = Field(default_factory=GeolocationConfig)
    ui: UIConfig = Field(default_factory=UIConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get the singleton application configuration.

    Configuration is loaded once and cached. To reload configuration
    (e.g., in tests), use reset_config() first.

    Returns:
        The application configuration instance.
    """
    return AppConfig()


def reset_config() -> None:
    """Reset the configuration cache.

    Call this in tests to ensure a fresh configuration is loaded.
    """
    get_config.cache_clear()
