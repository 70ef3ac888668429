"""Gemini route model adapter.

This adapter implements RouteModelPort with the google-genai SDK:
- Async client created lazily from configuration
- Google Maps grounding tool
- Location bias through the retrieval config lat/lng
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

from ...config import GenAIConfig, get_config
from ...domain.errors import ConfigurationError
from ...domain.models import ModelRequest, ToolParameters


@dataclass
class GeminiRouteModel:
    """Maps-grounded Gemini model.

    Attributes:
        config: Generative model configuration
    """

    config: GenAIConfig = field(default_factory=lambda: get_config().genai)

    _client: Optional[Any] = field(default=None, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def _get_client(self) -> Any:
        """Get or lazily create the google-genai client.

        Raises:
            ConfigurationError: If no API key is configured.
        """
        if self._client is not None:
            return self._client

        if self.config.api_key is None or not self.config.api_key.get_secret_value():
            raise ConfigurationError(
                "Gemini API key is not configured",
                setting_name="GEMINI_API_KEY",
                expected_type="str",
            )

        from google import genai
        from google.genai import types

        http_options = None
        if self.config.timeout_ms is not None:
            http_options = types.HttpOptions(timeout=self.config.timeout_ms)

        self._logger.debug(
            "Initializing Gemini client (lazy)",
            extra={"model": self.config.model, "timeout_ms": self.config.timeout_ms},
        )
        self._client = genai.Client(
            api_key=self.config.api_key.get_secret_value(),
            http_options=http_options,
        )
        return self._client

    def build_config(self, tool_parameters: ToolParameters) -> Any:
        """Translate tool parameters into a GenerateContentConfig."""
        from google.genai import types

        tools = None
        if tool_parameters.maps_grounding:
            tools = [types.Tool(google_maps=types.GoogleMaps())]

        tool_config = None
        bias = tool_parameters.location_bias
        if bias is not None:
            tool_config = types.ToolConfig(
                retrieval_config=types.RetrievalConfig(
                    lat_lng=types.LatLng(
                        latitude=bias.latitude,
                        longitude=bias.longitude,
                    )
                )
            )

        return types.GenerateContentConfig(
            tools=tools,
            tool_config=tool_config,
            temperature=self.config.temperature,
        )

    async def generate(self, request: ModelRequest) -> Mapping[str, Any]:
        """Call the model and return the reply as a plain mapping.

        Args:
            request: Prompt text plus tool parameters.

        Returns:
            The SDK reply dumped to a dict (snake_case keys, no None values).

        Raises:
            ConfigurationError: If no API key is configured.
            Exception: Whatever the SDK raises on transport or API errors.
        """
        client = self._get_client()
        config = self.build_config(request.tool_parameters)

        self._logger.info(
            "Calling Gemini",
            extra={
                "model": self.config.model,
                "prompt_length": len(request.prompt),
                "maps_grounding": request.tool_parameters.maps_grounding,
                "location_bias": request.tool_parameters.location_bias is not None,
            },
        )

        response = await client.aio.models.generate_content(
            model=self.config.model,
            contents=request.prompt,
            config=config,
        )
        return response.model_dump(exclude_none=True)
