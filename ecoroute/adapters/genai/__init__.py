"""Generative model adapters - Implementations of RouteModelPort.

Available implementations:
- GeminiRouteModel: Gemini with Google Maps grounding (google-genai)
"""

from .gemini_adapter import GeminiRouteModel

__all__ = ["GeminiRouteModel"]
