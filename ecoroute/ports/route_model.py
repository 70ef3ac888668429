"""Route model port - Abstraction over the hosted generative model.

This protocol defines the contract of the one external call the
application makes, allowing the Gemini adapter to be swapped for a
fake in tests.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Mapping, Protocol

if TYPE_CHECKING:
    from ..domain.models import ModelRequest


class RouteModelPort(Protocol):
    """Port for the maps-grounded generative model.

    Implementation: adapters/genai/gemini_adapter.py

    The call is fallible and has no latency bound. Implementations raise
    whatever their transport raises; mapping failures to domain errors
    is the caller's job.
    """

    async def generate(self, request: ModelRequest) -> Mapping[str, Any]:
        """Send a prompt with its tool parameters to the model.

        Args:
            request: Prompt text plus tool parameters.

        Returns:
            The raw reply as a mapping with a ``candidates`` list. Each
            candidate may carry ``content.parts[].text`` and
            ``grounding_metadata.grounding_chunks[]``.
        """
        ...
