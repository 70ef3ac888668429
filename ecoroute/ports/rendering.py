"""Rendering port - Abstraction for displaying a RouteAnswer.

This protocol defines the contract between the application and the
display layer, allowing different output formats to be used.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..domain.models import RouteAnswer


class AnswerRendererPort(Protocol):
    """Port for answer rendering.

    Implementation: adapters/rendering/html_renderer.py
    """

    def render(self, answer: RouteAnswer) -> tuple[str, str]:
        """Render an answer for display.

        Args:
            answer: The normalized route answer.

        Returns:
            Tuple of (rendered answer text, rendered citations).
        """
        ...
