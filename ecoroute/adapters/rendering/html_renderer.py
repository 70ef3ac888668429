"""HTML renderer for route answers.

The model answers with a light markup: whole-line ``**bold**`` headings,
``## `` headings, ``- `` / ``* `` bullets, blank separators and inline
``**bold**`` spans. Each line is classified on its own, first match
wins, in the order of LineKind.
"""

from __future__ import annotations

import html
import logging
import re
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Sequence
from urllib.parse import urlsplit

from ...domain.errors import RenderingError
from ...domain.models import Citation, RouteAnswer

_EMPHASIS = re.compile(r"(\*\*.*?\*\*)")
_LINK_SCHEMES = ("http", "https")


class LineKind(Enum):
    """Structural role of one answer line."""

    HEADING = auto()
    SUBHEADING = auto()
    BULLET = auto()
    BLANK = auto()
    PARAGRAPH = auto()


def classify_line(line: str) -> tuple[LineKind, str]:
    """Classify a line and strip its marker.

    A line that is both ``**...**`` and ``## ...`` cannot exist, since
    the bold check requires the line to start with ``**``.

    Returns:
        Tuple of (kind, line content without its marker).
    """
    if len(line) >= 4 and line.startswith("**") and line.endswith("**"):
        return LineKind.HEADING, line.replace("**", "")
    if line.startswith("## "):
        return LineKind.SUBHEADING, line[3:]
    if line.startswith("- ") or line.startswith("* "):
        return LineKind.BULLET, line[2:]
    if not line.strip():
        return LineKind.BLANK, ""
    return LineKind.PARAGRAPH, line


def format_emphasis(text: str) -> str:
    """Escape text and turn inline ``**x**`` spans into <strong>."""
    pieces = []
    for part in _EMPHASIS.split(text):
        if len(part) >= 4 and part.startswith("**") and part.endswith("**"):
            pieces.append(f"<strong>{html.escape(part[2:-2])}</strong>")
        else:
            pieces.append(html.escape(part))
    return "".join(pieces)


def render_answer_html(text: str) -> str:
    """Render answer text line by line.

    Consecutive bullets are grouped in one list.
    """
    out: list[str] = []
    in_list = False

    for line in text.split("\n"):
        kind, content = classify_line(line)

        if kind is LineKind.BULLET:
            if not in_list:
                out.append('<ul class="route-list">')
                in_list = True
            out.append(f"<li>{format_emphasis(content)}</li>")
            continue

        if in_list:
            out.append("</ul>")
            in_list = False

        if kind is LineKind.HEADING:
            out.append(f'<h3 class="route-heading">{html.escape(content)}</h3>')
        elif kind is LineKind.SUBHEADING:
            out.append(f'<h4 class="route-subheading">{html.escape(content)}</h4>')
        elif kind is LineKind.BLANK:
            out.append('<div class="route-gap"></div>')
        else:
            out.append(f"<p>{format_emphasis(content)}</p>")

    if in_list:
        out.append("</ul>")
    return "\n".join(out)


def is_safe_link(uri: str) -> bool:
    """Only http(s) URIs are rendered as clickable links."""
    return urlsplit(uri.strip()).scheme.lower() in _LINK_SCHEMES


def render_citations_html(citations: Sequence[Citation]) -> str:
    """Render citations as a list of map links; empty string if none."""
    if not citations:
        return ""

    items = []
    for citation in citations:
        title = html.escape(citation.title)
        if not is_safe_link(citation.uri):
            items.append(f"<li><strong>{title}</strong></li>")
            continue
        items.append(
            '<li><a href="{uri}" target="_blank" rel="noopener noreferrer">'
            "<strong>{title}</strong></a><br><small>View on Google Maps</small></li>".format(
                uri=html.escape(citation.uri, quote=True),
                title=title,
            )
        )
    return (
        '<div class="route-citations">'
        "<h3>Verified Locations Found</h3>"
        '<ul>{items}</ul>'
        "<p><small>Locations sourced directly from Google Maps Platform</small></p>"
        "</div>"
    ).format(items="".join(items))


@dataclass
class HtmlAnswerRenderer:
    """HTML renderer implementing AnswerRendererPort."""

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def render(self, answer: RouteAnswer) -> tuple[str, str]:
        """Render answer text and citations to HTML.

        Raises:
            RenderingError: If rendering fails.
        """
        try:
            return (
                render_answer_html(answer.answer_text),
                render_citations_html(answer.citations),
            )
        except Exception as e:
            self._logger.error("Answer rendering failed", extra={"error": str(e)})
            raise RenderingError(
                renderer_type="html",
                cause=e,
            )
