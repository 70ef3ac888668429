"""Rendering adapters - Implementations of AnswerRendererPort.

Available implementations:
- HtmlAnswerRenderer: HTML for the Gradio front-end
"""

from .html_renderer import (
    HtmlAnswerRenderer,
    LineKind,
    classify_line,
    render_answer_html,
    render_citations_html,
)

__all__ = [
    "HtmlAnswerRenderer",
    "LineKind",
    "classify_line",
    "render_answer_html",
    "render_citations_html",
]
