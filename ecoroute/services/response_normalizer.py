"""Normalization of raw model replies into RouteAnswer.

The reply is a plain mapping. The Python SDK dumps snake_case keys
while the REST API returns camelCase, so every lookup accepts both.

Grounding chunks come in several alternate shapes. Each shape has its
own extractor; they are tried in a fixed order and the first one whose
shape is present on the chunk decides the citation.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Mapping, Optional, Sequence

from ..domain.errors import EmptyResponse
from ..domain.models import Citation, RouteAnswer

NO_DETAILS_PLACEHOLDER = "No detailed route information available."

logger = logging.getLogger(__name__)

RawChunk = Mapping[str, Any]


@dataclass(frozen=True, slots=True)
class _Extracted:
    """Shape found on a chunk; may still be incomplete."""

    title: Any
    uri: Any
    source: str
    place_id: Optional[str] = None


# Returns None when the chunk does not carry this extractor's shape.
CitationExtractor = Callable[[RawChunk], Optional[_Extracted]]


def _get(mapping: Any, *keys: str) -> Any:
    """Return the first non-None value among alternate key spellings."""
    if not isinstance(mapping, Mapping):
        return None
    for key in keys:
        value = mapping.get(key)
        if value is not None:
            return value
    return None


def _shape_extractor(source: str) -> CitationExtractor:
    def extract(chunk: RawChunk) -> Optional[_Extracted]:
        shape = _get(chunk, source)
        if shape is None:
            return None
        return _Extracted(
            title=_get(shape, "title"),
            uri=_get(shape, "uri"),
            source=source,
            place_id=_get(shape, "place_id", "placeId"),
        )

    extract.__name__ = f"extract_{source}"
    return extract


extract_web = _shape_extractor("web")
extract_mobile = _shape_extractor("mobile")
extract_maps = _shape_extractor("maps")

CITATION_EXTRACTORS: tuple[CitationExtractor, ...] = (
    extract_web,
    extract_mobile,
    extract_maps,
)


def extract_citation(
    chunk: RawChunk,
    extractors: Sequence[CitationExtractor] = CITATION_EXTRACTORS,
) -> Optional[Citation]:
    """Turn one raw grounding chunk into a Citation.

    Returns:
        The citation, or None when no shape is present or the selected
        shape lacks a title or a uri.
    """
    for extractor in extractors:
        found = extractor(chunk)
        if found is None:
            continue
        if not found.title or not found.uri:
            return None
        return Citation(
            title=str(found.title),
            uri=str(found.uri),
            source=found.source,
            place_id=found.place_id,
        )
    return None


def extract_text(candidate: Mapping[str, Any]) -> str:
    """Concatenate all text parts of a candidate, in order."""
    parts = _get(_get(candidate, "content"), "parts") or []
    texts = [part["text"] for part in parts if isinstance(_get(part, "text"), str)]
    return "".join(texts) or NO_DETAILS_PLACEHOLDER


def extract_citations(candidate: Mapping[str, Any]) -> tuple[Citation, ...]:
    """Extract valid citations of a candidate, preserving order."""
    metadata = _get(candidate, "grounding_metadata", "groundingMetadata")
    chunks = _get(metadata, "grounding_chunks", "groundingChunks") or []

    citations = []
    dropped = 0
    for chunk in chunks:
        citation = extract_citation(chunk)
        if citation is None:
            dropped += 1
            continue
        citations.append(citation)

    if dropped:
        logger.debug(
            "Dropped invalid grounding chunks",
            extra={"dropped": dropped, "kept": len(citations)},
        )
    return tuple(citations)


def normalize(raw_reply: Mapping[str, Any]) -> RouteAnswer:
    """Normalize a raw model reply.

    Only the first candidate is consumed.

    Args:
        raw_reply: Mapping with a ``candidates`` list.

    Returns:
        RouteAnswer with the answer text and the valid citations.

    Raises:
        EmptyResponse: If the reply has no candidates at all.
    """
    candidates = _get(raw_reply, "candidates") or []
    if not candidates:
        raise EmptyResponse()

    candidate = candidates[0]
    answer = RouteAnswer(
        answer_text=extract_text(candidate),
        citations=extract_citations(candidate),
    )
    logger.debug(
        "Reply normalized",
        extra={
            "candidates": len(candidates),
            "text_length": len(answer.answer_text),
            "citations": len(answer.citations),
        },
    )
    return answer
