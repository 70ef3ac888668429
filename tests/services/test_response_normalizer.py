"""Tests for raw reply normalization."""

import pytest

from ecoroute.domain.errors import EmptyResponse
from ecoroute.domain.models import Citation
from ecoroute.services.response_normalizer import (
    NO_DETAILS_PLACEHOLDER,
    extract_citation,
    normalize,
)


def _reply(parts=None, chunks=None, extra_candidates=0):
    candidate = {}
    if parts is not None:
        candidate["content"] = {"parts": parts}
    if chunks is not None:
        candidate["grounding_metadata"] = {"grounding_chunks": chunks}
    return {"candidates": [candidate] + [{}] * extra_candidates}


class TestEmptyResponse:
    @pytest.mark.parametrize("raw", [{}, {"candidates": []}, {"candidates": None}])
    def test_no_candidates_raises(self, raw):
        with pytest.raises(EmptyResponse):
            normalize(raw)


class TestText:
    def test_concatenates_parts_without_separator(self):
        answer = normalize(_reply(parts=[{"text": "**Route Summary**\n"}, {"text": "- 465 km"}]))
        assert answer.answer_text == "**Route Summary**\n- 465 km"

    def test_skips_non_text_parts(self):
        answer = normalize(
            _reply(parts=[{"function_call": {"name": "x"}}, {"text": "Go north."}])
        )
        assert answer.answer_text == "Go north."

    @pytest.mark.parametrize(
        "parts",
        [None, [], [{"inline_data": {}}], [{"text": ""}], [{"text": ""}, {"text": ""}]],
    )
    def test_placeholder_when_no_text(self, parts):
        answer = normalize(_reply(parts=parts))
        assert answer.answer_text == NO_DETAILS_PLACEHOLDER
        assert answer.citations == ()

    def test_only_first_candidate_is_used(self):
        raw = {
            "candidates": [
                {"content": {"parts": [{"text": "first"}]}},
                {"content": {"parts": [{"text": "second"}]}},
            ]
        }
        assert normalize(raw).answer_text == "first"

    def test_line_structure_preserved(self):
        text = "## Key Stops\n\n* **Tesla Supercharger** Kettleman City\n"
        assert normalize(_reply(parts=[{"text": text}])).answer_text == text


class TestCitations:
    def test_mixed_shapes_drop_empty_title(self):
        chunks = [
            {"web": {"title": "A", "uri": "u1"}},
            {"maps": {"title": "", "uri": "u2"}},
            {"mobile": {"title": "B", "uri": "u3"}},
        ]
        answer = normalize(_reply(parts=[{"text": "x"}], chunks=chunks))

        assert [(c.title, c.uri) for c in answer.citations] == [("A", "u1"), ("B", "u3")]
        assert [c.source for c in answer.citations] == ["web", "mobile"]

    def test_missing_grounding_metadata_is_empty(self):
        answer = normalize(_reply(parts=[{"text": "x"}]))
        assert answer.citations == ()
        assert not answer.has_citations

    def test_maps_shape_keeps_place_id(self):
        chunk = {"maps": {"title": "Cafe", "uri": "https://maps.google.com/?cid=1", "place_id": "p1"}}
        assert extract_citation(chunk) == Citation(
            title="Cafe", uri="https://maps.google.com/?cid=1", source="maps", place_id="p1"
        )

    def test_camel_case_keys(self):
        raw = {
            "candidates": [
                {
                    "content": {"parts": [{"text": "ok"}]},
                    "groundingMetadata": {
                        "groundingChunks": [
                            {"maps": {"title": "Station", "uri": "u", "placeId": "p9"}}
                        ]
                    },
                }
            ]
        }
        (citation,) = normalize(raw).citations
        assert citation.place_id == "p9"

    def test_priority_web_before_mobile_before_maps(self):
        chunk = {
            "maps": {"title": "M", "uri": "um"},
            "mobile": {"title": "Mo", "uri": "umo"},
            "web": {"title": "W", "uri": "uw"},
        }
        assert extract_citation(chunk).source == "web"
        del chunk["web"]
        assert extract_citation(chunk).source == "mobile"

    def test_first_present_shape_decides(self):
        # Web shape present but incomplete: the chunk is dropped, not
        # rescued by the maps shape.
        chunk = {"web": {"title": "W"}, "maps": {"title": "M", "uri": "um"}}
        assert extract_citation(chunk) is None

    @pytest.mark.parametrize(
        "chunk",
        [
            {},
            {"retrieved_context": {"title": "doc", "uri": "gs://x"}},
            {"web": {"uri": "u"}},
            {"mobile": {"title": "B"}},
            {"maps": {}},
        ],
    )
    def test_invalid_chunks_dropped(self, chunk):
        assert extract_citation(chunk) is None

    def test_order_preserved_and_no_dedup(self):
        chunks = [
            {"maps": {"title": "Z", "uri": "u"}},
            {"maps": {"title": "A", "uri": "u"}},
            {"maps": {"title": "Z", "uri": "u"}},
        ]
        answer = normalize(_reply(chunks=chunks))
        assert [c.title for c in answer.citations] == ["Z", "A", "Z"]
