"""
Tests for Gemini response text extraction.
"""

from __future__ import annotations

import pytest
from google.generativeai import protos

from chatllm.config import EmptyResponseError, ErrorCode

from .extractor import extract_text


def make_response(*candidates: list[protos.Part]) -> protos.GenerateContentResponse:
    """Build a response with one candidate per list of parts."""
    return protos.GenerateContentResponse(
        candidates=[
            protos.Candidate(content=protos.Content(role="model", parts=parts))
            for parts in candidates
        ]
    )


def test_extract_text_single_part() -> None:
    response = make_response([protos.Part(text="Hello")])
    assert extract_text(response) == "Hello"


def test_extract_text_concatenates_parts_in_order() -> None:
    """Test text parts "A" and "B" extract as "AB"."""
    response = make_response([protos.Part(text="A"), protos.Part(text="B")])
    assert extract_text(response) == "AB"


def test_extract_text_skips_non_text_parts() -> None:
    """Test blob parts between text parts are ignored."""
    response = make_response(
        [
            protos.Part(text="A"),
            protos.Part(inline_data=protos.Blob(mime_type="image/png", data=b"\x89PNG")),
            protos.Part(text="B"),
        ]
    )
    assert extract_text(response) == "AB"


def test_extract_text_only_first_candidate() -> None:
    """Test later candidates are not included."""
    response = make_response([protos.Part(text="first")], [protos.Part(text="second")])
    assert extract_text(response) == "first"


def test_extract_text_no_text_parts_is_empty_answer() -> None:
    """Test a candidate with only non-text parts is an empty answer, not an error."""
    response = make_response(
        [protos.Part(inline_data=protos.Blob(mime_type="image/png", data=b"\x89PNG"))]
    )
    assert extract_text(response) == ""


def test_extract_text_zero_candidates_raises() -> None:
    """Test zero candidates is "no answer"."""
    with pytest.raises(EmptyResponseError) as exc_info:
        extract_text(make_response())

    assert exc_info.value.code == ErrorCode.LLM_EMPTY_RESPONSE
    assert exc_info.value.details == {"candidates": 0}


def test_extract_text_zero_parts_raises() -> None:
    """Test a first candidate without parts is "no answer"."""
    with pytest.raises(EmptyResponseError):
        extract_text(make_response([]))
