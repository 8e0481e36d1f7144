"""
Gemini Extractor - Gemini responses to host response text.
"""

from __future__ import annotations

import logging

from google.generativeai import protos
from google.generativeai.types import GenerateContentResponse

from chatllm.config import EmptyResponseError

logger = logging.getLogger(__name__)

__all__ = ["extract_text"]


def extract_text(
    response: GenerateContentResponse | protos.GenerateContentResponse,
) -> str:
    """
    Concatenate the text parts of the first candidate, in order.

    Non-text parts are skipped. A response with no candidates, or whose
    first candidate has no parts, is "no answer" and raises rather than
    returning an empty string.

    Raises:
        EmptyResponseError: No candidates or no content parts
    """
    candidates = list(response.candidates)
    if not candidates:
        raise EmptyResponseError("no response generated", {"candidates": 0})

    parts = list(candidates[0].content.parts)
    if not parts:
        raise EmptyResponseError("no response generated", {"candidates": len(candidates), "parts": 0})

    chunks = []
    for part in parts:
        if "text" in part:
            chunks.append(part.text)
        else:
            logger.debug("Skipping non-text response part")
    return "".join(chunks)
