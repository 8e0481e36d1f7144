"""
Gemini Adapter - Google Gemini implementation of the LanguageModel contract.

This is the ONLY place that calls the Gemini API.
"""

from .client import GeminiProvider
from .extractor import extract_text
from .models import PROVIDER_NAME, SYSTEM_PREFIX, GeminiConfig
from .translator import generation_config, to_contents, to_vision_contents

__all__ = [
    "GeminiProvider",
    "GeminiConfig",
    "PROVIDER_NAME",
    "SYSTEM_PREFIX",
    "extract_text",
    "generation_config",
    "to_contents",
    "to_vision_contents",
]
