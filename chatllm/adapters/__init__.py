"""
Adapters - External LLM vendor integrations.

All vendor SDK calls are wrapped here to isolate the host from third-party changes.
"""

from .gemini import GeminiConfig, GeminiProvider
from .registry import new_language_model, register_provider, registered_providers

__all__ = [
    "GeminiProvider",
    "GeminiConfig",
    "new_language_model",
    "register_provider",
    "registered_providers",
]
