"""
Error Taxonomy - Consistent error codes for every language model provider.

Usage:
    from chatllm.config.errors import ConfigurationError, UpstreamError

    raise ConfigurationError("Gemini API key is required")
"""

from __future__ import annotations

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Standardized error codes for machine-readable error responses."""

    # Configuration errors
    LLM_CONFIG_INVALID = "LLM_CONFIG_INVALID"

    # Upstream (vendor/transport) errors
    LLM_UPSTREAM_FAILED = "LLM_UPSTREAM_FAILED"
    LLM_EMPTY_RESPONSE = "LLM_EMPTY_RESPONSE"

    # Capability errors
    LLM_CAPABILITY_UNSUPPORTED = "LLM_CAPABILITY_UNSUPPORTED"


class ChatLLMError(Exception):
    """Base exception with error code support."""

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(f"[{code.value}] {message}")

    def to_dict(self) -> dict[str, Any]:
        """Convert to API-friendly dictionary."""
        return {
            "code": self.code.value,
            "message": self.message,
            "details": self.details,
        }


class ConfigurationError(ChatLLMError):
    """Missing or invalid provider configuration. Never retried."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(ErrorCode.LLM_CONFIG_INVALID, message, details)


class UpstreamError(ChatLLMError):
    """Vendor SDK or transport failure."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(ErrorCode.LLM_UPSTREAM_FAILED, message, details)


class EmptyResponseError(ChatLLMError):
    """The vendor answered, but without any usable content."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(ErrorCode.LLM_EMPTY_RESPONSE, message, details)


class CapabilityUnsupportedError(ChatLLMError):
    """Operation the provider does not offer."""

    def __init__(self, provider: str, capability: str) -> None:
        super().__init__(
            ErrorCode.LLM_CAPABILITY_UNSUPPORTED,
            f"{capability} not supported by {provider} provider",
            {"provider": provider, "capability": capability},
        )
        self.provider = provider
        self.capability = capability
