"""
Configuration - Process settings and error taxonomy.
"""

from .errors import (
    CapabilityUnsupportedError,
    ChatLLMError,
    ConfigurationError,
    EmptyResponseError,
    ErrorCode,
    UpstreamError,
)
from .settings import Settings, get_settings

__all__ = [
    # Settings
    "Settings",
    "get_settings",
    # Errors
    "ErrorCode",
    "ChatLLMError",
    "ConfigurationError",
    "UpstreamError",
    "EmptyResponseError",
    "CapabilityUnsupportedError",
]
