"""
LLM Domain - Provider-independent conversation types and contracts.

This domain handles:
- Host message, attachment and response types
- Per-call completion options
- The LanguageModel contract every provider implements
- Capability tags for optional operations
"""

from .contracts import LanguageModel, LLMMetrics
from .models import (
    Attachment,
    Capability,
    LLMOptions,
    Message,
    Response,
    Role,
    ServiceConfig,
)

__all__ = [
    "LanguageModel",
    "LLMMetrics",
    "Attachment",
    "Capability",
    "LLMOptions",
    "Message",
    "Response",
    "Role",
    "ServiceConfig",
]
