"""
LLM Models - Host-side data types shared by every provider.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field


class Role(str, Enum):
    """Author of a conversation message."""

    USER = "user"
    ASSISTANT = "assistant"
    SYSTEM = "system"


class Capability(str, Enum):
    """Operations a provider may offer."""

    CHAT = "chat"
    VISION = "vision"
    EMBEDDING = "embedding"
    TRANSCRIPTION = "transcription"


class Attachment(BaseModel):
    """Binary payload attached to a message (image, audio, document)."""

    mime_type: str
    data: bytes

    model_config = {"frozen": True}

    @property
    def is_image(self) -> bool:
        return self.mime_type.startswith("image/")


class Message(BaseModel):
    """Single conversation turn."""

    role: Role
    content: str = ""
    attachments: list[Attachment] = Field(default_factory=list)

    model_config = {"frozen": True}


class Response(BaseModel):
    """Completed model answer."""

    content: str


class LLMOptions(BaseModel):
    """
    Per-call overrides for a completion request.

    Zero, empty and None all mean "unset": the provider falls back to its
    configured value, and from there to the vendor default.
    """

    max_generated_tokens: int = Field(default=0, ge=0)
    temperature: float = 0.0
    top_p: float = 0.0
    top_k: int = Field(default=0, ge=0)
    stop_sequences: list[str] = Field(default_factory=list)
    timeout_seconds: float | None = Field(default=None, gt=0)

    model_config = {"frozen": True}


class ServiceConfig(BaseModel):
    """Host description of one configured provider service."""

    type: str  # Provider key, e.g. "gemini"
    name: str = ""
    parameters: bytes | str | dict[str, Any] | None = None
