"""
Gemini Translator - Host messages and options to Gemini request shapes.

Gemini has no system role: system messages are sent as user turns whose
text carries a SYSTEM_PREFIX marker.
"""

from __future__ import annotations

import logging
from typing import Any

from google.generativeai import protos

from chatllm.domains.llm import LLMOptions, Message, Role

from .models import SYSTEM_PREFIX, GeminiConfig

logger = logging.getLogger(__name__)

__all__ = ["generation_config", "to_contents", "to_vision_contents", "vendor_role"]

_ROLES = {
    Role.USER: "user",
    Role.ASSISTANT: "model",
    Role.SYSTEM: "user",
}


def vendor_role(role: Role) -> str:
    """Map a host role onto the Gemini role."""
    return _ROLES[role]


def to_contents(messages: list[Message]) -> list[protos.Content]:
    """
    Convert a conversation for text-only chat completion.

    Each message becomes one content with a single text part.
    Attachments are not forwarded.
    """
    contents = []
    for msg in messages:
        text = msg.content
        if msg.role is Role.SYSTEM:
            text = SYSTEM_PREFIX + text
        contents.append(
            protos.Content(role=vendor_role(msg.role), parts=[protos.Part(text=text)])
        )
    return contents


def to_vision_contents(messages: list[Message]) -> list[protos.Content]:
    """
    Convert a conversation for vision, forwarding image attachments.

    Empty text is omitted, image attachments become inline blobs in order,
    and any other attachment is dropped.
    """
    contents = []
    for msg in messages:
        parts: list[protos.Part] = []
        if msg.content:
            parts.append(protos.Part(text=msg.content))

        for attachment in msg.attachments:
            if attachment.is_image:
                parts.append(
                    protos.Part(
                        inline_data=protos.Blob(
                            mime_type=attachment.mime_type,
                            data=attachment.data,
                        )
                    )
                )
            else:
                logger.debug("Dropping non-image attachment: %s", attachment.mime_type)

        if msg.role is Role.SYSTEM:
            parts = _mark_system(parts)

        contents.append(protos.Content(role=vendor_role(msg.role), parts=parts))
    return contents


def _mark_system(parts: list[protos.Part]) -> list[protos.Part]:
    """Prefix the leading text part, or insert a bare marker part."""
    if parts and "text" in parts[0]:
        return [protos.Part(text=SYSTEM_PREFIX + parts[0].text), *parts[1:]]
    return [protos.Part(text=SYSTEM_PREFIX), *parts]


def _positive(override: float, configured: float) -> float:
    """Per-call value if set, else the configured one; 0 when neither is positive."""
    if override > 0:
        return override
    return configured if configured > 0 else 0


def generation_config(
    config: GeminiConfig,
    options: LLMOptions | None = None,
) -> dict[str, Any]:
    """
    Build the SDK generation config.

    Per-call options win over the provider config. A parameter is only
    included when its effective value is set (positive, non-empty), so the
    vendor default applies otherwise.
    """
    options = options or LLMOptions()

    candidates: dict[str, Any] = {
        "temperature": _positive(options.temperature, config.temperature),
        "top_p": _positive(options.top_p, config.top_p),
        "top_k": _positive(options.top_k, config.top_k),
        "max_output_tokens": _positive(options.max_generated_tokens, config.max_tokens),
        "stop_sequences": list(options.stop_sequences or config.stop_sequences),
    }
    return {key: value for key, value in candidates.items() if value}
