"""
LLM Contracts - Interfaces every provider implements and consumes.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from .models import Capability, LLMOptions, Message, Response


@runtime_checkable
class LanguageModel(Protocol):
    """Contract between the host and one backing LLM vendor."""

    capabilities: frozenset[Capability]

    def supports(self, capability: Capability) -> bool:
        """Whether the provider offers ``capability``."""
        ...

    def initialize(self) -> None:
        """
        Validate configuration and create the vendor client.

        Raises:
            ConfigurationError: Credentials missing or client creation failed
        """
        ...

    def name(self) -> str:
        """Provider name."""
        ...

    def model_name(self) -> str:
        """Configured model name."""
        ...

    async def chat_completion(
        self,
        messages: list[Message],
        options: LLMOptions | None = None,
    ) -> Response:
        """
        Generate the next assistant turn for a conversation.

        Raises:
            UpstreamError: Vendor or transport failure
            EmptyResponseError: Vendor returned no usable content
        """
        ...

    async def vision(
        self,
        messages: list[Message],
        options: LLMOptions | None = None,
    ) -> Response:
        """Like chat_completion, with image attachments forwarded."""
        ...

    async def embedding(self, text: str) -> list[float]:
        """
        Embed text into a vector.

        Raises:
            CapabilityUnsupportedError: Provider has no embedding support
        """
        ...

    async def transcription(self, audio: bytes, prompt: str) -> str:
        """
        Transcribe audio to text.

        Raises:
            CapabilityUnsupportedError: Provider has no transcription support
        """
        ...


@runtime_checkable
class LLMMetrics(Protocol):
    """Request/response counters owned by the host."""

    def observe_request(self) -> None:
        ...

    def observe_response(self) -> None:
        ...
