"""
Gemini Provider - LanguageModel implementation backed by Google Gemini.

This is the ONLY place that calls the Gemini API.

Supported:
- Chat completion (system turns folded into user turns)
- Vision (image attachments as inline blobs)

Not supported by this provider: embeddings, audio transcription.
Calls are never retried; upstream failures surface to the caller.
"""

from __future__ import annotations

import asyncio
import logging
import threading

import google.generativeai as genai

from chatllm.config import (
    CapabilityUnsupportedError,
    ConfigurationError,
    Settings,
    UpstreamError,
    get_settings,
)
from chatllm.domains.llm import (
    Capability,
    LLMMetrics,
    LLMOptions,
    Message,
    Response,
)

from .extractor import extract_text
from .models import PROVIDER_NAME, GeminiConfig
from .translator import generation_config, to_contents, to_vision_contents

logger = logging.getLogger(__name__)

__all__ = ["GeminiProvider"]


class GeminiProvider:
    """
    Gemini adapter for the host LanguageModel contract.

    The SDK client is created on first use, or by an explicit
    ``initialize()``. Initialization is lock-guarded and one-way.

    Note that ``google.generativeai`` keeps its API key in process-wide
    state, so all Gemini providers in one process share a key.

    Example:
        >>> provider = GeminiProvider(GeminiConfig(api_key="..."))
        >>> response = await provider.chat_completion(
        ...     [Message(role=Role.USER, content="Summarize this thread")]
        ... )
        >>> print(response.content)
    """

    capabilities = frozenset({Capability.CHAT, Capability.VISION})

    def __init__(
        self,
        config: GeminiConfig | None = None,
        transport: str | None = None,
        metrics: LLMMetrics | None = None,
        settings: Settings | None = None,
    ) -> None:
        """
        Args:
            config: Provider configuration. Uses defaults if None.
            transport: SDK transport ("rest", "grpc"); SDK default if None
            metrics: Host request/response counters
            settings: Process settings. Uses cached settings if None.
        """
        self.config = config.model_copy() if config else GeminiConfig()
        self.transport = transport
        self.metrics = metrics
        self.settings = settings or get_settings()

        self._initialized = False
        self._init_lock = threading.Lock()

    @property
    def initialized(self) -> bool:
        return self._initialized

    def supports(self, capability: Capability) -> bool:
        return capability in self.capabilities

    def initialize(self) -> None:
        """
        Validate credentials and configure the SDK client.

        Raises:
            ConfigurationError: API key missing or SDK setup failed
        """
        with self._init_lock:
            if self._initialized:
                return

            api_key = self.config.api_key.get_secret_value()
            if not api_key:
                raise ConfigurationError(
                    "Gemini API key is required", {"provider": PROVIDER_NAME}
                )

            try:
                genai.configure(api_key=api_key, transport=self.transport)
            except Exception as e:
                raise ConfigurationError(
                    f"failed to create Gemini client: {e}", {"provider": PROVIDER_NAME}
                ) from e

            if not self.config.model_name:
                self.config.model_name = self.settings.gemini_default_model

            self._initialized = True
            logger.info(
                "Gemini provider initialized: model=%s, transport=%s",
                self.config.model_name,
                self.transport or "default",
            )

    def name(self) -> str:
        return PROVIDER_NAME

    def model_name(self) -> str:
        return self.config.model_name

    def _ensure_initialized(self) -> None:
        if not self._initialized:
            self.initialize()

    def _vision_model_name(self) -> str:
        """Configured model if it is vision-capable, else the vision model."""
        if "vision" in self.config.model_name:
            return self.config.model_name
        return self.settings.gemini_vision_model

    async def chat_completion(
        self,
        messages: list[Message],
        options: LLMOptions | None = None,
    ) -> Response:
        """
        Generate the next assistant turn.

        Args:
            messages: Conversation so far, oldest first
            options: Per-call overrides

        Returns:
            Response with the concatenated text of the first candidate

        Raises:
            ConfigurationError: Provider not configured
            UpstreamError: SDK or transport failure
            EmptyResponseError: No candidates or no content parts
        """
        self._ensure_initialized()
        return await self._generate(
            self.config.model_name,
            to_contents(messages),
            options,
            "failed to generate content",
        )

    async def vision(
        self,
        messages: list[Message],
        options: LLMOptions | None = None,
    ) -> Response:
        """
        Generate a response that may look at image attachments.

        Uses the vision model for this call unless the configured model
        name already indicates vision support. Non-image attachments are
        not forwarded.
        """
        self._ensure_initialized()
        return await self._generate(
            self._vision_model_name(),
            to_vision_contents(messages),
            options,
            "failed to generate vision content",
        )

    async def _generate(
        self,
        model_name: str,
        contents: list[genai.protos.Content],
        options: LLMOptions | None,
        failure: str,
    ) -> Response:
        """Run one generate_content call and extract its text."""
        if self.metrics is not None:
            self.metrics.observe_request()

        try:
            model = genai.GenerativeModel(
                model_name=model_name,
                generation_config=generation_config(self.config, options),
            )
            timeout = (options.timeout_seconds if options else None) or (
                self.settings.request_timeout_seconds
            )

            logger.debug(
                "Gemini request: model=%s, contents=%d, timeout=%.1fs",
                model_name,
                len(contents),
                timeout,
            )

            try:
                response = await asyncio.to_thread(
                    model.generate_content,
                    contents,
                    request_options={"timeout": timeout},
                )
            except Exception as e:
                raise UpstreamError(
                    f"{failure}: {e}",
                    {"provider": PROVIDER_NAME, "model": model_name},
                ) from e

            return Response(content=extract_text(response))

        finally:
            if self.metrics is not None:
                self.metrics.observe_response()

    async def embedding(self, text: str) -> list[float]:
        """Gemini embeddings are not offered by this provider."""
        raise CapabilityUnsupportedError(PROVIDER_NAME, Capability.EMBEDDING.value)

    async def transcription(self, audio: bytes, prompt: str) -> str:
        """Gemini transcription is not offered by this provider."""
        raise CapabilityUnsupportedError(PROVIDER_NAME, Capability.TRANSCRIPTION.value)
