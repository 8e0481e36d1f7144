"""
Provider Registry - Build LanguageModel instances from host service configs.
"""

from __future__ import annotations

import logging
from typing import Callable

from chatllm.config import ConfigurationError, get_settings
from chatllm.domains.llm import LanguageModel, LLMMetrics, ServiceConfig

from .gemini import GeminiConfig, GeminiProvider

logger = logging.getLogger(__name__)

__all__ = ["ProviderFactory", "new_language_model", "register_provider", "registered_providers"]

ProviderFactory = Callable[[ServiceConfig, str | None, LLMMetrics | None], LanguageModel]


def _new_gemini(
    service_config: ServiceConfig,
    transport: str | None,
    metrics: LLMMetrics | None,
) -> LanguageModel:
    settings = get_settings()
    config = GeminiConfig.from_parameters(
        service_config.parameters, strict=settings.strict_config
    )
    return GeminiProvider(config, transport=transport, metrics=metrics, settings=settings)


_PROVIDERS: dict[str, ProviderFactory] = {
    "gemini": _new_gemini,
}


def register_provider(provider_type: str, factory: ProviderFactory) -> None:
    """Register (or replace) the factory for a provider type."""
    if provider_type in _PROVIDERS:
        logger.warning("Replacing provider factory: %s", provider_type)
    _PROVIDERS[provider_type] = factory


def registered_providers() -> list[str]:
    """Provider types that can be constructed."""
    return sorted(_PROVIDERS)


def new_language_model(
    service_config: ServiceConfig,
    transport: str | None = None,
    metrics: LLMMetrics | None = None,
) -> LanguageModel:
    """
    Create the provider described by a host service config.

    The provider is not initialized; it initializes on first use.

    Args:
        service_config: Host service entry (type, name, parameter blob)
        transport: SDK transport passed through to the provider
        metrics: Host request/response counters

    Returns:
        A LanguageModel for the configured provider type

    Raises:
        ConfigurationError: Unknown provider type, or malformed parameters
            when strict configuration is enabled
    """
    factory = _PROVIDERS.get(service_config.type)
    if factory is None:
        raise ConfigurationError(
            f"unknown LLM provider type '{service_config.type}'",
            {"provider": service_config.type, "available": registered_providers()},
        )

    logger.debug("Creating %s provider for service '%s'", service_config.type, service_config.name)
    return factory(service_config, transport, metrics)
