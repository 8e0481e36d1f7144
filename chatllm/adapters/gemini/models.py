"""
Gemini Models - Provider configuration for the Gemini adapter.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from pydantic import BaseModel, Field, SecretStr, ValidationError, ValidationInfo, field_validator

from chatllm.config import ConfigurationError

logger = logging.getLogger(__name__)

PROVIDER_NAME = "gemini"
SYSTEM_PREFIX = "System instruction: "


class GeminiConfig(BaseModel):
    """
    Configuration for the Gemini provider, parsed from the host's
    JSON parameter blob.

    Zero, negative and empty sampling values mean "use the vendor default".
    """

    api_key: SecretStr = Field(default=SecretStr(""), alias="apiKey")
    model_name: str = Field(default="", alias="modelName")
    max_tokens: int = Field(default=0, alias="maxTokens")
    temperature: float = 0.0
    top_p: float = Field(default=0.0, alias="topP")
    top_k: int = Field(default=0, alias="topK")
    stop_sequences: list[str] = Field(default_factory=list, alias="stopSequences")

    model_config = {
        "populate_by_name": True,
        "extra": "ignore",
        "protected_namespaces": (),
    }

    @field_validator("*", mode="before")
    @classmethod
    def null_is_unset(cls, value: Any, info: ValidationInfo) -> Any:
        """JSON null on any field means "unset", not "invalid"."""
        if value is None:
            return cls.model_fields[info.field_name].get_default(call_default_factory=True)
        return value

    @classmethod
    def from_parameters(
        cls,
        parameters: bytes | str | dict[str, Any] | None,
        strict: bool = False,
    ) -> GeminiConfig:
        """
        Parse the host parameter blob.

        Args:
            parameters: Raw JSON (bytes or str), an already decoded dict, or None
            strict: Raise on malformed parameters instead of using defaults

        Returns:
            Parsed configuration, or all defaults when the blob is empty or
            malformed and ``strict`` is off

        Raises:
            ConfigurationError: Malformed parameters in strict mode
        """
        if parameters is None or parameters in (b"", ""):
            return cls()

        try:
            if isinstance(parameters, dict):
                return cls.model_validate(parameters)
            data = json.loads(parameters)
            if not isinstance(data, dict):
                raise ValueError(f"expected a JSON object, got {type(data).__name__}")
            return cls.model_validate(data)
        except (ValueError, ValidationError) as e:
            if strict:
                raise ConfigurationError(
                    "invalid Gemini provider parameters",
                    {"provider": PROVIDER_NAME, "error": str(e)},
                ) from e
            logger.warning("Invalid Gemini parameters, using defaults: %s", e)
            return cls()
