"""Configuration settings for negotiation middleware.

Settings are loaded from ``NEGOTIATION_``-prefixed environment variables
and ``.env`` files. They configure the media types a server offers and
whether an empty accept header falls back to the first of them.
"""

import json
from typing import Annotated, Any, List, Literal

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

from ..exceptions import ConfigurationError


class NegotiationSettings(BaseSettings):
    """Negotiation settings loaded from environment variables.

    :param priorities: Supported media types in preference order
    :type priorities: List[str]
    :param supply_default: Use the first priority when no accept header is sent
    :type supply_default: bool
    :param log_level: Logging level for the application
    :type log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
    """

    model_config = SettingsConfigDict(
        env_prefix="NEGOTIATION_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    priorities: Annotated[List[str], NoDecode] = Field(
        default_factory=list,
        description="Supported media types, comma-separated or a JSON array",
    )
    supply_default: bool = Field(
        False,
        description="Supply the first priority when the accept header is empty",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        "INFO", description="Logging level"
    )

    @field_validator("priorities", mode="before")
    @classmethod
    def parse_priorities(cls, v: Any) -> Any:
        """Accept priorities as a JSON array or a comma-separated string.

        Blank entries are dropped; the order of the remaining entries is
        preserved since it is the server's preference order.

        :param v: Raw value from the environment or the constructor
        :type v: Any
        :return: List of media-type strings, or the value unchanged
        :rtype: Any
        """
        if v is None:
            return []
        if isinstance(v, str):
            raw = v.strip()
            if raw.startswith("["):
                try:
                    v = json.loads(raw)
                except json.JSONDecodeError as e:
                    raise ValueError(f"priorities is not a valid JSON array: {e}")
            else:
                v = raw.split(",")
        if isinstance(v, (list, tuple)):
            return [item.strip() for item in v if isinstance(item, str) and item.strip()]
        return v

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip().upper()
        return v


def load_settings(**overrides: Any) -> NegotiationSettings:
    """Load a fresh settings instance.

    :param overrides: Field values that take precedence over the environment
    :return: Validated settings
    :rtype: NegotiationSettings
    :raises ConfigurationError: If any setting fails validation
    """
    try:
        return NegotiationSettings(**overrides)
    except ValidationError as e:
        errors = [
            {"loc": ".".join(str(p) for p in err["loc"]), "msg": err["msg"]}
            for err in e.errors()
        ]
        raise ConfigurationError(
            f"Invalid negotiation settings ({len(errors)} error(s))", errors=errors
        ) from e


settings = NegotiationSettings()
"""Global settings instance, read from the environment at import time."""
