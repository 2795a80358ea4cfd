"""Chunking configuration.

Settings are immutable so a relay can swap its whole configuration between
calls without a partially-updated state ever being observed by the chunker.
Values are loaded from ``LOGCHUNK_*`` environment variables; keyword
arguments take precedence over the environment.
"""

from __future__ import annotations

from typing import Any

from pydantic import Field
from pydantic import ValidationError as PydanticValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import ConfigurationError

DEFAULT_MAX_LENGTH = 8192
DEFAULT_SEQUENCE_KEY = "seq"
ENV_PREFIX = "LOGCHUNK_"


class ChunkSettings(BaseSettings):
    """Configuration read by the chunker on every call.

    Attributes:
        enabled: When False every event passes through unchanged
        max_length: Chunk size and split threshold, in characters
        sequence_key: Contextual map key used for the ordinal tag
        debug_enabled: Emit debug telemetry for split decisions
    """

    enabled: bool = True
    max_length: int = Field(DEFAULT_MAX_LENGTH, gt=0)
    sequence_key: str = Field(DEFAULT_SEQUENCE_KEY, min_length=1)
    debug_enabled: bool = False

    model_config = SettingsConfigDict(env_prefix=ENV_PREFIX, frozen=True, extra="forbid")

    @classmethod
    def build(cls, **values: Any) -> ChunkSettings:
        """Create validated settings.

        Raises:
            ConfigurationError: If any value is invalid
        """
        try:
            return cls(**values)
        except PydanticValidationError as exc:
            errors = exc.errors()
            field = None
            if errors and errors[0].get("loc"):
                field = str(errors[0]["loc"][0])
            raise ConfigurationError(f"Invalid chunk settings: {exc}", field=field) from exc

    @classmethod
    def from_env(cls, prefix: str = ENV_PREFIX) -> ChunkSettings:
        """Load settings from ``<prefix><FIELD_NAME>`` environment variables.

        Unset variables keep their defaults.
        """
        return cls.build(_env_prefix=prefix)

    def replace(self, **changes: Any) -> ChunkSettings:
        """Return a validated copy with ``changes`` applied."""
        return self.build(**{**self.model_dump(), **changes})
