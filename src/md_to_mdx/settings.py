"""Environment-driven runtime settings."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from md_to_mdx.errors import ConfigError

DEBUG_ENV = "MD_TO_MDX_DEBUG"
LOG_LEVEL_ENV = "MD_TO_MDX_LOG_LEVEL"
_TRUTHY = {"1", "true", "yes", "on"}


class Settings(BaseModel):
    """Process-wide settings read once per CLI invocation."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    debug: bool = False
    log_level: str = "WARNING"

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_level(cls, value: object) -> str:
        name = str(value).strip().upper()
        if name not in logging.getLevelNamesMapping():
            raise ValueError(f"unknown log level '{value}'")
        return name

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        """Build settings from ``MD_TO_MDX_*`` environment variables."""
        env = os.environ if environ is None else environ
        try:
            return cls(
                debug=env.get(DEBUG_ENV, "").strip().lower() in _TRUTHY,
                log_level=env.get(LOG_LEVEL_ENV) or "WARNING",
            )
        except ValidationError as exc:
            raise ConfigError(f"Invalid {LOG_LEVEL_ENV}: {exc.errors()[0]['msg']}") from exc
