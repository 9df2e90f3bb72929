"""Unit tests for environment-driven settings."""

from __future__ import annotations

import pytest

from md_to_mdx.errors import ConfigError
from md_to_mdx.settings import Settings


def test_settings_defaults() -> None:
    """An empty environment yields quiet, non-debug settings."""
    settings = Settings.from_env({})
    assert settings.debug is False
    assert settings.log_level == "WARNING"


@pytest.mark.parametrize("raw", ["1", "true", "YES", " on "])
def test_settings_debug_truthy(raw: str) -> None:
    """Common truthy spellings enable debug output."""
    assert Settings.from_env({"MD_TO_MDX_DEBUG": raw}).debug is True


def test_settings_debug_falsy() -> None:
    """Anything else leaves debug disabled."""
    assert Settings.from_env({"MD_TO_MDX_DEBUG": "0"}).debug is False


def test_settings_log_level_normalized() -> None:
    """Level names are case-insensitive."""
    assert Settings.from_env({"MD_TO_MDX_LOG_LEVEL": "info"}).log_level == "INFO"


def test_settings_log_level_rejected() -> None:
    """Unknown levels raise a configuration error."""
    with pytest.raises(ConfigError, match="MD_TO_MDX_LOG_LEVEL"):
        Settings.from_env({"MD_TO_MDX_LOG_LEVEL": "chatty"})
