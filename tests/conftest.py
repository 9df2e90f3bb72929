"""Shared pytest configuration and marker assignment."""

from __future__ import annotations

from pathlib import Path

import pytest


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Attach suite markers based on test file path."""
    del config
    for item in items:
        path = Path(str(item.fspath))
        parts = set(path.parts)
        if "e2e_tests" in parts:
            item.add_marker(pytest.mark.e2e)
        elif "integration_tests" in parts:
            item.add_marker(pytest.mark.integration)
        elif "unit_tests" in parts:
            item.add_marker(pytest.mark.unit)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep developer environment settings out of CLI tests."""
    monkeypatch.delenv("MD_TO_MDX_DEBUG", raising=False)
    monkeypatch.delenv("MD_TO_MDX_LOG_LEVEL", raising=False)


NOTES_MD = """---
title: Hello
draft: true
---
# Hi
"""

NOTES_MDX = """export const metadata = {
  "title": "Hello",
  "isDraft": true
};

# Hi
"""


@pytest.fixture
def notes_md() -> str:
    """Markdown document with a small YAML front-matter block."""
    return NOTES_MD


@pytest.fixture
def notes_mdx() -> str:
    """Expected MDX for ``notes_md`` with ``draft`` renamed to ``isDraft``."""
    return NOTES_MDX
