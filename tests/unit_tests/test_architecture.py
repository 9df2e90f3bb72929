"""Architecture boundary checks."""

from __future__ import annotations

from pathlib import Path

import pytest

import md_to_mdx

PACKAGE_DIR = Path(md_to_mdx.__file__).resolve().parent


def _assert_no_imports(path: Path, banned: list[str]) -> None:
    text = path.read_text(encoding="utf-8")
    for token in banned:
        assert token not in text, f"Architecture violation in {path}: found '{token}'"


@pytest.mark.parametrize(
    "path", sorted((PACKAGE_DIR / "application").glob("*.py")), ids=lambda p: p.name
)
def test_application_layer_has_no_cli_imports(path: Path) -> None:
    """Use-cases stay independent of the command-line toolkit."""
    _assert_no_imports(path, ["import typer", "from typer", "import click", "from click"])


def test_cli_does_not_parse_front_matter_itself() -> None:
    """The CLI reaches front-matter parsing only through the use-cases."""
    _assert_no_imports(
        PACKAGE_DIR / "cli" / "cli.py", ["import frontmatter", "import yaml"]
    )
