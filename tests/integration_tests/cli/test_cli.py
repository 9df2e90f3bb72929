"""Integration tests running the typer app against a real directory tree."""

from __future__ import annotations

from pathlib import Path

import pytest
from typer.testing import CliRunner

from md_to_mdx.cli import cli as cli_module

runner = CliRunner()


def _write(path: Path, text: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")


def test_cli_deep_conversion_into_output_root(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Mirror ``docs/sub/page.md`` to ``out/sub/page.mdx``."""
    _write(tmp_path / "docs" / "index.md", "---\ntitle: Home\n---\nWelcome\n")
    _write(
        tmp_path / "docs" / "sub" / "page.md",
        "---\ntitle: Page\norder: 2\n---\n\n\nContent\n",
    )
    monkeypatch.chdir(tmp_path)

    result = runner.invoke(
        cli_module.app, ["docs", "--deep", "-a", "title:pageTitle", "--out", "out"]
    )

    assert result.exit_code == 0, result.output
    assert (tmp_path / "out" / "index.mdx").read_text(encoding="utf-8") == (
        'export const metadata = {\n  "pageTitle": "Home"\n};\n\nWelcome\n'
    )
    assert (tmp_path / "out" / "sub" / "page.mdx").read_text(encoding="utf-8") == (
        'export const metadata = {\n  "pageTitle": "Page",\n  "order": 2\n};\n\nContent\n'
    )
    assert "Conversion complete!" in result.output


def test_cli_shallow_conversion_leaves_subdirectories(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Default traversal converts only the top level in place."""
    _write(tmp_path / "docs" / "index.md", "# Index\n")
    _write(tmp_path / "docs" / "sub" / "page.md", "# Page\n")
    monkeypatch.chdir(tmp_path)

    result = runner.invoke(cli_module.app, ["docs"])

    assert result.exit_code == 0, result.output
    assert (tmp_path / "docs" / "index.mdx").is_file()
    assert not (tmp_path / "docs" / "sub" / "page.mdx").exists()


def test_cli_wrong_extension_fails(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """A non-Markdown file input exits non-zero with a readable message."""
    _write(tmp_path / "notes.txt", "hello")
    monkeypatch.chdir(tmp_path)

    result = runner.invoke(cli_module.app, ["notes.txt"])

    assert result.exit_code == 1
    assert "Input file must have .md extension" in result.output


def test_cli_bad_adapter_shows_usage() -> None:
    """Malformed adapter values fail and print usage."""
    result = runner.invoke(cli_module.app, ["--adapter", "badtoken"])
    assert result.exit_code == 1
    assert 'Invalid adapter mapping "badtoken"' in result.output
    assert "Usage: md-to-mdx" in result.output


def test_cli_help_flag() -> None:
    """``-h`` prints the usage text and succeeds."""
    result = runner.invoke(cli_module.app, ["-h"])
    assert result.exit_code == 0
    assert "--adapter a:b" in result.output


def test_cli_app_and_run_cli_share_the_driver(monkeypatch: pytest.MonkeyPatch) -> None:
    """The typer command and ``run_cli`` hand identical options to one driver."""
    seen: list[tuple[object, bool]] = []

    def _fake_execute(options: object, debug: bool) -> int:
        seen.append((options, debug))
        return 3

    monkeypatch.setattr(cli_module, "_execute", _fake_execute)
    tokens = ["docs", "--deep", "-a", "title:pageTitle", "--out", "build"]

    result = runner.invoke(cli_module.app, tokens)

    assert result.exit_code == 3
    assert cli_module.run_cli(tokens) == 3
    assert len(seen) == 2
    assert seen[0] == seen[1]
