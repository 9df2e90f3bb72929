"""Public file-based conversion API (delegates to application use-cases)."""

from __future__ import annotations

from pathlib import Path
from typing import Mapping
from typing import Optional

from md_to_mdx.application.ports import ConversionNotifier
from md_to_mdx.application.results import ConversionResult
from md_to_mdx.application.use_cases import build_conversion_options
from md_to_mdx.application.use_cases import convert_directory as _convert_directory
from md_to_mdx.application.use_cases import convert_file as _convert_file
from md_to_mdx.application.use_cases import convert_path as _convert_path


def convert_file(
    input_path: Path,
    output_path: Path,
    adapter: Optional[Mapping[str, str]] = None,
    notify: Optional[ConversionNotifier] = None,
) -> ConversionResult:
    """Convert a single Markdown file into ``output_path``."""
    options = build_conversion_options(adapter=adapter)
    return _convert_file(
        input_path=Path(input_path),
        output_path=Path(output_path),
        options=options,
        notify=notify,
    )


def convert_directory(
    directory: Path,
    adapter: Optional[Mapping[str, str]] = None,
    deep: bool = False,
    output: Optional[Path] = None,
    notify: Optional[ConversionNotifier] = None,
) -> list[ConversionResult]:
    """Convert all Markdown files in ``directory``."""
    options = build_conversion_options(adapter=adapter, deep=deep, output=output)
    return _convert_directory(directory=Path(directory), options=options, notify=notify)


def convert_path(
    input_path: Path,
    adapter: Optional[Mapping[str, str]] = None,
    deep: bool = False,
    output: Optional[Path] = None,
    force_file: bool = False,
    notify: Optional[ConversionNotifier] = None,
) -> list[ConversionResult]:
    """Convert a Markdown file or a directory of Markdown files."""
    options = build_conversion_options(
        adapter=adapter, deep=deep, output=output, force_file=force_file
    )
    return _convert_path(input_path=Path(input_path), options=options, notify=notify)
