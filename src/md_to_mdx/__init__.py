"""Top-level API for Markdown to MDX conversion."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path

from md_to_mdx.application.results import ConversionResult
from md_to_mdx.metadata import apply_adapter, render_document

__version__ = "0.1.0"


def convert_path(
    input_path: Path | str,
    *,
    adapter: Mapping[str, str] | None = None,
    deep: bool = False,
    output: Path | str | None = None,
    force_file: bool = False,
) -> list[ConversionResult]:
    """Convert a Markdown file, or every Markdown file in a directory, to MDX.

    Parameters
    ----------
    input_path : Path | str
        Markdown file or directory.
    adapter : Mapping[str, str] | None, default=None
        Front-matter key renames applied before export.
    deep : bool, default=False
        Recurse into sub-directories when ``input_path`` is a directory.
    output : Path | str | None, default=None
        Output ``.mdx`` file or output root directory. When omitted, each
        result is written next to its source.
    force_file : bool, default=False
        Treat ``input_path`` as a file even when it is not a regular file.

    Returns
    -------
    list[ConversionResult]
        One result per written document, in processing order.
    """
    from .api import convert_path as _impl

    return _impl(
        input_path=Path(input_path),
        adapter=adapter,
        deep=deep,
        output=Path(output) if output is not None else None,
        force_file=force_file,
    )


def convert_file(
    input_path: Path | str,
    output_path: Path | str,
    *,
    adapter: Mapping[str, str] | None = None,
) -> ConversionResult:
    """Convert one Markdown file into ``output_path``."""
    from .api import convert_file as _impl

    return _impl(input_path=Path(input_path), output_path=Path(output_path), adapter=adapter)


__all__ = [
    "ConversionResult",
    "__version__",
    "apply_adapter",
    "convert_file",
    "convert_path",
    "render_document",
]
