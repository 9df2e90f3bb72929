"""Application-layer use-cases and option objects."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path

from md_to_mdx.application.options import ConversionOptions
from md_to_mdx.application.ports import ConversionNotifier, FrontMatterExtractor
from md_to_mdx.application.results import ConversionResult


def build_conversion_options(
    *,
    adapter: Mapping[str, str] | None = None,
    deep: bool = False,
    output: Path | str | None = None,
    force_file: bool = False,
) -> ConversionOptions:
    """Build typed conversion options via lazy use-case import."""
    from md_to_mdx.application.use_cases import build_conversion_options as _impl

    return _impl(adapter=adapter, deep=deep, output=output, force_file=force_file)


def convert_path(
    *,
    input_path: Path,
    options: ConversionOptions | None = None,
    extractor: FrontMatterExtractor | None = None,
    notify: ConversionNotifier | None = None,
) -> list[ConversionResult]:
    """Delegate to the path conversion use-case."""
    from md_to_mdx.application.use_cases import convert_path as _impl

    return _impl(
        input_path=input_path, options=options, extractor=extractor, notify=notify
    )


__all__ = [
    "ConversionNotifier",
    "ConversionOptions",
    "ConversionResult",
    "FrontMatterExtractor",
    "build_conversion_options",
    "convert_path",
]
