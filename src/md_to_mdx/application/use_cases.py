"""Application use-cases orchestrating Markdown to MDX conversion."""

from __future__ import annotations

import logging
import os
import stat
from collections.abc import Mapping
from pathlib import Path

from md_to_mdx.adapters.frontmatter import PythonFrontmatterExtractor
from md_to_mdx.application.options import ConversionOptions
from md_to_mdx.application.paths import (
    SOURCE_SUFFIX,
    is_source_document,
    resolve_directory_output,
    resolve_file_output,
)
from md_to_mdx.application.ports import ConversionNotifier, FrontMatterExtractor
from md_to_mdx.application.results import ConversionResult
from md_to_mdx.errors import InvalidInputError, PathNotFoundError, UnsupportedPathError
from md_to_mdx.metadata import apply_adapter, render_document

logger = logging.getLogger(__name__)


def build_conversion_options(
    *,
    adapter: Mapping[str, str] | None = None,
    deep: bool = False,
    output: Path | str | None = None,
    force_file: bool = False,
) -> ConversionOptions:
    """Build typed conversion options from primitive values."""
    return ConversionOptions(
        adapter=adapter or {},
        deep=deep,
        output=Path(output) if output is not None else None,
        force_file=force_file,
    )


def convert_file(
    *,
    input_path: Path,
    output_path: Path,
    options: ConversionOptions | None = None,
    extractor: FrontMatterExtractor | None = None,
    notify: ConversionNotifier | None = None,
) -> ConversionResult:
    """Use-case: convert one Markdown file into an MDX file.

    The output file is overwritten if it exists. Read and write errors are
    propagated unchanged.
    """
    options = options or ConversionOptions()
    extractor = extractor or PythonFrontmatterExtractor()

    text = input_path.read_text(encoding="utf-8")
    document = extractor.extract(text, source=str(input_path))
    metadata = apply_adapter(document.metadata, options.adapter)
    output_path.write_text(render_document(metadata, document.body), encoding="utf-8")

    logger.info("converted %s -> %s", input_path, output_path)
    result = ConversionResult(
        source_path=input_path, output_path=output_path, metadata=metadata
    )
    if notify is not None:
        notify(result)
    return result


def convert_directory(
    *,
    directory: Path,
    options: ConversionOptions | None = None,
    extractor: FrontMatterExtractor | None = None,
    notify: ConversionNotifier | None = None,
) -> list[ConversionResult]:
    """Use-case: convert every ``.md`` file in ``directory``.

    Sub-directories are only entered when ``options.deep`` is set. Entries
    are processed in the order the filesystem lists them, and the first
    failure aborts the remaining work.
    """
    options = options or ConversionOptions()
    extractor = extractor or PythonFrontmatterExtractor()
    results: list[ConversionResult] = []
    _walk(
        directory,
        input_root=directory,
        options=options,
        extractor=extractor,
        notify=notify,
        results=results,
    )
    return results


def _walk(
    directory: Path,
    *,
    input_root: Path,
    options: ConversionOptions,
    extractor: FrontMatterExtractor,
    notify: ConversionNotifier | None,
    results: list[ConversionResult],
) -> None:
    with os.scandir(directory) as entries:
        # Release the directory handle before descending.
        entries = list(entries)

    for entry in entries:
        entry_path = directory / entry.name

        if entry.is_dir(follow_symlinks=False):
            if options.deep:
                _walk(
                    entry_path,
                    input_root=input_root,
                    options=options,
                    extractor=extractor,
                    notify=notify,
                    results=results,
                )
            else:
                logger.debug("skipping sub-directory %s", entry_path)
            continue

        if not (entry.is_file(follow_symlinks=False) and is_source_document(entry_path)):
            logger.debug("ignoring %s", entry_path)
            continue

        output_path = resolve_directory_output(entry_path, input_root, options.output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        results.append(
            convert_file(
                input_path=entry_path,
                output_path=output_path,
                options=options,
                extractor=extractor,
                notify=notify,
            )
        )


def convert_path(
    *,
    input_path: Path,
    options: ConversionOptions | None = None,
    extractor: FrontMatterExtractor | None = None,
    notify: ConversionNotifier | None = None,
) -> list[ConversionResult]:
    """Use-case: convert a Markdown file or a directory of them.

    Raises
    ------
    PathNotFoundError
        If ``input_path`` cannot be stat'ed.
    InvalidInputError
        If file mode is used on a path without the ``.md`` extension.
    UnsupportedPathError
        If ``input_path`` is neither a regular file nor a directory.
    """
    options = options or ConversionOptions()
    try:
        mode = input_path.stat().st_mode
    except OSError as exc:
        raise PathNotFoundError(f"Path not found: {input_path}") from exc

    if stat.S_ISREG(mode) or options.force_file:
        if not is_source_document(input_path):
            raise InvalidInputError(
                f"Input file must have {SOURCE_SUFFIX} extension: {input_path}"
            )
        output_path = resolve_file_output(input_path, options.output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        return [
            convert_file(
                input_path=input_path,
                output_path=output_path,
                options=options,
                extractor=extractor,
                notify=notify,
            )
        ]

    if stat.S_ISDIR(mode):
        return convert_directory(
            directory=input_path, options=options, extractor=extractor, notify=notify
        )

    raise UnsupportedPathError(f"Unsupported path type: {input_path}")
