"""Output path rules for single-file and directory conversions."""

from __future__ import annotations

from pathlib import Path

SOURCE_SUFFIX = ".md"
TARGET_SUFFIX = ".mdx"


def is_source_document(path: Path) -> bool:
    """Return whether ``path`` carries the Markdown source extension."""
    return path.suffix == SOURCE_SUFFIX


def target_name(source: Path) -> str:
    """Return the MDX file name for a Markdown source file."""
    return f"{source.stem}{TARGET_SUFFIX}"


def resolve_file_output(source: Path, output: Path | None) -> Path:
    """Resolve where a single converted file is written.

    An explicit output ending in ``.mdx`` is used verbatim, any other explicit
    output is treated as a directory, and without one the result sits next to
    the source.
    """
    if output is None:
        return source.parent / target_name(source)
    if output.suffix == TARGET_SUFFIX:
        return output
    return output / target_name(source)


def resolve_directory_output(
    source: Path, input_root: Path, output_root: Path | None
) -> Path:
    """Resolve the output of a file found while walking ``input_root``.

    With an output root the source's directory relative to ``input_root`` is
    mirrored under it; otherwise the output is a sibling of the source.
    """
    if output_root is None:
        return source.parent / target_name(source)
    relative_dir = source.parent.relative_to(input_root)
    return output_root / relative_dir / target_name(source)
