"""Exception hierarchy for Markdown to MDX conversion."""

from __future__ import annotations


class MdxConversionError(Exception):
    """Base error for conversion failures surfaced to users."""

    exit_code: int = 1


class ArgumentError(MdxConversionError):
    """Raised when command-line tokens cannot be parsed."""


class PathNotFoundError(MdxConversionError):
    """Raised when the input path does not exist."""


class InvalidInputError(MdxConversionError):
    """Raised when a file input does not carry the Markdown extension."""


class UnsupportedPathError(MdxConversionError):
    """Raised when the input is neither a regular file nor a directory."""


class FrontMatterError(MdxConversionError):
    """Raised when a document's front matter cannot be parsed."""


class MetadataSerializationError(MdxConversionError):
    """Raised when a metadata value has no JSON representation."""


class ConfigError(MdxConversionError):
    """Raised when runtime settings from the environment are invalid."""
