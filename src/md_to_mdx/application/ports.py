"""Application ports for clean architecture boundaries."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol

from md_to_mdx.application.results import ConversionResult
from md_to_mdx.types import Metadata


@dataclass(frozen=True)
class ExtractedDocument:
    """Front-matter metadata and the remaining document body."""

    metadata: Metadata = field(default_factory=dict)
    body: str = ""


class FrontMatterExtractor(Protocol):
    """Split raw document text into metadata and body."""

    def extract(self, text: str, *, source: str | None = None) -> ExtractedDocument:
        """Return extracted metadata and remaining body."""


class ConversionNotifier(Protocol):
    """Receive a notice for every document written."""

    def __call__(self, result: ConversionResult) -> None:
        """Handle one completed conversion."""
