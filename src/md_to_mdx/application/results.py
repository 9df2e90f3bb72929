"""Application-layer result objects."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from md_to_mdx.types import Metadata


@dataclass(frozen=True)
class ConversionResult:
    """Structured conversion outcome for a single document."""

    source_path: Path
    output_path: Path
    metadata: Metadata = field(default_factory=dict)
