"""Typed option objects shared across conversion use-cases."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType

from md_to_mdx.types import FrontMatterAdapter


def _freeze(adapter: Mapping[str, str] | None) -> FrontMatterAdapter:
    return MappingProxyType(dict(adapter or {}))


@dataclass(frozen=True)
class ConversionOptions:
    """Shared conversion options passed through use-cases.

    ``adapter`` is copied into a read-only mapping on construction so later
    changes to the caller's dict do not leak into a running conversion.
    """

    adapter: FrontMatterAdapter = field(default_factory=dict)
    deep: bool = False
    output: Path | None = None
    force_file: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "adapter", _freeze(self.adapter))
        if self.output is not None:
            object.__setattr__(self, "output", Path(self.output))
