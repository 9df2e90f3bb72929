"""Shared type aliases for metadata and adapter mappings."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

type FrontMatterAdapter = Mapping[str, str]
type Metadata = dict[str, Any]
