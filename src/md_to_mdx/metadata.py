"""Metadata key remapping and MDX document rendering."""

from __future__ import annotations

import json
import math
from collections.abc import Mapping
from datetime import date, datetime, time, timezone
from typing import Any

from md_to_mdx.errors import MetadataSerializationError
from md_to_mdx.types import FrontMatterAdapter, Metadata

EXPORT_PREFIX = "export const metadata = "


def apply_adapter(
    metadata: Mapping[Any, Any], adapter: FrontMatterAdapter | None = None
) -> Metadata:
    """Rename metadata keys according to ``adapter``.

    Parameters
    ----------
    metadata : Mapping
        Front-matter record as produced by the extractor.
    adapter : Mapping[str, str] | None, default=None
        Source key to target key mapping. Keys missing from the adapter are
        kept as-is.

    Returns
    -------
    dict[str, Any]
        New record in the original iteration order. When two source keys map
        to the same target, the one iterated last wins.
    """
    adapter = adapter or {}
    mapped: Metadata = {}
    for key, value in metadata.items():
        name = str(key)
        mapped[adapter.get(name, name)] = value
    return mapped


def _isoformat_utc(value: date) -> str:
    if not isinstance(value, datetime):
        value = datetime.combine(value, time(), tzinfo=timezone.utc)
    elif value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    value = value.astimezone(timezone.utc)
    return value.strftime("%Y-%m-%dT%H:%M:%S.") + f"{value.microsecond // 1000:03d}Z"


def _replace_non_finite(value: Any) -> Any:
    if isinstance(value, float) and not math.isfinite(value):
        return None
    if isinstance(value, dict):
        return {key: _replace_non_finite(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_replace_non_finite(item) for item in value]
    return value


def _json_default(value: object) -> object:
    if isinstance(value, date):
        return _isoformat_utc(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def serialize_metadata(metadata: Mapping[str, Any]) -> str:
    """Serialize metadata as a 2-space indented JSON object.

    Infinite and NaN floats are written as ``null``.
    """
    try:
        return json.dumps(
            _replace_non_finite(dict(metadata)),
            indent=2,
            ensure_ascii=False,
            allow_nan=False,
            default=_json_default,
        )
    except (TypeError, ValueError) as exc:
        raise MetadataSerializationError(
            f"Metadata cannot be exported as JSON: {exc}"
        ) from exc


def render_document(metadata: Mapping[str, Any], body: str) -> str:
    """Build the MDX text: metadata export, blank line, body, one newline.

    Leading whitespace of ``body`` is dropped and trailing line breaks are
    collapsed so the document always ends with exactly one newline.
    """
    content = body.lstrip().rstrip("\r\n")
    return f"{EXPORT_PREFIX}{serialize_metadata(metadata)};\n\n{content}\n"
