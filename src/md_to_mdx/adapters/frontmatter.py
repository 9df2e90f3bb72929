"""Front-matter extraction backed by ``python-frontmatter``."""

from __future__ import annotations

import frontmatter
import yaml

from md_to_mdx.application.ports import ExtractedDocument
from md_to_mdx.errors import FrontMatterError


class PythonFrontmatterExtractor:
    """Split documents with the handlers ``python-frontmatter`` detects.

    YAML (``---``) blocks are always supported; JSON and TOML (``+++``)
    blocks are recognised when the library's handlers for them are available.
    """

    def extract(self, text: str, *, source: str | None = None) -> ExtractedDocument:
        """Return the metadata mapping and body of ``text``.

        Parameters
        ----------
        text : str
            Raw document text.
        source : str | None, default=None
            Optional document label used in error messages.

        Raises
        ------
        FrontMatterError
            If a front-matter block is present but cannot be decoded.
        """
        try:
            metadata, body = frontmatter.parse(text)
        except (yaml.YAMLError, ValueError) as exc:
            label = source or "<string>"
            raise FrontMatterError(f"Invalid front matter in {label}: {exc}") from exc
        return ExtractedDocument(metadata=dict(metadata), body=body)
