"""Infrastructure adapters for external collaborators."""

from md_to_mdx.adapters.frontmatter import PythonFrontmatterExtractor

__all__ = ["PythonFrontmatterExtractor"]
