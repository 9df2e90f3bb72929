"""Command-line interface for md-to-mdx."""
