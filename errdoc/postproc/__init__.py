"""Post-processing passes applied to the rendered document."""

from .lint import MarkdownLinter
from .toc import TableOfContentsBuilder

__all__ = ["MarkdownLinter", "TableOfContentsBuilder"]
