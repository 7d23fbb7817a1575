"""Markdown rendering for exception reference documents."""

from .prose import link, linked_join, oxford_join
from .renderer import DocumentRenderer, returns_sentence

__all__ = [
    "DocumentRenderer",
    "link",
    "linked_join",
    "oxford_join",
    "returns_sentence",
]
