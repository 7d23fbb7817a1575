"""English prose helpers used when assembling class descriptions."""

from __future__ import annotations

import re
from typing import List, Sequence

_VOWELS = frozenset("aeiouAEIOU")
_CODE_LINE = "    "


def slugify(title: str) -> str:
    """Return the Markdown heading anchor for ``title``."""
    slug = title.lower()
    slug = re.sub(r"[^a-z0-9\s_-]", "", slug)
    slug = re.sub(r"\s+", "-", slug)
    slug = re.sub(r"-+", "-", slug)
    return slug.strip("-")


def link(name: str) -> str:
    """Return a cross-reference to the section documenting ``name``."""
    return f"[{name}](#{slugify(name)})"


def oxford_join(items: Sequence[str]) -> str:
    """Join ``items`` as an English list with a serial comma.

    >>> oxford_join(["a", "b", "c"])
    'a, b, and c'
    """
    if not items:
        return ""
    if len(items) == 1:
        return items[0]
    if len(items) == 2:
        return f"{items[0]} and {items[1]}"
    return ", ".join(items[:-1]) + f", and {items[-1]}"


def linked_join(names: Sequence[str]) -> str:
    return oxford_join([link(name) for name in names])


def article_for(word: str) -> str:
    """Pick the indefinite article from the first letter of ``word``."""
    return "an" if word[:1] in _VOWELS else "a"


def pluralize(noun: str, count: int) -> str:
    return noun if count == 1 else f"{noun}s"


def separate_code_blocks(text: str) -> str:
    """Insert a blank line before an indented code run that follows prose."""
    lines = text.split("\n")
    output: List[str] = []
    for line in lines:
        previous = output[-1] if output else None
        if (
            line.startswith(_CODE_LINE)
            and previous
            and previous.strip()
            and not previous.startswith(_CODE_LINE)
        ):
            output.append("")
        output.append(line)
    return "\n".join(output)


__all__ = [
    "article_for",
    "link",
    "linked_join",
    "oxford_join",
    "pluralize",
    "separate_code_blocks",
    "slugify",
]
