"""Table-of-contents generation for reference documents."""

from __future__ import annotations

import re
from typing import List

from ..render.prose import slugify
from ..render.renderer import TOC_PLACEHOLDER

_HEADING = re.compile(r"^(#{2,3})\s+(.*)$")


class TableOfContentsBuilder:
    """Replaces the ToC placeholder with links to level two and three headings."""

    PLACEHOLDER = TOC_PLACEHOLDER

    def build(self, markdown: str) -> str:
        toc_block = self._build_block(markdown)
        if not toc_block:
            return self.strip(markdown)
        if self.PLACEHOLDER in markdown:
            return markdown.replace(self.PLACEHOLDER, toc_block, 1)
        return toc_block + "\n\n" + markdown

    def strip(self, markdown: str) -> str:
        """Remove the placeholder when no table of contents is wanted."""
        return markdown.replace(self.PLACEHOLDER + "\n", "", 1).replace(self.PLACEHOLDER, "", 1)

    def _build_block(self, markdown: str) -> str:
        headings: List[tuple[int, str]] = []
        in_code = False
        for line in markdown.splitlines():
            stripped = line.strip()
            if stripped.startswith("```"):
                in_code = not in_code
                continue
            if in_code or line.startswith(" "):
                continue
            match = _HEADING.match(stripped)
            if match:
                headings.append((len(match.group(1)), match.group(2).strip()))

        if not headings:
            return ""

        output: List[str] = ["## Contents", ""]
        for level, title in headings:
            indent = "  " * (level - 2)
            output.append(f"{indent}- [{title}](#{slugify(title)})")
        return "\n".join(output)


__all__ = ["TableOfContentsBuilder"]
