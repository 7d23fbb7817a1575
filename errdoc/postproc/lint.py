"""Whitespace normalisation for generated markdown."""

from __future__ import annotations

from typing import List

_CODE_INDENT = "    "


class MarkdownLinter:
    """Normalises line endings, blank runs and heading spacing.

    Fenced blocks and indented code samples are copied verbatim: blank lines
    between two indented lines survive, and indented lines keep their
    trailing whitespace. Everything else is right-stripped and blank runs
    collapse to a single line.
    """

    def lint(self, markdown: str) -> str:
        normalized = markdown.replace("\r\n", "\n").replace("\r", "\n")
        cleaned: List[str] = []
        in_fence = False
        pending_blanks = 0

        for line in normalized.split("\n"):
            stripped = line.rstrip()
            if in_fence:
                cleaned.append(stripped)
                if stripped.startswith("```"):
                    in_fence = False
                continue

            if not stripped:
                pending_blanks += 1
                continue

            indented = line.startswith(_CODE_INDENT)
            if cleaned and pending_blanks:
                inside_sample = indented and cleaned[-1].startswith(_CODE_INDENT)
                cleaned.extend([""] * (pending_blanks if inside_sample else 1))
            elif cleaned and stripped.startswith("#"):
                cleaned.append("")
            pending_blanks = 0

            if stripped.startswith("```"):
                in_fence = True
                cleaned.append(stripped)
                continue
            cleaned.append(line if indented else stripped)

        return "\n".join(cleaned) + "\n"


__all__ = ["MarkdownLinter"]
