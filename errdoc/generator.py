"""Pipeline orchestration for exception reference generation."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from .config import ErrDocConfig
from .discovery import ClassDiscoverer
from .errors import ClassLoadError
from .introspect import MetadataIntrospector
from .loader import ManifestLoader
from .logging import get_logger
from .models import ClassDefinition
from .postproc.lint import MarkdownLinter
from .postproc.toc import TableOfContentsBuilder
from .render.renderer import DocumentRenderer


@dataclass
class GenerationResult:
    """Rendered document plus the classes that made it in or were skipped."""

    document: str
    documented: List[str] = field(default_factory=list)
    skipped: List[str] = field(default_factory=list)


class ReferenceGenerator:
    """Coordinates discovery, loading, rendering and post-processing."""

    def __init__(
        self,
        config: ErrDocConfig,
        *,
        linter: MarkdownLinter | None = None,
        toc_builder: TableOfContentsBuilder | None = None,
    ) -> None:
        self.config = config
        self.linter = linter or MarkdownLinter()
        self.toc_builder = toc_builder or TableOfContentsBuilder()
        self.logger = get_logger("generator")

    def run(self) -> GenerationResult:
        """Generate the reference document for the configured source directory."""
        config = self.config
        self.logger.info("Generating exception reference from %s", config.source_dir)

        discoverer = ClassDiscoverer(
            config.source_dir,
            pattern=config.pattern,
            namespace=config.namespace,
        )
        paths = dict(discoverer.iter_paths())
        loader = ManifestLoader(paths, root_base=config.root_base)

        result = GenerationResult(document="")
        classes: List[ClassDefinition] = []
        for name in sorted(paths):
            if name == config.root_base:
                self.logger.debug("Skipping %s; the root base is described in the header", name)
                continue
            try:
                classes.append(loader.load(name))
            except ClassLoadError as exc:
                self.logger.warning("Skipping %s: %s", name, exc.reason)
                result.skipped.append(name)
                continue
            result.documented.append(name)

        self.logger.debug("Loaded %d classes (%d skipped)", len(classes), len(result.skipped))

        renderer = DocumentRenderer(MetadataIntrospector(loader), root_base=config.root_base)
        markdown = renderer.render_document(classes, title=config.title)
        if config.toc:
            markdown = self.toc_builder.build(markdown)
        else:
            markdown = self.toc_builder.strip(markdown)
        result.document = self.linter.lint(markdown)

        self.logger.info("Documented %d exception classes", len(result.documented))
        return result


__all__ = ["GenerationResult", "ReferenceGenerator"]
