"""Pipeline orchestration for a documentation run."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, List, Mapping, Optional

from .config import DocConfig, load_config, resolve_path
from .extractor import ComponentExtractor, NodeDocgenRunner
from .logging import get_logger
from .models import ComponentDocument, IndexEntry, RenderedPage
from .rendering import read_custom_content, render_component_html, render_component_markdown, render_index
from .scanner import ComponentScanner
from .writer import PageWriter, is_safe_page_name


@dataclass
class RunResult:
    """Outcome of a documentation run."""

    config: DocConfig
    out_dir: Path
    written: List[Path] = field(default_factory=list)
    skipped: List[Path] = field(default_factory=list)
    entries: List[IndexEntry] = field(default_factory=list)
    index_path: Optional[Path] = None


def render_component(doc: ComponentDocument, config: DocConfig) -> RenderedPage:
    """Render ``doc`` in the configured output format."""
    name = doc.display_name or ""
    if config.is_markdown:
        body = render_component_markdown(doc)
    else:
        body = render_component_html(doc, config.doc_name, name)
    return RenderedPage(doc_type=config.extension, name=name, body=body)


class Orchestrator:
    """Coordinates discovery, extraction, rendering and writing of component docs."""

    def __init__(
        self,
        scanner: ComponentScanner | None = None,
        extractor: ComponentExtractor | None = None,
    ) -> None:
        self.scanner = scanner or ComponentScanner()
        self._extractor = extractor
        self.logger = get_logger("orchestrator")

    def run(self, path: str | Path = ".", overrides: Mapping[str, Any] | None = None) -> RunResult:
        """Generate documentation for the project rooted at ``path``."""
        root = Path(path).expanduser().resolve()
        config = load_config(root, overrides)
        self.logger.info("Using configuration: %s", json.dumps(config.as_dict(), ensure_ascii=False))

        writer = PageWriter(resolve_path(root, config.out_dir))
        writer.ensure_dir()
        result = RunResult(config=config, out_dir=writer.out_dir)

        components_dir = resolve_path(root, config.components_dir)
        self.logger.info("Searching for components under %s", components_dir)
        files = self.scanner.find(components_dir)
        if not files:
            self.logger.info("No component files found")
            return result
        self.logger.info("Found %d component files", len(files))

        extractor = self._resolve_extractor(config, root)
        for file in files:
            doc = extractor.extract(file)
            if doc is None or doc.display_name is None:
                self.logger.warning("Skipping invalid component file: %s", file)
                result.skipped.append(file)
                continue
            if not is_safe_page_name(doc.display_name):
                self.logger.warning(
                    "Skipping component %s: display name %r is not a valid file name", file, doc.display_name
                )
                result.skipped.append(file)
                continue

            result.entries.append(IndexEntry(name=doc.display_name, description=doc.description or ""))
            output = writer.write(render_component(doc, config))
            result.written.append(output)
            self.logger.info("Generated component doc: %s", output)

        custom_content = read_custom_content(config, root)
        result.index_path = writer.write(render_index(config, result.entries, custom_content))
        self.logger.info("Generated index: %s", result.index_path)
        self.logger.info("Documentation generation complete")
        return result

    def _resolve_extractor(self, config: DocConfig, root: Path) -> ComponentExtractor:
        if self._extractor is not None:
            return self._extractor
        return ComponentExtractor(NodeDocgenRunner(config.node_executable, cwd=root))


__all__ = ["Orchestrator", "RunResult", "render_component"]
