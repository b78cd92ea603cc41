"""Index page aggregation."""

from __future__ import annotations

from pathlib import Path
from typing import List, Sequence

from ..config import DocConfig, resolve_path
from ..logging import get_logger
from ..models import IndexEntry, RenderedPage
from .constants import SECTION_TITLES
from .html import get_environment

INDEX_NAME = "index"

logger = get_logger("index")


def read_custom_content(config: DocConfig, root: Path) -> str:
    """Return the custom index content for the configured format, or ``""``."""
    content_path = config.custom_content.for_type(config.doc_type)
    if not content_path:
        return ""

    full_path = resolve_path(root, content_path)
    if not full_path.exists():
        logger.info("Custom content file not found: %s", full_path)
        return ""
    try:
        return full_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        logger.error("Failed to read custom content %s: %s", full_path, exc)
        return ""


def render_index_markdown(
    config: DocConfig, entries: Sequence[IndexEntry], custom_content: str = ""
) -> str:
    lines: List[str] = [f"# {config.doc_name}", ""]
    if config.doc_description:
        lines.extend([config.doc_description, ""])
    if custom_content:
        lines.extend([custom_content, ""])
    lines.extend([f"## {SECTION_TITLES['components']}", ""])
    for entry in entries:
        lines.append(f"- [{entry.name}]({entry.name}.md)")
        if entry.description:
            lines.append(f"  {entry.description}")
        lines.append("")
    return "\n".join(lines) + "\n"


def render_index_html(
    config: DocConfig, entries: Sequence[IndexEntry], custom_content: str = ""
) -> str:
    template = get_environment().get_template("index.html.j2")
    return template.render(
        doc_name=config.doc_name,
        doc_description=config.doc_description,
        custom_content=custom_content,
        list_title=SECTION_TITLES["components"],
        entries=entries,
    )


def render_index(
    config: DocConfig, entries: Sequence[IndexEntry], custom_content: str = ""
) -> RenderedPage:
    """Render the index page in the configured format."""
    if config.is_markdown:
        body = render_index_markdown(config, entries, custom_content)
    else:
        body = render_index_html(config, entries, custom_content)
    return RenderedPage(doc_type=config.extension, name=INDEX_NAME, body=body)


__all__ = [
    "INDEX_NAME",
    "read_custom_content",
    "render_index",
    "render_index_html",
    "render_index_markdown",
]
