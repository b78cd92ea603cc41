"""Page renderers for component documentation."""

from .html import render_component_html
from .index import read_custom_content, render_index, render_index_html, render_index_markdown
from .markdown import render_component_markdown

__all__ = [
    "read_custom_content",
    "render_component_html",
    "render_component_markdown",
    "render_index",
    "render_index_html",
    "render_index_markdown",
]
