"""Cell-level formatting helpers shared by the renderers."""

from __future__ import annotations

from typing import Optional, Sequence

from ..models import EventParam, ExposedMember, SimpleType, TypeDescriptor
from .constants import EMPTY_CELL

MAX_TYPE_DEPTH = 32

_MARKDOWN_UNION_SEPARATOR = " \\| "
_HTML_UNION_SEPARATOR = " | "

_HTML_ESCAPES = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("'", "&#039;"),
)


def escape_html(text: str) -> str:
    """Escape the five HTML-significant characters; ``&`` first so entities survive."""
    for char, entity in _HTML_ESCAPES:
        text = text.replace(char, entity)
    return text


def format_type(descriptor: Optional[TypeDescriptor], *, markdown: bool, _depth: int = 0) -> str:
    """Render a type descriptor, joining union members recursively.

    Markdown output escapes the union separator so it does not split table cells.
    Nesting deeper than ``MAX_TYPE_DEPTH`` collapses to the literal ``union``.
    """
    if descriptor is None:
        return ""
    if isinstance(descriptor, SimpleType):
        return descriptor.name
    if _depth >= MAX_TYPE_DEPTH:
        return "union"
    separator = _MARKDOWN_UNION_SEPARATOR if markdown else _HTML_UNION_SEPARATOR
    return separator.join(
        format_type(element, markdown=markdown, _depth=_depth + 1) for element in descriptor.elements
    )


def quote_markdown_code(value: str) -> str:
    """Wrap ``value`` in a single inline code span, escaping embedded backticks."""
    return "`" + value.replace("`", "\\`") + "`"


def expose_type(member: ExposedMember) -> str:
    return member.type_text or EMPTY_CELL


def format_event_params(params: Sequence[EventParam], *, markdown: bool) -> str:
    """Render event payload parameters as ``name: type - description`` items."""
    if not params:
        return EMPTY_CELL

    separator = _MARKDOWN_UNION_SEPARATOR if markdown else _HTML_UNION_SEPARATOR
    rendered = []
    for param in params:
        type_text = separator.join(param.type_names) if param.type_names else EMPTY_CELL
        if markdown:
            type_display = f"`{type_text}`"
        else:
            type_display = f"<code>{escape_html(type_text)}</code>"
        description = f" - {param.description}" if param.description else ""
        rendered.append(f"{param.name or EMPTY_CELL}: {type_display}{description}")
    return "<br>".join(rendered) if markdown else ", ".join(rendered)


def or_dash(value: Optional[str]) -> str:
    return value if value else EMPTY_CELL


__all__ = [
    "MAX_TYPE_DEPTH",
    "escape_html",
    "expose_type",
    "format_event_params",
    "format_type",
    "or_dash",
    "quote_markdown_code",
]
