"""Markdown rendering for component pages."""

from __future__ import annotations

from typing import List, Sequence

from ..models import ComponentDocument
from .constants import (
    COLUMN_DEFAULT,
    COLUMN_DESCRIPTION,
    COLUMN_NAME,
    COLUMN_PARAMS,
    COLUMN_TYPE,
    EMPTY_CELL,
    SECTION_TITLES,
    example_title,
)
from .formatting import expose_type, format_event_params, format_type, or_dash, quote_markdown_code


def _table(headers: Sequence[str], rows: Sequence[Sequence[str]]) -> List[str]:
    lines = ["| " + " | ".join(headers) + " |"]
    lines.append("|" + "|".join("--------" if header == COLUMN_DEFAULT else "------" for header in headers) + "|")
    for row in rows:
        lines.append("| " + " | ".join(row) + " |")
    return lines


def render_component_markdown(doc: ComponentDocument) -> str:
    """Render a component document as a Markdown page."""
    blocks: List[str] = [f"# {doc.display_name}"]

    if doc.description:
        blocks.append(f"## {SECTION_TITLES['description']}\n{doc.description}")

    if doc.examples:
        lines = [f"## {SECTION_TITLES['examples']}"]
        for index, example in enumerate(doc.examples, start=1):
            lines.append(f"### {example.title or example_title(index)}")
            lines.append(f"```html\n{example.content}\n```")
        blocks.append("\n\n".join(lines))

    if doc.props:
        rows = []
        for prop in doc.props.values():
            type_text = format_type(prop.type, markdown=True)
            rows.append(
                [
                    prop.name,
                    f"`{type_text}`" if type_text else EMPTY_CELL,
                    quote_markdown_code(prop.default_value) if prop.default_value is not None else EMPTY_CELL,
                    or_dash(prop.description),
                ]
            )
        header = [COLUMN_NAME, COLUMN_TYPE, COLUMN_DEFAULT, COLUMN_DESCRIPTION]
        blocks.append(f"## {SECTION_TITLES['props']}\n\n" + "\n".join(_table(header, rows)))

    if doc.expose:
        rows = []
        for member in doc.expose:
            type_text = expose_type(member)
            rows.append(
                [
                    member.name,
                    f"`{type_text}`" if type_text != EMPTY_CELL else EMPTY_CELL,
                    or_dash(member.description),
                ]
            )
        header = [COLUMN_NAME, COLUMN_TYPE, COLUMN_DESCRIPTION]
        blocks.append(f"## {SECTION_TITLES['expose']}\n\n" + "\n".join(_table(header, rows)))

    if doc.events:
        rows = [
            [
                or_dash(event.name),
                format_event_params(event.properties, markdown=True),
                or_dash(event.description),
            ]
            for event in doc.events
        ]
        header = [COLUMN_NAME, COLUMN_PARAMS, COLUMN_DESCRIPTION]
        blocks.append(f"## {SECTION_TITLES['events']}\n\n" + "\n".join(_table(header, rows)))

    if doc.slots:
        rows = [[slot.name, or_dash(slot.description)] for slot in doc.slots.values()]
        header = [COLUMN_NAME, COLUMN_DESCRIPTION]
        blocks.append(f"## {SECTION_TITLES['slots']}\n\n" + "\n".join(_table(header, rows)))

    return "\n\n".join(blocks) + "\n"


__all__ = ["render_component_markdown"]
