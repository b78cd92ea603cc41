"""HTML rendering for component pages."""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import List, Sequence

from jinja2 import Environment, FileSystemLoader

from ..models import ComponentDocument
from .constants import (
    BACK_LINK_TEXT,
    COLUMN_DEFAULT,
    COLUMN_DESCRIPTION,
    COLUMN_NAME,
    COLUMN_PARAMS,
    COLUMN_TYPE,
    EMPTY_CELL,
    SECTION_TITLES,
    example_title,
)
from .formatting import escape_html, expose_type, format_event_params, format_type, or_dash

TEMPLATES_DIR = Path(__file__).with_name("templates")


@dataclass(frozen=True)
class ExampleBlock:
    title: str
    content: str


@dataclass(frozen=True)
class Table:
    """Heading plus pre-rendered cells; cells are inserted into the page as-is."""

    title: str
    headers: Sequence[str]
    rows: Sequence[Sequence[str]]


@lru_cache(maxsize=1)
def get_environment() -> Environment:
    """Return the shared Jinja environment for page templates.

    Autoescaping is off: descriptions and custom content are trusted markup, and the
    fields that need escaping go through the ``escape_html`` filter explicitly.
    """
    env = Environment(
        loader=FileSystemLoader(str(TEMPLATES_DIR)),
        autoescape=False,
        trim_blocks=True,
        lstrip_blocks=True,
    )
    env.filters["escape_html"] = escape_html
    return env


def _code(text: str) -> str:
    return f"<code>{escape_html(text)}</code>" if text else EMPTY_CELL


def _build_tables(doc: ComponentDocument) -> List[Table]:
    tables: List[Table] = []
    if doc.props:
        tables.append(
            Table(
                title=SECTION_TITLES["props"],
                headers=(COLUMN_NAME, COLUMN_TYPE, COLUMN_DEFAULT, COLUMN_DESCRIPTION),
                rows=[
                    (
                        prop.name,
                        _code(format_type(prop.type, markdown=False)),
                        _code(prop.default_value) if prop.default_value is not None else EMPTY_CELL,
                        or_dash(prop.description),
                    )
                    for prop in doc.props.values()
                ],
            )
        )
    if doc.expose:
        rows = []
        for member in doc.expose:
            type_text = expose_type(member)
            rows.append(
                (
                    member.name,
                    _code(type_text) if type_text != EMPTY_CELL else EMPTY_CELL,
                    or_dash(member.description),
                )
            )
        tables.append(
            Table(
                title=SECTION_TITLES["expose"],
                headers=(COLUMN_NAME, COLUMN_TYPE, COLUMN_DESCRIPTION),
                rows=rows,
            )
        )
    if doc.events:
        tables.append(
            Table(
                title=SECTION_TITLES["events"],
                headers=(COLUMN_NAME, COLUMN_PARAMS, COLUMN_DESCRIPTION),
                rows=[
                    (
                        or_dash(event.name),
                        format_event_params(event.properties, markdown=False),
                        or_dash(event.description),
                    )
                    for event in doc.events
                ],
            )
        )
    if doc.slots:
        tables.append(
            Table(
                title=SECTION_TITLES["slots"],
                headers=(COLUMN_NAME, COLUMN_DESCRIPTION),
                rows=[(slot.name, or_dash(slot.description)) for slot in doc.slots.values()],
            )
        )
    return tables


def render_component_html(doc: ComponentDocument, doc_name: str, component_name: str) -> str:
    """Render a standalone HTML page for ``doc`` linking back to ``index.html``."""
    examples = [
        ExampleBlock(title=example.title or example_title(index), content=example.content)
        for index, example in enumerate(doc.examples, start=1)
    ]
    template = get_environment().get_template("component.html.j2")
    return template.render(
        doc=doc,
        doc_name=doc_name,
        component_name=component_name,
        back_link_text=BACK_LINK_TEXT,
        titles=SECTION_TITLES,
        examples=examples,
        tables=_build_tables(doc),
    )


__all__ = ["get_environment", "render_component_html"]
