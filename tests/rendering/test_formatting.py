"""Tests for compdoc.rendering.formatting."""

from __future__ import annotations

from compdoc.models import EventParam, ExposedMember, SimpleType, Tag, UnionType
from compdoc.rendering.formatting import (
    MAX_TYPE_DEPTH,
    escape_html,
    expose_type,
    format_event_params,
    format_type,
    quote_markdown_code,
)


def test_format_type_simple() -> None:
    assert format_type(SimpleType("string"), markdown=True) == "string"
    assert format_type(None, markdown=False) == ""


def test_format_type_union_separators() -> None:
    union = UnionType(elements=(SimpleType("primary"), SimpleType("secondary")))

    assert format_type(union, markdown=False) == "primary | secondary"
    assert format_type(union, markdown=True) == "primary \\| secondary"


def test_format_type_nested_union_is_flattened_recursively() -> None:
    union = UnionType(
        elements=(
            SimpleType("string"),
            UnionType(elements=(SimpleType("number"), SimpleType("boolean"))),
        )
    )

    assert format_type(union, markdown=False) == "string | number | boolean"
    assert format_type(union, markdown=True) == "string \\| number \\| boolean"


def test_format_type_stops_at_depth_limit() -> None:
    descriptor = SimpleType("leaf")
    for _ in range(MAX_TYPE_DEPTH + 5):
        descriptor = UnionType(elements=(descriptor, SimpleType("null")))

    rendered = format_type(descriptor, markdown=False)

    assert rendered.startswith("union | null")
    assert "leaf" not in rendered


def test_escape_html_covers_all_five_characters() -> None:
    assert escape_html("<a href=\"x\">Tom & 'Jerry'</a>") == (
        "&lt;a href=&quot;x&quot;&gt;Tom &amp; &#039;Jerry&#039;&lt;/a&gt;"
    )


def test_escape_html_does_not_double_escape_ampersands() -> None:
    assert escape_html("&lt;") == "&amp;lt;"


def test_quote_markdown_code_escapes_backticks() -> None:
    assert quote_markdown_code("`hello`") == "`\\`hello\\``"
    assert quote_markdown_code("'small'") == "`'small'`"


def test_expose_type_uses_type_tag() -> None:
    typed = ExposedMember(name="open", tags=(Tag("since", "1.2"), Tag("type", "() => void")))
    untyped = ExposedMember(name="close")

    assert expose_type(typed) == "() => void"
    assert expose_type(untyped) == "-"


def test_format_event_params_markdown() -> None:
    params = (
        EventParam(name="value", type_names=("string", "number"), description="new value"),
        EventParam(name="event", type_names=("Event",)),
    )

    assert format_event_params(params, markdown=True) == (
        "value: `string \\| number` - new value<br>event: `Event`"
    )


def test_format_event_params_html() -> None:
    params = (
        EventParam(name="items", type_names=("Array<Item>",), description="selection"),
        EventParam(name="raw"),
    )

    assert format_event_params(params, markdown=False) == (
        "items: <code>Array&lt;Item&gt;</code> - selection, raw: <code>-</code>"
    )


def test_format_event_params_empty() -> None:
    assert format_event_params((), markdown=True) == "-"
    assert format_event_params((), markdown=False) == "-"
