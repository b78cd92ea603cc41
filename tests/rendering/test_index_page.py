"""Tests for compdoc.rendering.index."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from compdoc.config import DEFAULT_CONFIG, merge_config
from compdoc.models import IndexEntry
from compdoc.rendering.index import read_custom_content, render_index, render_index_html, render_index_markdown

ENTRIES = [IndexEntry("Button", "Clickable"), IndexEntry("Avatar", "")]


def test_markdown_index_layout() -> None:
    config = merge_config(DEFAULT_CONFIG, {"docType": "md", "docName": "UI Kit", "docDescription": "Widgets"})

    rendered = render_index_markdown(config, ENTRIES, "Custom **intro**")

    assert rendered == (
        "# UI Kit\n\n"
        "Widgets\n\n"
        "Custom **intro**\n\n"
        "## 组件列表\n\n"
        "- [Button](Button.md)\n"
        "  Clickable\n\n"
        "- [Avatar](Avatar.md)\n\n"
    )


def test_markdown_index_skips_empty_blocks() -> None:
    config = merge_config(DEFAULT_CONFIG, {"docType": "md"})

    rendered = render_index_markdown(config, [])

    assert rendered == "# Vue Component API Documentation\n\n## 组件列表\n\n"


def test_html_index_lists_entries_in_order() -> None:
    config = merge_config(DEFAULT_CONFIG, {"docName": "UI Kit", "docDescription": "Widgets"})

    html = render_index_html(config, ENTRIES, '<div class="banner">Hello & welcome</div>')

    assert "<title>UI Kit</title>" in html
    assert '<p class="doc-description">Widgets</p>' in html
    assert '<div class="banner">Hello & welcome</div>' in html
    assert '<a href="Button.html" class="component-link">Button</a>' in html
    assert '<p class="component-desc">Clickable</p>' in html
    assert html.index("Button.html") < html.index("Avatar.html")
    assert html.count('class="component-desc"') == 1


def test_html_index_omits_description_paragraph_when_empty() -> None:
    html = render_index_html(DEFAULT_CONFIG, [])

    assert "doc-description\">" not in html
    assert "<h2>组件列表</h2>" in html


def test_render_index_picks_format() -> None:
    md_page = render_index(merge_config(DEFAULT_CONFIG, {"docType": "md"}), ENTRIES)
    html_page = render_index(DEFAULT_CONFIG, ENTRIES)

    assert md_page.filename == "index.md"
    assert html_page.filename == "index.html"
    assert html_page.body.startswith("<!DOCTYPE html>")


def test_read_custom_content_uses_configured_format(tmp_path: Path) -> None:
    (tmp_path / "intro.md").write_text("md intro", encoding="utf-8")
    (tmp_path / "intro.html").write_text("<p>html intro</p>", encoding="utf-8")
    overrides = {"customContent": {"md": "intro.md", "html": "intro.html"}}

    assert read_custom_content(merge_config(DEFAULT_CONFIG, {**overrides, "docType": "md"}), tmp_path) == "md intro"
    assert read_custom_content(merge_config(DEFAULT_CONFIG, overrides), tmp_path) == "<p>html intro</p>"


def test_read_custom_content_missing_file_is_empty(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    config = merge_config(DEFAULT_CONFIG, {"customContent": {"html": "nope.html"}})

    with caplog.at_level(logging.INFO, logger="compdoc"):
        content = read_custom_content(config, tmp_path)

    assert content == ""
    assert any("nope.html" in record.getMessage() for record in caplog.records)


def test_read_custom_content_unset_is_empty(tmp_path: Path) -> None:
    assert read_custom_content(DEFAULT_CONFIG, tmp_path) == ""


def test_read_custom_content_unreadable_file_is_empty(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    (tmp_path / "banner.html").mkdir()
    (tmp_path / "latin1.md").write_bytes(b"caf\xe9 \xff")

    with caplog.at_level(logging.ERROR, logger="compdoc"):
        from_dir = read_custom_content(merge_config(DEFAULT_CONFIG, {"customContent": {"html": "banner.html"}}), tmp_path)
        from_bytes = read_custom_content(
            merge_config(DEFAULT_CONFIG, {"docType": "md", "customContent": {"md": "latin1.md"}}), tmp_path
        )

    assert from_dir == ""
    assert from_bytes == ""
    errors = [record.getMessage() for record in caplog.records if record.levelno == logging.ERROR]
    assert any("banner.html" in message for message in errors)
    assert any("latin1.md" in message for message in errors)
