"""Headings and labels shared by the Markdown and HTML renderers."""

from __future__ import annotations

from typing import Dict

SECTION_TITLES: Dict[str, str] = {
    "description": "组件描述",
    "examples": "组件示例",
    "props": "Props",
    "expose": "Expose (暴露的方法和属性)",
    "events": "Events",
    "slots": "Slots",
    "components": "组件列表",
}

COLUMN_NAME = "名称"
COLUMN_TYPE = "类型"
COLUMN_DEFAULT = "默认值"
COLUMN_DESCRIPTION = "描述"
COLUMN_PARAMS = "参数"

BACK_LINK_TEXT = "← 返回组件列表"
EMPTY_CELL = "-"


def example_title(index: int) -> str:
    """Fallback title for the 1-based ``index``-th example."""
    return f"示例 {index}"
