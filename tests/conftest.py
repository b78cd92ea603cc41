from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Callable, Dict, List, Mapping

import pytest

from compdoc.extractor import ComponentExtractor


class StubRunner:
    """Parser double keyed by component file name."""

    def __init__(self, results: Mapping[str, Any]) -> None:
        self.results = dict(results)
        self.calls: List[Path] = []

    def __call__(self, path: Path) -> Mapping[str, Any]:
        self.calls.append(path)
        result = self.results[path.name]
        if isinstance(result, Exception):
            raise result
        return result


@pytest.fixture(autouse=True)
def _reset_compdoc_logger():
    """Undo configure_logging() so caplog keeps seeing compdoc records."""
    yield
    logger = logging.getLogger("compdoc")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def project(tmp_path: Path) -> Path:
    """Project root with an empty src/components directory."""
    (tmp_path / "src" / "components").mkdir(parents=True)
    return tmp_path


@pytest.fixture
def write_component(project: Path) -> Callable[[str], Path]:
    def _write(relative: str, content: str = "<template><div /></template>\n") -> Path:
        path = project / "src" / "components" / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def stub_extractor() -> Callable[[Dict[str, Any]], ComponentExtractor]:
    def _build(results: Dict[str, Any]) -> ComponentExtractor:
        return ComponentExtractor(StubRunner(results))

    return _build
