"""Persist rendered pages to the output directory."""

from __future__ import annotations

import os
from pathlib import Path

from .logging import get_logger
from .models import RenderedPage


def is_safe_page_name(name: str) -> bool:
    """Return True when ``name`` maps to a single file directly inside the output directory."""
    if not name or name in {".", ".."}:
        return False
    separators = {"/", "\\", os.sep}
    if os.altsep:
        separators.add(os.altsep)
    return not any(sep in name for sep in separators) and "\0" not in name


class PageWriter:
    """Writes rendered pages as UTF-8 files, overwriting existing output."""

    def __init__(self, out_dir: Path) -> None:
        self.out_dir = Path(out_dir)
        self.logger = get_logger("writer")

    def ensure_dir(self) -> Path:
        self.out_dir.mkdir(parents=True, exist_ok=True)
        return self.out_dir

    def write(self, page: RenderedPage) -> Path:
        return self.write_text(page.filename, page.body)

    def write_text(self, filename: str, body: str) -> Path:
        path = self.out_dir / filename
        # newline="" keeps output byte-identical across platforms.
        with path.open("w", encoding="utf-8", newline="") as handle:
            handle.write(body)
        self.logger.debug("Wrote %s (%d chars)", path, len(body))
        return path


__all__ = ["PageWriter", "is_safe_page_name"]
