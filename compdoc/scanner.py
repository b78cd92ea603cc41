"""Component source discovery."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterator, List

from .logging import get_logger

COMPONENT_SUFFIX = ".vue"


def _iter_files(root: Path, suffix: str) -> Iterator[Path]:
    for dirpath, _dirnames, filenames in os.walk(root, onerror=_raise):
        current_dir = Path(dirpath)
        for filename in filenames:
            if os.path.splitext(filename)[1] == suffix:
                yield current_dir / filename


def _raise(error: OSError) -> None:
    raise error


class ComponentScanner:
    """Walks a components directory and collects single-file component sources."""

    def __init__(self, suffix: str = COMPONENT_SUFFIX) -> None:
        self.suffix = suffix
        self.logger = get_logger("scanner")

    def find(self, root: Path | str) -> List[Path]:
        """Return component files under ``root`` in filesystem walk order."""
        root_path = Path(root).expanduser().resolve()
        if not root_path.exists():
            raise FileNotFoundError(f"Components directory not found: {root}")
        if not root_path.is_dir():
            raise NotADirectoryError(f"Components path is not a directory: {root}")

        files = [path for path in _iter_files(root_path, self.suffix) if path.is_file()]
        self.logger.debug("Found %d %s files under %s", len(files), self.suffix, root_path)
        return files


__all__ = ["COMPONENT_SUFFIX", "ComponentScanner"]
