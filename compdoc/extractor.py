"""Adapter around the external component API parser (vue-docgen-api)."""

from __future__ import annotations

import json
import subprocess
from pathlib import Path
from typing import Any, Callable, Mapping, Optional

from .logging import get_logger
from .models import ComponentDocument, document_from_payload

# Runs under `node -e`; process.argv[1] is the component path.
_PARSE_SCRIPT = """
const { parse } = require('vue-docgen-api');
parse(process.argv[1]).then(
    (doc) => process.stdout.write(JSON.stringify(doc)),
    (err) => {
        process.stderr.write(String((err && err.message) || err));
        process.exit(1);
    }
);
"""


class ExtractionError(RuntimeError):
    """Raised when a component file cannot be parsed."""


class NodeDocgenRunner:
    """Invokes ``vue-docgen-api`` through a Node.js subprocess."""

    def __init__(self, executable: str = "node", *, cwd: Path | None = None) -> None:
        self.executable = executable
        self.cwd = cwd

    def __call__(self, path: Path) -> Mapping[str, Any]:
        args = [self.executable, "-e", _PARSE_SCRIPT, str(path)]
        try:
            completed = subprocess.run(
                args,
                check=True,
                capture_output=True,
                text=True,
                encoding="utf-8",
                cwd=str(self.cwd) if self.cwd else None,
            )
        except FileNotFoundError as exc:
            raise ExtractionError(
                f"Unable to locate '{self.executable}'. Install Node.js and vue-docgen-api."
            ) from exc
        except subprocess.CalledProcessError as exc:
            message = (exc.stderr or "").strip() or f"exit code {exc.returncode}"
            raise ExtractionError(message) from exc

        try:
            payload = json.loads(completed.stdout)
        except json.JSONDecodeError as exc:
            raise ExtractionError(f"Parser returned invalid JSON: {exc}") from exc
        if not isinstance(payload, dict):
            raise ExtractionError("Parser returned a non-object document")
        return payload


Runner = Callable[[Path], Mapping[str, Any]]


class ComponentExtractor:
    """Turns component files into documents, skipping files that fail to parse."""

    def __init__(self, runner: Runner | None = None) -> None:
        self._runner: Runner = runner or NodeDocgenRunner()
        self.logger = get_logger("extractor")

    def extract(self, path: Path) -> Optional[ComponentDocument]:
        """Return the component document for ``path``, or ``None`` when it is skipped."""
        try:
            payload = self._runner(path)
            document = document_from_payload(payload)
        except Exception as exc:  # any parser failure only skips this file
            self.logger.error("Failed to parse component %s: %s", path, exc)
            return None

        if document.display_name is None:
            self.logger.warning("Skipping component without a display name: %s", path)
            return None
        return document


__all__ = ["ComponentExtractor", "ExtractionError", "NodeDocgenRunner"]
