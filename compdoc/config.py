"""Configuration loading for compdoc (component.doc.json)."""

from __future__ import annotations

import json
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from .logging import get_logger

CONFIG_FILENAME = "component.doc.json"

DOC_TYPE_HTML = "html"
DOC_TYPE_MARKDOWN = "md"
DOC_TYPES = (DOC_TYPE_HTML, DOC_TYPE_MARKDOWN)
_DOC_TYPE_ALIASES = {"markdown": DOC_TYPE_MARKDOWN}

_SCALAR_KEYS = {
    "docType": "doc_type",
    "docName": "doc_name",
    "docDescription": "doc_description",
    "componentsDir": "components_dir",
    "outDir": "out_dir",
}

logger = get_logger("config")


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass(frozen=True)
class CustomContent:
    """Paths to raw content injected into the index page, per output format."""

    md: str = ""
    html: str = ""

    def for_type(self, doc_type: str) -> str:
        return self.md if doc_type == DOC_TYPE_MARKDOWN else self.html


@dataclass(frozen=True)
class DocConfig:
    """Effective settings for a documentation run."""

    doc_type: str = DOC_TYPE_HTML
    doc_name: str = "Vue Component API Documentation"
    doc_description: str = ""
    components_dir: str = "src/components"
    out_dir: str = "dist/component-doc"
    custom_content: CustomContent = field(default_factory=CustomContent)
    node_executable: str = "node"

    @property
    def is_markdown(self) -> bool:
        return self.doc_type == DOC_TYPE_MARKDOWN

    @property
    def extension(self) -> str:
        return DOC_TYPE_MARKDOWN if self.is_markdown else DOC_TYPE_HTML

    def as_dict(self) -> Dict[str, Any]:
        """Return the configuration using the on-disk key names."""
        return {
            "docType": self.doc_type,
            "docName": self.doc_name,
            "docDescription": self.doc_description,
            "componentsDir": self.components_dir,
            "outDir": self.out_dir,
            "customContent": {"md": self.custom_content.md, "html": self.custom_content.html},
            "nodeExecutable": self.node_executable,
        }


DEFAULT_CONFIG = DocConfig()


def merge_config(base: DocConfig, overrides: Mapping[str, Any]) -> DocConfig:
    """Return ``base`` with ``overrides`` applied.

    Top-level keys replace the base value outright. ``customContent`` is merged key by
    key so that an override for one format keeps the other format's path. Unknown keys
    and values of the wrong type are ignored; a non-string ``docType`` is reported and
    replaced with html. The format is not validated here; see
    :func:`validate_config`.
    """
    changes: Dict[str, Any] = {}
    for key, attr in _SCALAR_KEYS.items():
        value = overrides.get(key)
        if isinstance(value, str):
            changes[attr] = value

    if "docType" in overrides and not isinstance(overrides["docType"], str):
        logger.warning(
            "Invalid docType %r in configuration; falling back to %s",
            overrides["docType"],
            DOC_TYPE_HTML,
        )
        changes["doc_type"] = DOC_TYPE_HTML

    node = overrides.get("nodeExecutable")
    if isinstance(node, str) and node:
        changes["node_executable"] = node

    custom = overrides.get("customContent")
    if isinstance(custom, Mapping):
        custom_changes = {
            key: value
            for key, value in custom.items()
            if key in DOC_TYPES and isinstance(value, str)
        }
        changes["custom_content"] = replace(base.custom_content, **custom_changes)

    return replace(base, **changes)


def validate_config(config: DocConfig) -> DocConfig:
    """Normalise the output format, falling back to html for unknown values."""
    doc_type = _DOC_TYPE_ALIASES.get(config.doc_type, config.doc_type)
    if doc_type not in DOC_TYPES:
        logger.warning(
            "Invalid docType %r in configuration; falling back to %s",
            config.doc_type,
            DOC_TYPE_HTML,
        )
        doc_type = DOC_TYPE_HTML
    if doc_type == config.doc_type:
        return config
    return replace(config, doc_type=doc_type)


def load_config(root: Path, overrides: Optional[Mapping[str, Any]] = None) -> DocConfig:
    """Resolve the configuration for a run rooted at ``root``.

    Defaults are overridden by ``component.doc.json`` when it exists, then by
    ``overrides`` (usually populated from command-line flags). A malformed file is
    logged and ignored.
    """
    config = DEFAULT_CONFIG
    config_file = Path(root) / CONFIG_FILENAME
    if config_file.exists():
        try:
            config = merge_config(config, _read_config(config_file))
        except ConfigError as exc:
            logger.error("Failed to load configuration file: %s", exc)
    if overrides:
        config = merge_config(config, overrides)
    return validate_config(config)


def resolve_path(root: Path, value: str) -> Path:
    """Resolve a configured path relative to the invocation root."""
    path = Path(value).expanduser()
    if not path.is_absolute():
        path = Path(root) / path
    return path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Unable to read {path.name}: {exc}") from exc
    try:
        loaded = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    if not isinstance(loaded, dict):
        raise ConfigError(f"{path.name} must contain a JSON object at the root")
    return loaded


__all__ = [
    "CONFIG_FILENAME",
    "ConfigError",
    "CustomContent",
    "DEFAULT_CONFIG",
    "DOC_TYPES",
    "DOC_TYPE_HTML",
    "DOC_TYPE_MARKDOWN",
    "DocConfig",
    "load_config",
    "merge_config",
    "resolve_path",
    "validate_config",
]
