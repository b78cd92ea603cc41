"""Core data models shared across compdoc components."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, List, Mapping, Optional, Sequence, Tuple, Union


class DocumentError(ValueError):
    """Raised when extractor output cannot be interpreted as a component document."""


@dataclass(frozen=True)
class SimpleType:
    """A single named type such as ``string`` or ``Array``."""

    name: str


@dataclass(frozen=True)
class UnionType:
    """One of several nested type descriptors, in declaration order."""

    elements: Tuple["TypeDescriptor", ...]


TypeDescriptor = Union[SimpleType, UnionType]


@dataclass(frozen=True)
class Example:
    """Usage example attached to a component through an ``@example`` tag."""

    content: str
    title: Optional[str] = None


@dataclass(frozen=True)
class Tag:
    """JSDoc-style tag, e.g. ``@type {string}`` on an exposed member."""

    title: str
    description: Optional[str] = None


@dataclass(frozen=True)
class Prop:
    name: str
    type: Optional[TypeDescriptor] = None
    default_value: Optional[str] = None
    description: Optional[str] = None


@dataclass(frozen=True)
class Slot:
    name: str
    description: Optional[str] = None


@dataclass(frozen=True)
class ExposedMember:
    name: str
    tags: Tuple[Tag, ...] = ()
    description: Optional[str] = None

    @property
    def type_text(self) -> Optional[str]:
        """Return the description of the first ``type`` tag, if any."""
        for tag in self.tags:
            if tag.title == "type":
                return tag.description or None
        return None


@dataclass(frozen=True)
class EventParam:
    name: Optional[str] = None
    type_names: Tuple[str, ...] = ()
    description: Optional[str] = None


@dataclass(frozen=True)
class Event:
    name: Optional[str] = None
    description: Optional[str] = None
    properties: Tuple[EventParam, ...] = ()


@dataclass(frozen=True)
class ComponentDocument:
    """Structured public API of a single component."""

    display_name: Optional[str]
    description: Optional[str] = None
    examples: Tuple[Example, ...] = ()
    props: Mapping[str, Prop] = field(default_factory=lambda: MappingProxyType({}))
    slots: Mapping[str, Slot] = field(default_factory=lambda: MappingProxyType({}))
    expose: Tuple[ExposedMember, ...] = ()
    events: Tuple[Event, ...] = ()


@dataclass(frozen=True)
class RenderedPage:
    """Formatted output for one page, written verbatim to ``filename``."""

    doc_type: str
    name: str
    body: str

    @property
    def filename(self) -> str:
        return f"{self.name}.{self.doc_type}"


@dataclass(frozen=True)
class IndexEntry:
    name: str
    description: str = ""


def document_from_payload(payload: Any) -> ComponentDocument:
    """Convert raw extractor output into a :class:`ComponentDocument`.

    The extractor emits the JSON shape produced by ``vue-docgen-api``. Fields that are
    missing or of an unexpected type are treated as absent.
    """
    if not isinstance(payload, Mapping):
        raise DocumentError(f"Expected a mapping, got {type(payload).__name__}")

    tags = _as_mapping(payload.get("tags"))
    examples = tuple(
        Example(content=_as_str(item.get("content")) or "", title=_as_str(item.get("title")))
        for item in _iter_mappings(tags.get("examples"))
    )

    props = {}
    for key, raw in _as_mapping(payload.get("props")).items():
        if not isinstance(raw, Mapping):
            continue
        name = _as_str(raw.get("name")) or str(key)
        default = _as_mapping(raw.get("defaultValue"))
        props[name] = Prop(
            name=name,
            type=type_from_payload(raw.get("type")),
            default_value=_as_str(default.get("value")),
            description=_as_str(raw.get("description")),
        )

    slots = {}
    for key, raw in _as_mapping(payload.get("slots")).items():
        if not isinstance(raw, Mapping):
            continue
        name = _as_str(raw.get("name")) or str(key)
        slots[name] = Slot(name=name, description=_as_str(raw.get("description")))

    expose = tuple(
        ExposedMember(
            name=_as_str(item.get("name")) or "-",
            tags=tuple(
                Tag(title=_as_str(tag.get("title")) or "", description=_as_str(tag.get("description")))
                for tag in _iter_mappings(item.get("tags"))
            ),
            description=_as_str(item.get("description")),
        )
        for item in _iter_mappings(payload.get("expose"))
    )

    events = tuple(
        Event(
            name=_as_str(item.get("name")),
            description=_as_str(item.get("description")),
            properties=tuple(_param_from_payload(prop) for prop in _iter_mappings(item.get("properties"))),
        )
        for item in _iter_mappings(payload.get("events"))
    )

    return ComponentDocument(
        display_name=_as_str(payload.get("displayName")),
        description=_as_str(payload.get("description")),
        examples=examples,
        props=MappingProxyType(props),
        slots=MappingProxyType(slots),
        expose=expose,
        events=events,
    )


def type_from_payload(raw: Any) -> Optional[TypeDescriptor]:
    """Build a type descriptor from ``{"name": ..., "elements": [...]}`` payloads."""
    if not isinstance(raw, Mapping):
        return None
    name = _as_str(raw.get("name"))
    elements = raw.get("elements")
    if name == "union" and isinstance(elements, Sequence) and not isinstance(elements, str) and elements:
        nested: List[TypeDescriptor] = []
        for element in elements:
            descriptor = type_from_payload(element)
            nested.append(descriptor if descriptor is not None else SimpleType(""))
        return UnionType(elements=tuple(nested))
    return SimpleType(name or "")


def _param_from_payload(raw: Mapping[str, Any]) -> EventParam:
    type_info = _as_mapping(raw.get("type"))
    names = type_info.get("names")
    type_names: Tuple[str, ...] = ()
    if isinstance(names, Sequence) and not isinstance(names, str):
        type_names = tuple(str(item) for item in names if isinstance(item, (str, int, float)))
    return EventParam(
        name=_as_str(raw.get("name")),
        type_names=type_names,
        description=_as_str(raw.get("description")),
    )


def _as_mapping(value: Any) -> Mapping[str, Any]:
    return value if isinstance(value, Mapping) else {}


def _iter_mappings(value: Any) -> List[Mapping[str, Any]]:
    if not isinstance(value, Sequence) or isinstance(value, str):
        return []
    return [item for item in value if isinstance(item, Mapping)]


def _as_str(value: Any) -> Optional[str]:
    if isinstance(value, bool):
        return str(value).lower()
    if isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, str) and value:
        return value
    return None
