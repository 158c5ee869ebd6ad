"""
Events - The low-level parse events the tree builder consumes.

Events are plain immutable records so that streams can come from the
YAML parser or be written out by hand (tests, other producers).
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterator, Optional

import yaml


class EventKind(Enum):
    """Kinds of parse events, in the order a parser may emit them."""

    STREAM_START = 'stream_start'
    STREAM_END = 'stream_end'
    DOCUMENT_START = 'document_start'
    DOCUMENT_END = 'document_end'
    ALIAS = 'alias'
    SCALAR = 'scalar'
    SEQUENCE_START = 'sequence_start'
    SEQUENCE_END = 'sequence_end'
    MAPPING_START = 'mapping_start'
    MAPPING_END = 'mapping_end'

    @property
    def label(self) -> str:
        """Human readable name, e.g. 'mapping-end'."""
        return self.value.replace('_', '-')


_YAML_EVENT_KINDS = {
    yaml.events.StreamStartEvent: EventKind.STREAM_START,
    yaml.events.StreamEndEvent: EventKind.STREAM_END,
    yaml.events.DocumentStartEvent: EventKind.DOCUMENT_START,
    yaml.events.DocumentEndEvent: EventKind.DOCUMENT_END,
    yaml.events.AliasEvent: EventKind.ALIAS,
    yaml.events.ScalarEvent: EventKind.SCALAR,
    yaml.events.SequenceStartEvent: EventKind.SEQUENCE_START,
    yaml.events.SequenceEndEvent: EventKind.SEQUENCE_END,
    yaml.events.MappingStartEvent: EventKind.MAPPING_START,
    yaml.events.MappingEndEvent: EventKind.MAPPING_END,
}


@dataclass(frozen=True)
class Event:
    """
    A single parse event.

    value holds the scalar text for SCALAR events. anchor holds the
    referenced anchor for ALIAS events (and the declared anchor of
    anchored nodes). line and column are 1-based and only set when the
    event came from a real parser.
    """

    kind: EventKind
    value: Optional[str] = None
    anchor: Optional[str] = None
    line: Optional[int] = None
    column: Optional[int] = None

    def __str__(self) -> str:
        if self.kind is EventKind.SCALAR:
            return f"{self.kind.label} {self.value!r}"
        if self.kind is EventKind.ALIAS:
            return f"{self.kind.label} *{self.anchor}"
        return self.kind.label

    # ========================================================================
    # CONSTRUCTORS
    # ========================================================================

    @classmethod
    def stream_start(cls) -> 'Event':
        return cls(EventKind.STREAM_START)

    @classmethod
    def stream_end(cls) -> 'Event':
        return cls(EventKind.STREAM_END)

    @classmethod
    def document_start(cls) -> 'Event':
        return cls(EventKind.DOCUMENT_START)

    @classmethod
    def document_end(cls) -> 'Event':
        return cls(EventKind.DOCUMENT_END)

    @classmethod
    def alias(cls, anchor: str) -> 'Event':
        return cls(EventKind.ALIAS, anchor=anchor)

    @classmethod
    def scalar(cls, value: str) -> 'Event':
        return cls(EventKind.SCALAR, value=value)

    @classmethod
    def sequence_start(cls) -> 'Event':
        return cls(EventKind.SEQUENCE_START)

    @classmethod
    def sequence_end(cls) -> 'Event':
        return cls(EventKind.SEQUENCE_END)

    @classmethod
    def mapping_start(cls) -> 'Event':
        return cls(EventKind.MAPPING_START)

    @classmethod
    def mapping_end(cls) -> 'Event':
        return cls(EventKind.MAPPING_END)

    @classmethod
    def from_yaml(cls, event: yaml.events.Event) -> 'Event':
        """Convert a PyYAML event object."""
        kind = _YAML_EVENT_KINDS.get(type(event))
        if kind is None:
            raise TypeError(f"unknown YAML event type: {type(event).__name__}")

        mark = event.start_mark
        line = mark.line + 1 if mark is not None else None
        column = mark.column + 1 if mark is not None else None

        return cls(
            kind,
            value=getattr(event, 'value', None),
            anchor=getattr(event, 'anchor', None),
            line=line,
            column=column,
        )


def value_events(value: Any) -> Iterator[Event]:
    """
    Yield the event stream that constructs the given value.

    Walks the tree in construction order (parents before children, keys
    before their values) wrapped in a single stream and document.
    """
    yield Event.stream_start()
    yield Event.document_start()
    if value is not None:
        yield from _node_events(value)
    yield Event.document_end()
    yield Event.stream_end()


def _node_events(value: Any) -> Iterator[Event]:
    if isinstance(value, str):
        yield Event.scalar(value)
    elif isinstance(value, list):
        yield Event.sequence_start()
        for item in value:
            yield from _node_events(item)
        yield Event.sequence_end()
    elif isinstance(value, dict):
        yield Event.mapping_start()
        for key, item in value.items():
            yield Event.scalar(key)
            yield from _node_events(item)
        yield Event.mapping_end()
    else:
        raise TypeError(f"cannot emit events for {type(value).__name__} values")
