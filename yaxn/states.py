"""
Builder State Classes - Each state handles events and determines transitions.

Every state is an EventHandler. Whatever a state does not override is an
event that cannot occur at that point of a well-formed single document,
and raises MalformedDocumentError.
"""

from typing import TYPE_CHECKING

from .errors import MalformedDocumentError, UnsupportedFeatureError
from .events import Event
from .handler import EventHandler

if TYPE_CHECKING:
    from .builder import TreeBuilder


class ParserState(EventHandler):
    """Base class for builder states."""

    name = "base"

    def __init__(self, builder: 'TreeBuilder' = None):
        self.builder = builder

    def unexpected(self, event: Event) -> None:
        raise MalformedDocumentError.at(
            f"unexpected {event.kind.label} event in state {self.name}", event
        )

    on_stream_start = unexpected
    on_stream_end = unexpected
    on_document_start = unexpected
    on_document_end = unexpected
    on_alias = unexpected
    on_scalar = unexpected
    on_sequence_start = unexpected
    on_sequence_end = unexpected
    on_mapping_start = unexpected
    on_mapping_end = unexpected


# ========================================================================
# STREAM LEVEL STATES
# ========================================================================

class StreamStartState(ParserState):
    """Nothing consumed yet, expecting stream-start."""

    name = "STREAM_START"

    def on_stream_start(self, event: Event) -> None:
        self.builder._transition(DocumentWaitState(self.builder))


class DocumentWaitState(ParserState):
    """Between documents, expecting document-start or stream-end."""

    name = "DOCUMENT_WAIT"

    def on_document_start(self, event: Event) -> None:
        if self.builder.documents:
            raise MalformedDocumentError.at("multiple documents are not supported", event)
        self.builder._transition(RootState(self.builder))

    def on_stream_end(self, event: Event) -> None:
        self.builder._finish()


class DoneState(ParserState):
    """Stream-end consumed, nothing else may follow."""

    name = "DONE"

    def unexpected(self, event: Event) -> None:
        raise MalformedDocumentError.at(f"{event.kind.label} event after stream-end", event)

    on_stream_start = unexpected
    on_stream_end = unexpected
    on_document_start = unexpected
    on_document_end = unexpected
    on_alias = unexpected
    on_scalar = unexpected
    on_sequence_start = unexpected
    on_sequence_end = unexpected
    on_mapping_start = unexpected
    on_mapping_end = unexpected


# ========================================================================
# DOCUMENT LEVEL STATES
# ========================================================================

class InDocumentState(ParserState):
    """Inside a document. Container ends are checked against the stack."""

    name = "IN_DOCUMENT"

    def on_stream_end(self, event: Event) -> None:
        builder = self.builder
        if builder.pending_key is not None:
            raise MalformedDocumentError.at(
                f"stream ended while key {builder.pending_key!r} has no value", event
            )
        if builder.tracker.depth:
            raise MalformedDocumentError.at(
                f"stream ended with {builder.tracker.depth} open container(s) "
                f"at {builder.tracker.get_path() or '/'}",
                event,
            )
        raise MalformedDocumentError.at("stream ended before document-end", event)

    def on_document_end(self, event: Event) -> None:
        raise MalformedDocumentError.at(
            f"document ended with {self.builder.tracker.depth} open container(s) "
            f"at {self.builder.tracker.get_path() or '/'}",
            event,
        )

    def on_sequence_end(self, event: Event) -> None:
        self.builder._end_container(list, event)

    def on_mapping_end(self, event: Event) -> None:
        self.builder._end_container(dict, event)


class ValueState(InDocumentState):
    """A position where the next node is a value (root, array item, mapping value)."""

    name = "VALUE"

    def on_scalar(self, event: Event) -> None:
        self.builder._attach(event.value, event)
        self.builder._transition(self.builder._state_for_top())

    def on_alias(self, event: Event) -> None:
        self.builder._attach(self.builder._alias_value(event), event)
        self.builder._transition(self.builder._state_for_top())

    def on_sequence_start(self, event: Event) -> None:
        self.builder._start_container([], event)
        self.builder._transition(InSequenceState(self.builder))

    def on_mapping_start(self, event: Event) -> None:
        self.builder._start_container({}, event)
        self.builder._transition(MappingKeyState(self.builder))


class RootState(ValueState):
    """Inside a document, before its root value."""

    name = "ROOT"

    def on_document_end(self, event: Event) -> None:
        # Empty document
        self.builder._attach(None, event)
        self.builder._end_document()


class DocumentEndState(InDocumentState):
    """Root value complete, expecting document-end."""

    name = "DOCUMENT_END"

    def on_document_end(self, event: Event) -> None:
        self.builder._end_document()


# ========================================================================
# CONTAINER STATES
# ========================================================================

class InSequenceState(ValueState):
    """Inside a sequence, waiting for an item or the end."""

    name = "IN_SEQUENCE"


class MappingKeyState(InDocumentState):
    """Inside a mapping, waiting for a key or the end."""

    name = "MAPPING_KEY"

    def on_scalar(self, event: Event) -> None:
        self.builder._pending_key = event.value
        self.builder._transition(MappingValueState(self.builder))

    def on_alias(self, event: Event) -> None:
        # Keys are strings, so an alias key stays unsupported whatever the alias policy
        raise UnsupportedFeatureError.at(f"alias *{event.anchor} used as a mapping key", event)

    def _complex_key(self, event: Event) -> None:
        raise MalformedDocumentError.at(
            f"mapping keys must be scalars, got {event.kind.label} "
            f"at {self.builder.tracker.get_path() or '/'}",
            event,
        )

    on_sequence_start = _complex_key
    on_mapping_start = _complex_key


class MappingValueState(ValueState):
    """Inside a mapping, a key is pending and its value comes next."""

    name = "MAPPING_VALUE"
