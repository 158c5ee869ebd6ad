"""
Event Handler - Base handler class for YAML parse events.

Clients should subclass this and override the methods they need.
"""

import logging

from .events import Event, EventKind

logger = logging.getLogger(__name__)

INDENT = '  '


class EventHandler:
    """
    Base handler class for YAML parse events.
    Clients should subclass this and override the methods they need.
    """

    def on_stream_start(self, event: Event) -> None:
        """Called when the stream starts."""
        pass

    def on_stream_end(self, event: Event) -> None:
        """Called when the stream ends."""
        pass

    def on_document_start(self, event: Event) -> None:
        """Called when a document starts."""
        pass

    def on_document_end(self, event: Event) -> None:
        """Called when a document ends."""
        pass

    def on_alias(self, event: Event) -> None:
        """Called for a reference to an anchored node."""
        pass

    def on_scalar(self, event: Event) -> None:
        """Called for every scalar (key or value)."""
        pass

    def on_sequence_start(self, event: Event) -> None:
        pass

    def on_sequence_end(self, event: Event) -> None:
        pass

    def on_mapping_start(self, event: Event) -> None:
        pass

    def on_mapping_end(self, event: Event) -> None:
        pass


_CALLBACKS = {kind: 'on_' + kind.value for kind in EventKind}


def dispatch(handler: EventHandler, event: Event) -> None:
    """Call the handler method matching the event kind."""
    getattr(handler, _CALLBACKS[event.kind])(event)


class TraceHandler(EventHandler):
    """
    Logs every event at DEBUG level, indented by nesting level.

    Streams, documents and containers open a level; their end events
    close it again.
    """

    def __init__(self, log: logging.Logger = None):
        self.log = log or logger
        self.level = 0

    def _emit(self, event: Event) -> None:
        self.log.debug("%s%s", INDENT * self.level, event)

    def _open(self, event: Event) -> None:
        self._emit(event)
        self.level += 1

    def _close(self, event: Event) -> None:
        self.level -= 1
        if self.level < 0:
            self.log.warning("indentation underflow at %s", event)
            self.level = 0
        self._emit(event)

    on_stream_start = _open
    on_document_start = _open
    on_sequence_start = _open
    on_mapping_start = _open

    on_stream_end = _close
    on_document_end = _close
    on_sequence_end = _close
    on_mapping_end = _close

    on_alias = _emit
    on_scalar = _emit
