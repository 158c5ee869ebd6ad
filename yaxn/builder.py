"""
Tree Builder - Builds a JSON-like value from a stream of YAML parse events.

Consume events one at a time with an explicit state machine where each
state is an object with on_<event>() methods. Containers are attached to
their parent as soon as they start, so finishing a container is only a
matter of popping it off the stack.

Values are plain Python objects: None, str, list and dict.
"""

import logging
from typing import IO, Any, Iterable, Optional, Union

from .errors import DepthExceededError, MalformedDocumentError, UnsupportedFeatureError
from .events import Event
from .handler import TraceHandler, dispatch
from .source import iter_events, read_events
from .stack_tracker import MAX_DEPTH, StackTracker
from .states import (
    DocumentEndState,
    DocumentWaitState,
    DoneState,
    InSequenceState,
    MappingKeyState,
    ParserState,
    StreamStartState,
)

logger = logging.getLogger(__name__)

ALIAS_REJECT = 'reject'
ALIAS_NULL = 'null'
ALIAS_POLICIES = (ALIAS_REJECT, ALIAS_NULL)


class TreeBuilder:
    """
    Build one value tree from parse events using an explicit state machine.

    Feed events with feed() and collect the value with close(). Any error
    resets the builder before it propagates, so a failed build never
    leaves a partial tree behind.
    """

    def __init__(self, max_depth: int = MAX_DEPTH, aliases: str = ALIAS_REJECT, trace: bool = False):
        if aliases not in ALIAS_POLICIES:
            raise ValueError(f"aliases must be one of {', '.join(ALIAS_POLICIES)}, got {aliases!r}")

        self.aliases = aliases
        self.tracker = StackTracker(max_depth)
        self._trace = TraceHandler() if trace else None

        self._state: ParserState = None
        self._previous_state: ParserState = None
        self.reset()

    @property
    def state(self) -> ParserState:
        """Current builder state object."""
        return self._state

    @property
    def state_name(self) -> str:
        """Name of current state for debugging."""
        return self._state.name if self._state else "None"

    @property
    def pending_key(self) -> Optional[str]:
        """Key read inside the current mapping that still waits for its value."""
        return self._pending_key

    @property
    def root(self) -> Any:
        return self._root

    @property
    def documents(self) -> int:
        """Number of completed documents."""
        return self._documents

    @property
    def done(self) -> bool:
        """True once stream-end has been consumed."""
        return self._done

    def reset(self) -> None:
        """Drop all state, including any partially built tree."""
        self.tracker.clear()
        self._pending_key: Optional[str] = None
        self._root: Any = None
        self._has_root = False
        self._documents = 0
        self._done = False
        self._previous_state = None
        self._state = StreamStartState(self)

    # ========================================================================
    # CORE BUILDING METHODS
    # ========================================================================

    def feed(self, event: Event) -> None:
        """Process a single event."""
        if self._trace is not None:
            dispatch(self._trace, event)

        try:
            dispatch(self._state, event)
        except Exception as exc:
            logger.debug("Aborting build in state %s at %s: %s", self.state_name, event, exc)
            self.reset()
            raise

    def close(self) -> Any:
        """Return the finished value and reset the builder for reuse."""
        if not self._done:
            state = self.state_name
            self.reset()
            raise MalformedDocumentError(f"event stream ended before stream-end (state {state})")

        root = self._root
        self.reset()
        return root

    def _transition(self, new_state: ParserState) -> None:
        """Transition to a new state."""
        logger.debug("%s -> %s (depth %d)", self.state_name, new_state.name, self.tracker.depth)
        self._previous_state = self._state
        self._state = new_state

    def _state_for_top(self) -> ParserState:
        """State to continue in, derived from the innermost open container."""
        if self.tracker.in_array():
            return InSequenceState(self)
        if self.tracker.in_object():
            return MappingKeyState(self)
        return DocumentEndState(self)

    # ========================================================================
    # ATTACH / CONTAINER HANDLERS
    # ========================================================================

    def _attach(self, value: Any, event: Event = None) -> Union[str, int, None]:
        """
        Place a finished (or just started) value into the innermost container.

        Returns the key or index it was stored under, None for the root.
        """
        container = self.tracker.peek()

        if container is None:
            if self._has_root:
                raise MalformedDocumentError.at("document already has a root value", event)
            self._root = value
            self._has_root = True
            return None

        if isinstance(container, list):
            container.append(value)
            return len(container) - 1

        key = self._pending_key
        if key is None:
            raise MalformedDocumentError.at(
                f"mapping value without a key at {self.tracker.get_path() or '/'}", event
            )
        container[key] = value
        self._pending_key = None
        return key

    def _start_container(self, container: Union[list, dict], event: Event = None) -> None:
        """Attach a new empty container, then make it the innermost one."""
        segment = self._attach(container, event)
        self._pending_key = None
        try:
            self.tracker.push(container, segment)
        except DepthExceededError as exc:
            raise DepthExceededError.at(exc.message, event) from exc

    def _end_container(self, kind: type, event: Event = None) -> None:
        """Close the innermost container, checking it is of the expected kind."""
        label = 'sequence' if kind is list else 'mapping'
        container = self.tracker.peek()

        if container is None:
            raise MalformedDocumentError.at(f"{label}-end without a matching {label}-start", event)
        if not isinstance(container, kind):
            raise MalformedDocumentError.at(
                f"{label}-end does not match the open "
                f"{'sequence' if isinstance(container, list) else 'mapping'} "
                f"at {self.tracker.get_path() or '/'}",
                event,
            )
        if self._pending_key is not None:
            raise MalformedDocumentError.at(
                f"mapping ended while key {self._pending_key!r} has no value", event
            )

        self.tracker.pop()
        self._transition(self._state_for_top())

    def _alias_value(self, event: Event) -> None:
        """Value used in place of an alias; aliases are never dereferenced."""
        if self.aliases == ALIAS_REJECT:
            raise UnsupportedFeatureError.at(f"aliases are not supported (*{event.anchor})", event)
        logger.debug("Replacing alias *%s with null", event.anchor)
        return None

    def _end_document(self) -> None:
        self._documents += 1
        self._transition(DocumentWaitState(self))

    def _finish(self) -> None:
        self._done = True
        self._transition(DoneState(self))


# ========================================================================
# CONVENIENCE FUNCTIONS
# ========================================================================

def build(events: Iterable[Event], **options) -> Any:
    """
    Build a value from a sequence of events.

    Events are pulled one at a time and consumption stops at stream-end.
    Options are passed to TreeBuilder (max_depth, aliases, trace).
    """
    builder = TreeBuilder(**options)
    for event in events:
        builder.feed(event)
        if builder.done:
            break
    return builder.close()


def yaml_to_value(stream: Union[str, bytes, IO], **options) -> Any:
    """Build a value from YAML text or an open YAML file."""
    return build(iter_events(stream), **options)


def load_file(path: str, **options) -> Any:
    """Build a value from the YAML file at path."""
    events = read_events(path)
    try:
        return build(events, **options)
    finally:
        events.close()
