"""
Stack Tracker - Manages the stack of open containers while building.

This class tracks the chain of currently open arrays and objects from
the root to the innermost one, together with the path segment (key or
index) under which each container was attached.
"""

from typing import Any, List, Optional, Tuple, Union

from .errors import DepthExceededError, MalformedDocumentError

MAX_DEPTH = 128

Container = Union[list, dict]


class StackTracker:
    """
    Manages the container stack during tree building.

    Each entry is a (container, segment) pair. The segment is the key the
    container was stored under in an object, the index it was appended at
    in an array, or None for the root container.
    """

    def __init__(self, max_depth: int = MAX_DEPTH):
        if max_depth < 1:
            raise ValueError(f"max_depth must be at least 1, got {max_depth}")
        self._max_depth = max_depth
        self._stack: List[Tuple[Container, Optional[Union[str, int]]]] = []

    @property
    def max_depth(self) -> int:
        return self._max_depth

    @property
    def depth(self) -> int:
        """Number of containers currently open."""
        return len(self._stack)

    def __len__(self) -> int:
        return len(self._stack)

    def push(self, container: Container, segment: Optional[Union[str, int]] = None) -> None:
        """Push an open container, refusing to go past max_depth."""
        if len(self._stack) >= self._max_depth:
            raise DepthExceededError(
                f"nesting depth exceeds the limit of {self._max_depth} at {self.get_path() or '/'}"
            )
        self._stack.append((container, segment))

    def pop(self) -> Container:
        """Pop and return the innermost container."""
        if not self._stack:
            raise MalformedDocumentError("container end without a matching start")
        return self._stack.pop()[0]

    def peek(self) -> Optional[Container]:
        """Return the innermost container without popping, or None."""
        return self._stack[-1][0] if self._stack else None

    def in_array(self) -> bool:
        """Check if the innermost open container is an array."""
        return bool(self._stack) and isinstance(self._stack[-1][0], list)

    def in_object(self) -> bool:
        """Check if the innermost open container is an object."""
        return bool(self._stack) and isinstance(self._stack[-1][0], dict)

    def clear(self) -> None:
        self._stack.clear()

    def get_path(self, extra: Any = None) -> str:
        """
        Get the slash separated path of the innermost container.

        Args:
            extra: Optional trailing segment (e.g. the pending key).
        """
        segments = [segment for _, segment in self._stack if segment is not None]
        if extra is not None:
            segments.append(extra)
        if not segments:
            return ''
        return '/' + '/'.join(str(segment) for segment in segments)
