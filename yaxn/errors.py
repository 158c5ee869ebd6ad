"""
Errors - Exceptions raised while turning YAML events into a value tree.

Every error aborts the whole build; the builder never hands back a
partially attached tree.
"""

from typing import Optional


class BuildError(ValueError):
    """Base class for all tree building failures."""

    def __init__(self, message: str, line: Optional[int] = None, column: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.line = line
        self.column = column

    @classmethod
    def at(cls, message: str, event=None) -> 'BuildError':
        """Create an error positioned at the given event (if it has a position)."""
        if event is None:
            return cls(message)
        return cls(message, line=event.line, column=event.column)

    def __str__(self) -> str:
        if self.line is None:
            return self.message
        if self.column is None:
            return f"{self.message} (line {self.line})"
        return f"{self.message} (line {self.line}, column {self.column})"


class SourceError(BuildError):
    """The event source failed: unreadable input or malformed YAML syntax."""

    @classmethod
    def from_yaml_error(cls, exc) -> 'SourceError':
        """Build a SourceError from a PyYAML exception, keeping its diagnostics."""
        problem = getattr(exc, 'problem', None)
        context = getattr(exc, 'context', None)
        mark = getattr(exc, 'problem_mark', None) or getattr(exc, 'context_mark', None)

        if problem:
            message = f"{context}, {problem}" if context else problem
        else:
            message = str(exc)

        if mark is None:
            return cls(message)
        return cls(message, line=mark.line + 1, column=mark.column + 1)


class MalformedDocumentError(BuildError):
    """The event sequence cannot describe a single well-formed document."""


class DepthExceededError(BuildError):
    """Containers are nested deeper than the configured bound."""


class UnsupportedFeatureError(BuildError):
    """The document uses a YAML feature that has no JSON counterpart here (aliases)."""


class InputFileError(SourceError):
    """The input file could not be opened."""
