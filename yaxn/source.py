"""
Event Source - Lazily pulls parse events out of a YAML stream.

PyYAML does the tokenizing; this module only adapts its events and
turns its failures into SourceError.
"""

import logging
from typing import IO, Iterator, Union

import yaml

from .errors import InputFileError, SourceError
from .events import Event

logger = logging.getLogger(__name__)


def iter_events(stream: Union[str, bytes, IO]) -> Iterator[Event]:
    """
    Yield the parse events of a YAML stream, one at a time.

    The stream can be a string, bytes or an open file. Syntax errors
    surface as SourceError when the offending event is pulled.
    """
    try:
        for event in yaml.parse(stream, Loader=yaml.SafeLoader):
            yield Event.from_yaml(event)
    except yaml.YAMLError as exc:
        logger.debug("YAML parser failed: %s", exc)
        raise SourceError.from_yaml_error(exc) from exc


def read_events(path: str) -> Iterator[Event]:
    """
    Yield the parse events of a YAML file, closing it when done.

    The file is read as bytes so the YAML reader can detect UTF-8 or
    UTF-16 from the byte order mark; undecodable bytes surface as
    SourceError like any other syntax problem.
    """
    try:
        f = open(path, 'rb')
    except OSError as exc:
        raise InputFileError(f"Failed to open the input file: {exc.strerror or exc}") from exc

    with f:
        logger.debug("Reading YAML events from %s", path)
        yield from iter_events(f)
