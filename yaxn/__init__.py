"""
yaxn - A SAX-style YAML to JSON tree builder.
"""

from .builder import TreeBuilder, build, load_file, yaml_to_value
from .errors import (
    BuildError,
    DepthExceededError,
    InputFileError,
    MalformedDocumentError,
    SourceError,
    UnsupportedFeatureError,
)
from .events import Event, EventKind, value_events
from .handler import EventHandler, TraceHandler
from .serializer import render_json, render_yaml
from .source import iter_events, read_events

__all__ = [
    'TreeBuilder',
    'build',
    'load_file',
    'yaml_to_value',
    'BuildError',
    'InputFileError',
    'DepthExceededError',
    'MalformedDocumentError',
    'SourceError',
    'UnsupportedFeatureError',
    'Event',
    'EventKind',
    'value_events',
    'EventHandler',
    'TraceHandler',
    'render_json',
    'render_yaml',
    'iter_events',
    'read_events',
]
__version__ = '0.1.0'
