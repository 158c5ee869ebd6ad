"""
Serializer - Renders finished values as JSON (or back as YAML).

Values map directly: None -> null, str -> string, list -> array,
dict -> object. Nothing is inferred from scalar text.
"""

import json as json_module
from typing import Any, Optional

import yaml

DEFAULT_INDENT = 4


def render_json(value: Any, indent: Optional[int] = DEFAULT_INDENT) -> str:
    """
    Render a value as JSON text.

    Any root is accepted, including a bare string or null. Pass
    indent=None for compact single-line output.
    """
    if indent is None:
        return json_module.dumps(value, ensure_ascii=False, separators=(',', ':'))
    return json_module.dumps(value, ensure_ascii=False, indent=indent)


def render_yaml(value: Any) -> str:
    """Render a value as block style YAML, keeping key order."""
    return yaml.safe_dump(
        value,
        default_flow_style=False,
        allow_unicode=True,
        sort_keys=False,
    )
