"""Test converting real YAML text to JSON end to end."""

import json

import pytest

from yaxn import (
    iter_events,
    load_file,
    read_events,
    render_json,
    render_yaml,
    yaml_to_value,
)
from yaxn.errors import InputFileError, SourceError
from yaxn.events import EventKind


def test_readme_example():
    """Block mapping with a nested sequence, all scalars as strings."""
    yaml_text = """
name: test
values:
  - 1
  - 2
"""
    result = yaml_to_value(yaml_text)
    assert result == {"name": "test", "values": ["1", "2"]}
    assert json.loads(render_json(result)) == {"name": "test", "values": ["1", "2"]}


def test_bare_scalar():
    assert yaml_to_value("just text\n") == "just text"


def test_flow_collections():
    assert yaml_to_value("{}") == {}
    assert yaml_to_value("[]") == []
    assert yaml_to_value("{a: [1, {b: c}]}") == {"a": ["1", {"b": "c"}]}


def test_no_type_inference():
    """Booleans, numbers and null stay as their source text."""
    yaml_text = "flag: true\ncount: 42\nratio: 0.5\nnothing: null\ntilde: ~\n"
    assert yaml_to_value(yaml_text) == {
        "flag": "true",
        "count": "42",
        "ratio": "0.5",
        "nothing": "null",
        "tilde": "~",
    }


def test_empty_value_is_empty_string():
    """A key without a value holds the empty plain scalar."""
    assert yaml_to_value("key:\n") == {"key": ""}


def test_empty_input_is_null():
    assert yaml_to_value("") is None
    assert render_json(yaml_to_value("")) == "null"


def test_quoted_and_block_scalars():
    yaml_text = """\
single: 'it''s'
double: "tab\\there"
literal: |
  line one
  line two
"""
    assert yaml_to_value(yaml_text) == {
        "single": "it's",
        "double": "tab\there",
        "literal": "line one\nline two\n",
    }


def test_explicit_document_markers():
    assert yaml_to_value("---\na: b\n...\n") == {"a": "b"}


def test_unicode_values():
    result = yaml_to_value("message: Hello 世界 🌍\nsymbols: €£¥\n")
    assert result == {"message": "Hello 世界 🌍", "symbols": "€£¥"}
    assert "世界" in render_json(result)


def test_duplicate_keys_last_value_wins():
    assert yaml_to_value("key: first\nkey: second\n") == {"key": "second"}


def test_anchor_on_node_is_ignored():
    """Anchors are only names; without aliases the tree is unaffected."""
    assert yaml_to_value("base: &b {x: 1}\n") == {"base": {"x": "1"}}


def test_sequence_of_mappings():
    yaml_text = """
items:
  - id: 1
    name: Alice
  - id: 2
    name: Bob
"""
    assert yaml_to_value(yaml_text) == {
        "items": [
            {"id": "1", "name": "Alice"},
            {"id": "2", "name": "Bob"},
        ]
    }


def test_iter_events_positions():
    """Events from the parser carry 1-based source positions."""
    events = list(iter_events("a: [b]\n"))
    kinds = [event.kind for event in events]

    assert kinds == [
        EventKind.STREAM_START,
        EventKind.DOCUMENT_START,
        EventKind.MAPPING_START,
        EventKind.SCALAR,
        EventKind.SEQUENCE_START,
        EventKind.SCALAR,
        EventKind.SEQUENCE_END,
        EventKind.MAPPING_END,
        EventKind.DOCUMENT_END,
        EventKind.STREAM_END,
    ]
    sequence_start = events[4]
    assert (sequence_start.line, sequence_start.column) == (1, 4)


class TestRoundTrip:
    """Rendering a value as YAML and building it again gives the same value."""

    def check(self, value):
        assert yaml_to_value(render_yaml(value)) == value

    def test_strings_that_look_like_other_types(self):
        self.check({"n": "1", "b": "true", "z": "null", "e": ""})

    def test_nested(self):
        self.check({
            "name": "test",
            "values": ["1", "2", ["3", []]],
            "meta": {"empty": {}, "list": [{"k": "v"}]},
        })

    def test_root_sequence(self):
        self.check(["a", {"b": "c"}, []])

    def test_multiline_and_unicode(self):
        self.check({"text": "line one\nline two", "emoji": "😀 😃"})

    def test_key_order_preserved(self):
        value = {"zeta": "1", "alpha": "2", "mid": "3"}
        assert list(yaml_to_value(render_yaml(value))) == list(value)


class TestFiles:
    """Test reading YAML straight from files."""

    def test_load_file(self, tmp_path):
        path = tmp_path / "doc.yaml"
        path.write_text("name: test\nvalues: [1, 2]\n", encoding="utf-8")

        assert load_file(str(path)) == {"name": "test", "values": ["1", "2"]}

    def test_read_events_closes_on_exhaustion(self, tmp_path):
        path = tmp_path / "doc.yaml"
        path.write_text("x\n", encoding="utf-8")

        kinds = [event.kind for event in read_events(str(path))]
        assert kinds[0] is EventKind.STREAM_START
        assert kinds[-1] is EventKind.STREAM_END

    def test_missing_file_is_source_error(self, tmp_path):
        with pytest.raises(SourceError, match="Failed to open"):
            load_file(str(tmp_path / "missing.yaml"))

    def test_invalid_bytes_are_source_error(self, tmp_path):
        path = tmp_path / "broken.yaml"
        path.write_bytes(b"key: \xff\xfe value\n")

        with pytest.raises(SourceError):
            load_file(str(path))

    def test_utf16_file(self, tmp_path):
        path = tmp_path / "wide.yaml"
        path.write_bytes("name: café\nvalues: [1, 2]\n".encode("utf-16"))

        assert load_file(str(path)) == {"name": "café", "values": ["1", "2"]}

    def test_missing_file_is_input_file_error(self, tmp_path):
        with pytest.raises(InputFileError):
            load_file(str(tmp_path / "missing.yaml"))
