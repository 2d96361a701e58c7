"""
Unit tests for JSON value serialization.
"""

import json

import pytest

from httpmessage.json_value import (
    INT_MAX,
    INT_MIN,
    JSONType,
    JSONValue,
    escape_string,
)


class TestScalars:
    """Tests for scalar values."""

    def test_default_is_null(self):
        """Test that the bare constructor builds null."""
        assert JSONValue().kind is JSONType.NULL
        assert JSONValue().stringify() == "null"
        assert JSONValue.null().is_null

    def test_booleans(self):
        """Test true/false literals."""
        assert JSONValue.boolean(True).stringify() == "true"
        assert JSONValue.boolean(False).stringify() == "false"

    def test_integers(self):
        """Test integers render as plain decimal digits."""
        assert JSONValue.integer(42).stringify() == "42"
        assert JSONValue.integer(-7).stringify() == "-7"
        assert JSONValue.integer(0).stringify() == "0"

    def test_floats_use_six_decimals(self):
        """Test floats keep the fixed six-decimal format."""
        assert JSONValue.number(1.5).stringify() == "1.500000"
        assert JSONValue.number(-0.25).stringify() == "-0.250000"
        assert JSONValue.number(3).stringify() == "3.000000"

    def test_string(self):
        """Test plain strings are quoted."""
        assert JSONValue.string("hello").stringify() == '"hello"'
        assert JSONValue.string("").stringify() == '""'

    def test_factory_type_checks(self):
        """Test that factories reject the wrong python type."""
        with pytest.raises(TypeError):
            JSONValue.integer(True)
        with pytest.raises(TypeError):
            JSONValue.integer(1.5)
        with pytest.raises(TypeError):
            JSONValue.string(5)

    def test_integer_range(self):
        """Test that integers are limited to 64 bits."""
        assert JSONValue.integer(INT_MAX).stringify() == "9223372036854775807"
        assert JSONValue.integer(INT_MIN).stringify() == "-9223372036854775808"

        with pytest.raises(ValueError):
            JSONValue.integer(INT_MAX + 1)
        with pytest.raises(ValueError):
            JSONValue.integer(INT_MIN - 1)

    def test_huge_integer_fails_at_conversion(self):
        """Test that a huge int is refused before stringify."""
        with pytest.raises(ValueError):
            JSONValue.from_python({"n": 10 ** 5000})


class TestConstructor:
    """Tests for the raw JSONValue(kind, data) constructor."""

    def test_kind_must_be_json_type(self):
        """Test that a plain value in the kind slot is refused."""
        with pytest.raises(TypeError):
            JSONValue(5)
        with pytest.raises(TypeError):
            JSONValue("null")

    @pytest.mark.parametrize("kind, data", [
        (JSONType.NULL, 0),
        (JSONType.BOOL, 1),
        (JSONType.INT, "x"),
        (JSONType.INT, True),
        (JSONType.FLOAT, 1),
        (JSONType.STRING, None),
        (JSONType.ARRAY, [1, 2]),
        (JSONType.ARRAY, (1, 2)),
        (JSONType.OBJECT, {"a": 1}),
    ])
    def test_mismatched_data_rejected(self, kind, data):
        """Test that data of the wrong shape is refused."""
        with pytest.raises(TypeError):
            JSONValue(kind, data)

    def test_object_members_must_be_sorted_and_unique(self):
        """Test that hand-built objects keep the sorted-key invariant."""
        one = JSONValue.integer(1)

        with pytest.raises(TypeError):
            JSONValue(JSONType.OBJECT, (("b", one), ("a", one)))
        with pytest.raises(TypeError):
            JSONValue(JSONType.OBJECT, (("a", one), ("a", one)))
        with pytest.raises(TypeError):
            JSONValue(JSONType.OBJECT, (("a", 1),))

    def test_well_formed_data_accepted(self):
        """Test that correctly shaped data builds and serializes."""
        one = JSONValue.integer(1)

        assert JSONValue(JSONType.INT, 3).stringify() == "3"
        assert JSONValue(JSONType.ARRAY, (one, one)).stringify() == "[1,1]"
        assert JSONValue(
            JSONType.OBJECT, (("a", one), ("b", one))
        ).stringify() == '{"a":1,"b":1}'


class TestStringEscaping:
    """Tests for string escaping."""

    def test_quote_backslash_newline(self):
        """Test the common escapes together."""
        value = JSONValue.string('a"b\\c\nd')
        assert value.stringify() == '"a\\"b\\\\c\\nd"'

    def test_short_escapes(self):
        """Test every two-character escape."""
        assert escape_string("\b\f\n\r\t") == "\\b\\f\\n\\r\\t"

    def test_other_control_characters(self):
        """Test remaining control characters use \\u with 4 hex digits."""
        assert escape_string("\x00") == "\\u0000"
        assert escape_string("\x1b") == "\\u001b"
        assert escape_string("\x1f") == "\\u001f"

    def test_non_ascii_passes_through(self):
        """Test that non-ASCII characters are not escaped."""
        assert JSONValue.string("héllo ✓").stringify() == '"héllo ✓"'

    def test_delete_is_not_escaped(self):
        """Test that 0x7f is outside the control range."""
        assert escape_string("\x7f") == "\x7f"

    def test_matches_json_module(self):
        """Test that escaping agrees with json.dumps for mixed input."""
        text = 'q"\\s\x00\x1f\x7f\u2028 é ✓\n'
        assert escape_string(text) == json.dumps(text, ensure_ascii=False)[1:-1]

    def test_keys_are_escaped(self):
        """Test that object keys use the same escaping."""
        value = JSONValue.object({'k"ey': 1})
        assert value.stringify() == '{"k\\"ey":1}'


class TestContainers:
    """Tests for arrays and objects."""

    def test_array(self):
        """Test compact array output."""
        value = JSONValue.array([1, "two", None, True])
        assert value.stringify() == '[1,"two",null,true]'

    def test_empty_containers(self):
        """Test empty array and object."""
        assert JSONValue.array().stringify() == "[]"
        assert JSONValue.object().stringify() == "{}"

    def test_object_keys_sorted(self):
        """Test that insertion order doesn't matter."""
        first = JSONValue.object({"b": 1, "a": 2})
        second = JSONValue.object({"a": 2, "b": 1})

        assert first.stringify() == '{"a":2,"b":1}'
        assert first.stringify() == second.stringify()
        assert first == second

    def test_object_from_pairs_keeps_first_duplicate(self):
        """Test that a repeated key keeps its first value."""
        value = JSONValue.object([("a", 1), ("a", 2)])
        assert value.stringify() == '{"a":1}'

    def test_object_rejects_non_str_keys(self):
        """Test that keys must be strings."""
        with pytest.raises(TypeError):
            JSONValue.object({1: "x"})

    def test_nested(self):
        """Test nested containers."""
        value = JSONValue.object({
            "user": JSONValue.object({"id": 1, "name": "Ann"}),
            "tags": JSONValue.array(["a", JSONValue.array([])]),
        })
        assert value.stringify() == '{"tags":["a",[]],"user":{"id":1,"name":"Ann"}}'

    def test_accessors(self):
        """Test keys() and indexing."""
        obj = JSONValue.object({"b": 1, "a": [1, 2]})

        assert obj.keys() == ("a", "b")
        assert obj["b"] == JSONValue.integer(1)
        assert obj["a"][1].stringify() == "2"

        with pytest.raises(KeyError):
            obj["missing"]
        with pytest.raises(TypeError):
            JSONValue.integer(1)[0]
        with pytest.raises(TypeError):
            JSONValue.array().keys()


class TestFromPython:
    """Tests for JSONValue.from_python()."""

    def test_bool_before_int(self):
        """Test that bools don't become integers."""
        assert JSONValue.from_python(True).kind is JSONType.BOOL
        assert JSONValue.from_python(1).kind is JSONType.INT

    def test_conversion_table(self):
        """Test every supported input type."""
        assert JSONValue.from_python(None).kind is JSONType.NULL
        assert JSONValue.from_python(2.5).kind is JSONType.FLOAT
        assert JSONValue.from_python("s").kind is JSONType.STRING
        assert JSONValue.from_python((1, 2)).kind is JSONType.ARRAY
        assert JSONValue.from_python({"a": 1}).kind is JSONType.OBJECT

    def test_json_value_passes_through(self):
        """Test that JSONValue inputs are returned unchanged."""
        value = JSONValue.string("x")
        assert JSONValue.from_python(value) is value

    def test_unsupported_type(self):
        """Test that unknown types are rejected."""
        with pytest.raises(TypeError):
            JSONValue.from_python({1, 2})

    def test_immutable(self):
        """Test that values can't be modified after construction."""
        value = JSONValue.array([1])
        with pytest.raises(AttributeError):
            value.kind = JSONType.NULL

    def test_copies_input(self):
        """Test that later changes to the source list don't leak in."""
        source = [1, 2]
        value = JSONValue.from_python(source)
        source.append(3)

        assert value.stringify() == "[1,2]"


class TestValidJSON:
    """Tests that output is parseable JSON."""

    def test_round_trip_through_json_module(self):
        """Test that json.loads accepts the output."""
        value = JSONValue.from_python({
            "name": 'quote " and \\ slash',
            "ctrl": "\x01\x02\ttab",
            "list": [1, -2, 3.25, True, False, None],
            "nested": {"z": {}, "a": []},
        })

        decoded = json.loads(value.stringify())

        assert decoded["name"] == 'quote " and \\ slash'
        assert decoded["ctrl"] == "\x01\x02\ttab"
        assert decoded["list"] == [1, -2, 3.25, True, False, None]
        assert decoded["nested"] == {"z": {}, "a": []}

    def test_str_matches_stringify(self):
        """Test that str() is the serialized form."""
        value = JSONValue.object({"a": 1})
        assert str(value) == value.stringify()
