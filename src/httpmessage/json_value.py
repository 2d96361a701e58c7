"""
=============================================================================
JSON VALUE
=============================================================================

An immutable tagged union for JSON documents, used as the body of canned
responses. Only serialization is implemented; there is no JSON parser here.

=============================================================================
VALUE ANATOMY
=============================================================================

    ┌─────────────────────────────────────────────────────────────────────┐
    │                        JSONValue(kind, data)                        │
    ├──────────┬──────────────────────────────┬───────────────────────────┤
    │  kind    │  data                        │  stringify()              │
    ├──────────┼──────────────────────────────┼───────────────────────────┤
    │  NULL    │  None                        │  null                     │
    │  BOOL    │  True / False                │  true / false             │
    │  INT     │  42                          │  42                       │
    │  FLOAT   │  1.5                         │  1.500000                 │
    │  STRING  │  'a"b'                       │  "a\\"b"                   │
    │  ARRAY   │  (JSONValue, ...)            │  [1,2,3]                  │
    │  OBJECT  │  (("a", JSONValue), ...)     │  {"a":1,"b":2}            │
    └──────────┴──────────────────────────────┴───────────────────────────┘

Arrays are stored as tuples and objects as tuples of (key, value) pairs
sorted by key, so a value can't be changed after it is built and two
objects with the same entries serialize identically no matter which order
they were written in.

=============================================================================
SERIALIZATION RULES
=============================================================================

    - Compact: no whitespace, "," between elements, ":" after keys
    - Object keys in ascending order
    - Floats with six fixed decimals: 1.5 → 1.500000
      (not the shortest round-trip form most JSON encoders use)
    - Strings escaped as below, non-ASCII passed through untouched:

        "  → \\"      \\  → \\\\      BS → \\b      FF → \\f
        LF → \\n      CR → \\r      TAB → \\t
        other U+0000..U+001F → \\u00XX (lowercase hex)

=============================================================================
USAGE
=============================================================================

    body = JSONValue.object({
        "id": 7,
        "tags": JSONValue.array(["a", "b"]),
        "ratio": 0.25,
    })
    body.stringify()
    # '{"id":7,"ratio":0.250000,"tags":["a","b"]}'

=============================================================================
"""

import json
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterable, Mapping, Tuple, Union


class JSONType(Enum):
    """Discriminator for the JSONValue variants."""

    NULL = "null"
    BOOL = "bool"
    INT = "int"
    FLOAT = "float"
    STRING = "string"
    ARRAY = "array"
    OBJECT = "object"


# ═══════════════════════════════════════════════════════════════════════════
# INTEGER RANGE
# ═══════════════════════════════════════════════════════════════════════════
# Integers are limited to the signed 64-bit range. Bigger python ints would
# hit the int-to-str digit limit (3.11+) and most JSON readers can't hold
# them anyway.
# ═══════════════════════════════════════════════════════════════════════════
INT_MIN = -(2 ** 63)
INT_MAX = 2 ** 63 - 1


def escape_string(text: str) -> str:
    """
    Escape a string for use inside JSON double quotes.

    json.dumps with ensure_ascii=False gives exactly the escapes we want:
    the short forms for quote, backslash, BS, FF, LF, CR and TAB, \\u00xx
    for other control characters, and everything else verbatim.

    Args:
        text: Raw string (key or value).

    Returns:
        Escaped text, without the surrounding quotes.
    """
    return json.dumps(text, ensure_ascii=False)[1:-1]


def _is_sorted_members(members: tuple) -> bool:
    """True for (str, JSONValue) pairs with strictly ascending keys."""
    previous = None
    for member in members:
        if not (isinstance(member, tuple) and len(member) == 2):
            return False
        key, value = member
        if not isinstance(key, str) or not isinstance(value, JSONValue):
            return False
        if previous is not None and key <= previous:
            return False
        previous = key
    return True


@dataclass(frozen=True)
class JSONValue:
    """
    A single JSON value.

    Build values with the factory classmethods rather than the constructor;
    JSONValue() on its own is null.

    =========================================================================
    FACTORIES
    =========================================================================

        JSONValue.null()                    → null
        JSONValue.boolean(True)             → true
        JSONValue.integer(-3)               → -3
        JSONValue.number(2.0)               → 2.000000
        JSONValue.string("hi")              → "hi"
        JSONValue.array([1, "x", None])     → [1,"x",null]
        JSONValue.object({"k": 1})          → {"k":1}
        JSONValue.from_python({...})        → recursive conversion

    array() and object() accept JSONValue items or plain python values;
    plain values go through from_python().

    =========================================================================
    """

    kind: JSONType = JSONType.NULL
    data: Any = field(default=None)

    def __post_init__(self):
        """
        Check that data has the shape kind promises.

        =====================================================================
        EXPECTED DATA PER KIND
        =====================================================================

            NULL    None
            BOOL    bool
            INT     int (not bool), within INT_MIN..INT_MAX
            FLOAT   float
            STRING  str
            ARRAY   tuple of JSONValue
            OBJECT  tuple of (str, JSONValue) pairs, keys strictly ascending

        =====================================================================

        Raises:
            TypeError: Wrong kind or data type.
            ValueError: INT outside the 64-bit range.
        """
        kind, data = self.kind, self.data

        if not isinstance(kind, JSONType):
            raise TypeError(f"kind must be a JSONType, got {kind!r}")

        if kind is JSONType.NULL:
            valid = data is None
        elif kind is JSONType.BOOL:
            valid = isinstance(data, bool)
        elif kind is JSONType.INT:
            valid = isinstance(data, int) and not isinstance(data, bool)
            if valid and not INT_MIN <= data <= INT_MAX:
                raise ValueError("JSON integer out of 64-bit range")
        elif kind is JSONType.FLOAT:
            valid = isinstance(data, float)
        elif kind is JSONType.STRING:
            valid = isinstance(data, str)
        elif kind is JSONType.ARRAY:
            valid = isinstance(data, tuple) and all(
                isinstance(item, JSONValue) for item in data
            )
        else:
            valid = isinstance(data, tuple) and _is_sorted_members(data)

        if not valid:
            raise TypeError(
                f"Invalid data for {kind.value} value: {type(data).__name__}"
            )

    # =========================================================================
    # FACTORIES
    # =========================================================================

    @classmethod
    def null(cls) -> "JSONValue":
        return cls(JSONType.NULL, None)

    @classmethod
    def boolean(cls, value: bool) -> "JSONValue":
        return cls(JSONType.BOOL, bool(value))

    @classmethod
    def integer(cls, value: int) -> "JSONValue":
        """
        Integer value in the signed 64-bit range.

        Raises:
            TypeError: Not an int (bools are rejected).
            ValueError: Outside INT_MIN..INT_MAX.
        """
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"Expected int, got {type(value).__name__}")
        return cls(JSONType.INT, int(value))

    @classmethod
    def number(cls, value: float) -> "JSONValue":
        """Floating-point value; ints are widened to float."""
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise TypeError(f"Expected float, got {type(value).__name__}")
        return cls(JSONType.FLOAT, float(value))

    @classmethod
    def string(cls, value: str) -> "JSONValue":
        if not isinstance(value, str):
            raise TypeError(f"Expected str, got {type(value).__name__}")
        return cls(JSONType.STRING, value)

    @classmethod
    def array(cls, items: Iterable[Any] = ()) -> "JSONValue":
        """Ordered array; element order is preserved."""
        return cls(JSONType.ARRAY, tuple(cls.from_python(item) for item in items))

    @classmethod
    def object(
        cls,
        entries: Union[Mapping[str, Any], Iterable[Tuple[str, Any]]] = (),
    ) -> "JSONValue":
        """
        Object from a mapping or an iterable of (key, value) pairs.

        Entries are stored sorted by key. If a key repeats in a pair
        sequence, the first occurrence is kept.

        Raises:
            TypeError: If a key is not a str.
        """
        pairs = entries.items() if isinstance(entries, Mapping) else entries

        members = {}
        for key, value in pairs:
            if not isinstance(key, str):
                raise TypeError(
                    f"JSON object keys must be str, got {type(key).__name__}"
                )
            if key not in members:
                members[key] = cls.from_python(value)

        return cls(JSONType.OBJECT, tuple(sorted(members.items())))

    @classmethod
    def from_python(cls, value: Any) -> "JSONValue":
        """
        Convert a plain python value into a JSONValue.

        =====================================================================
        CONVERSION TABLE
        =====================================================================

            JSONValue        → returned as-is
            None             → NULL
            bool             → BOOL   (checked before int: bool is an int)
            int              → INT
            float            → FLOAT
            str              → STRING
            list / tuple     → ARRAY
            dict / Mapping   → OBJECT

        =====================================================================

        Raises:
            TypeError: For any other type.
        """
        if isinstance(value, JSONValue):
            return value
        if value is None:
            return cls.null()
        if isinstance(value, bool):
            return cls.boolean(value)
        if isinstance(value, int):
            return cls.integer(value)
        if isinstance(value, float):
            return cls.number(value)
        if isinstance(value, str):
            return cls.string(value)
        if isinstance(value, (list, tuple)):
            return cls.array(value)
        if isinstance(value, Mapping):
            return cls.object(value)
        raise TypeError(
            f"Cannot convert {type(value).__name__} to a JSON value"
        )

    # =========================================================================
    # ACCESSORS
    # =========================================================================

    @property
    def is_null(self) -> bool:
        return self.kind is JSONType.NULL

    def keys(self) -> Tuple[str, ...]:
        """Object keys in serialization order."""
        if self.kind is not JSONType.OBJECT:
            raise TypeError(f"{self.kind.value} value has no keys")
        return tuple(key for key, _ in self.data)

    def __getitem__(self, index: Union[int, str]) -> "JSONValue":
        if self.kind is JSONType.ARRAY:
            return self.data[index]
        if self.kind is JSONType.OBJECT:
            for key, value in self.data:
                if key == index:
                    return value
            raise KeyError(index)
        raise TypeError(f"{self.kind.value} value is not subscriptable")

    # =========================================================================
    # SERIALIZATION
    # =========================================================================

    def stringify(self) -> str:
        """
        Serialize to compact JSON text.

        Never raises: the constructor already rejected anything it could
        not serialize.
        """
        kind = self.kind

        if kind is JSONType.NULL:
            return "null"
        if kind is JSONType.BOOL:
            return "true" if self.data else "false"
        if kind is JSONType.INT:
            return str(self.data)
        if kind is JSONType.FLOAT:
            # Six fixed decimals, like C's "%f"
            return "%f" % self.data
        if kind is JSONType.STRING:
            return '"' + escape_string(self.data) + '"'
        if kind is JSONType.ARRAY:
            return "[" + ",".join(item.stringify() for item in self.data) + "]"

        # OBJECT
        return "{" + ",".join(
            '"' + escape_string(key) + '":' + value.stringify()
            for key, value in self.data
        ) + "}"

    def __str__(self) -> str:
        return self.stringify()
