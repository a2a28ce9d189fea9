"""Tests for the structural %A layout."""

from __future__ import annotations

import dataclasses
from decimal import Decimal
from enum import Enum
from typing import NamedTuple

from pydantic import BaseModel

from strictfmt.models.integers import int8, int64, uint8, uint16, uint32
from strictfmt.models.settings import RenderSettings
from strictfmt.rendering.structural import layout, quote


class Colour(Enum):
    RED = 1
    GREEN = 2


@dataclasses.dataclass
class Point:
    x: int
    y: int


class Pair(NamedTuple):
    left: str
    right: str


class User(BaseModel):
    name: str
    age: int


class Bag:
    def __init__(self) -> None:
        self.size = 3


class TestScalars:
    """Leaf values."""

    def test_none_and_bools(self) -> None:
        assert layout(None) == "None"
        assert layout(True) == "true"
        assert layout(False) == "false"

    def test_numbers(self) -> None:
        assert layout(42) == "42"
        assert layout(-1.5) == "-1.5"
        assert layout(float("nan")) == "nan"
        assert layout(float("inf")) == "infinity"
        assert layout(float("-inf")) == "-infinity"
        assert layout(Decimal("1.50")) == "1.50M"

    def test_sized_integers_carry_suffixes(self) -> None:
        assert layout(int8(-3)) == "-3y"
        assert layout(uint8(3)) == "3uy"
        assert layout(uint16(3)) == "3us"
        assert layout(uint32(3)) == "3u"
        assert layout(int64(3)) == "3L"

    def test_strings_are_quoted(self) -> None:
        assert layout("hi") == '"hi"'
        assert layout('a"b\n') == '"a\\"b\\n"'
        assert quote("\t") == '"\\t"'

    def test_enum_by_name(self) -> None:
        assert layout(Colour.GREEN) == "GREEN"

    def test_bytes(self) -> None:
        assert layout(b"ab") == "b'ab'"


class TestCollections:
    """Lists, tuples, mappings and sets."""

    def test_list(self) -> None:
        assert layout([1, 2, 3]) == "[1; 2; 3]"
        assert layout([]) == "[]"

    def test_tuples(self) -> None:
        assert layout((1, "x")) == '(1, "x")'
        assert layout((1,)) == "(1,)"
        assert layout(()) == "()"

    def test_mapping(self) -> None:
        assert layout({"a": (1, "x")}) == 'map [("a", (1, "x"))]'

    def test_set_is_sorted(self) -> None:
        assert layout({3, 1, 2}) == "set [1; 2; 3]"
        assert layout(frozenset({"b", "a"})) == 'set ["a"; "b"]'

    def test_unorderable_set(self) -> None:
        assert layout({1, "a"}) == 'set ["a"; 1]'

    def test_nested(self) -> None:
        assert layout([[1], [2, 3]]) == "[[1]; [2; 3]]"


class TestRecords:
    """Dataclasses, pydantic models, named tuples and plain objects."""

    def test_dataclass(self) -> None:
        assert layout(Point(x=1, y=2)) == "{ x = 1\n  y = 2 }"

    def test_pydantic_model(self) -> None:
        assert layout(User(name="ann", age=30)) == '{ name = "ann"\n  age = 30 }'

    def test_named_tuple(self) -> None:
        assert layout(Pair("l", "r")) == '{ left = "l"\n  right = "r" }'

    def test_plain_object(self) -> None:
        assert layout(Bag()) == "Bag { size = 3 }"

    def test_object_without_fields_uses_repr(self) -> None:
        marker = object()
        assert layout(marker) == repr(marker)

    def test_record_in_list_indents(self) -> None:
        assert layout([Point(x=1, y=2)]) == "[{ x = 1\n   y = 2 }]"


class TestLimits:
    """Width, length and depth settings."""

    def test_truncated_length(self) -> None:
        settings = RenderSettings(print_length=2)
        assert layout([1, 2, 3, 4], settings) == "[1; 2; ...]"

    def test_truncated_mapping(self) -> None:
        settings = RenderSettings(print_length=1)
        assert layout({"a": 1, "b": 2}, settings) == 'map [("a", 1); ...]'

    def test_wide_list_breaks_lines(self) -> None:
        settings = RenderSettings(print_width=10)
        assert layout([1000, 2000, 3000], settings) == "[1000;\n 2000;\n 3000]"

    def test_depth_limit(self) -> None:
        settings = RenderSettings(print_depth=1)
        assert layout([[[1]]], settings) == "[[...]]"

    def test_cycle(self) -> None:
        items: list[object] = [1]
        items.append(items)
        assert layout(items) == "[1; ...]"
