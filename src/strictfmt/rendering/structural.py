"""Structural ``%A`` layout.

Values are printed from their shape, not from ``__str__``: strings are
quoted, containers show their elements, and dataclasses, pydantic models
and named tuples print as records::

    layout([1, 2, 3])            # '[1; 2; 3]'
    layout({"a": (1, "x")})      # 'map [("a", (1, "x"))]'
    layout(Point(x=1, y=2))      # '{ x = 1\\n  y = 2 }'

Lines wider than ``print_width`` are broken one element per line;
containers longer than ``print_length`` are truncated with ``...``.
"""

from __future__ import annotations

import dataclasses
import math
from collections.abc import Mapping
from decimal import Decimal
from enum import Enum
from typing import Any

from pydantic import BaseModel

from strictfmt.models.integers import NATIVE_BITS, SizedInt
from strictfmt.models.settings import RenderSettings, default_settings

ELLIPSIS = "..."

_INT_SUFFIXES: dict[tuple[int, bool], str] = {
    (8, True): "y",
    (8, False): "uy",
    (16, True): "s",
    (16, False): "us",
    (32, True): "",
    (32, False): "u",
    (NATIVE_BITS, True): "L",
    (NATIVE_BITS, False): "UL",
}

_ESCAPES: dict[str, str] = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\0": "\\0",
}


def quote(text: str) -> str:
    """Double-quote ``text`` with backslash escapes."""
    return '"' + "".join(_ESCAPES.get(ch, ch) for ch in text) + '"'


def _indent_continuation(text: str, pad: str) -> str:
    return text.replace("\n", "\n" + pad)


def _record_fields(value: Any) -> list[tuple[str, Any]] | None:
    """Field name/value pairs for record-like values, else ``None``."""
    if isinstance(value, BaseModel):
        return [(name, getattr(value, name)) for name in type(value).model_fields]
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return [(f.name, getattr(value, f.name)) for f in dataclasses.fields(value)]
    if isinstance(value, tuple) and hasattr(value, "_fields"):
        return list(zip(value._fields, value, strict=True))
    return None


class _Layout:
    """One layout pass; tracks containers on the stack to cut cycles."""

    def __init__(self, settings: RenderSettings) -> None:
        self.settings = settings
        self._active: set[int] = set()

    def render(self, value: Any, depth: int) -> str:
        if depth > self.settings.print_depth:
            return ELLIPSIS
        scalar = self._scalar(value)
        if scalar is not None:
            return scalar
        if id(value) in self._active:
            return ELLIPSIS
        self._active.add(id(value))
        try:
            return self._compound(value, depth + 1)
        finally:
            self._active.discard(id(value))

    def _scalar(self, value: Any) -> str | None:
        if value is None:
            return "None"
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, SizedInt):
            return f"{value.value}{_INT_SUFFIXES.get((value.bits, value.signed), '')}"
        if isinstance(value, Enum):
            return value.name
        if isinstance(value, int):
            return str(value)
        if isinstance(value, float):
            if math.isnan(value):
                return "nan"
            if math.isinf(value):
                return "infinity" if value > 0 else "-infinity"
            return repr(value)
        if isinstance(value, Decimal):
            return f"{value}M"
        if isinstance(value, str):
            return quote(value)
        if isinstance(value, bytes | bytearray):
            return repr(bytes(value))
        return None

    def _compound(self, value: Any, depth: int) -> str:
        fields = _record_fields(value)
        if fields is not None:
            return self._record(fields, depth)
        if isinstance(value, list):
            return self._block("[", [self.render(v, depth) for v in self._take(value)], ";", "]")
        if isinstance(value, tuple):
            items = [self.render(v, depth) for v in self._take(value)]
            if len(value) == 1:
                return f"({items[0]},)"
            return self._block("(", items, ",", ")")
        if isinstance(value, Mapping):
            pairs = [
                self.render(item, depth) if isinstance(item, _Truncated)
                else f"({self.render(item[0], depth)}, {self.render(item[1], depth)})"
                for item in self._take(value.items())
            ]
            return self._block("map [", pairs, ";", "]")
        if isinstance(value, set | frozenset):
            try:
                ordered = sorted(value)
            except TypeError:
                ordered = sorted(value, key=lambda v: self.render(v, depth))
            items = [self.render(v, depth) for v in self._take(ordered)]
            return self._block("set [", items, ";", "]")
        attrs = getattr(value, "__dict__", None)
        if attrs:
            body = self._record(list(attrs.items()), depth)
            return f"{type(value).__name__} {body}"
        return repr(value)

    def _take(self, items: Any) -> list[Any]:
        items = list(items)
        limit = self.settings.print_length
        if len(items) > limit:
            return [*items[:limit], _Truncated()]
        return items

    def _block(self, open_: str, items: list[str], sep: str, close: str) -> str:
        one_line = open_ + f"{sep} ".join(items) + close
        if "\n" not in one_line and len(one_line) <= self.settings.print_width:
            return one_line
        pad = " " * len(open_)
        lines = []
        for i, item in enumerate(items):
            prefix = open_ if i == 0 else pad
            suffix = close if i == len(items) - 1 else sep
            lines.append(prefix + _indent_continuation(item, pad) + suffix)
        return "\n".join(lines) if lines else open_ + close

    def _record(self, fields: list[tuple[str, Any]], depth: int) -> str:
        if not fields:
            return "{}"
        lines = []
        for i, (name, val) in enumerate(fields):
            prefix = "{ " if i == 0 else "  "
            head = f"{prefix}{name} = "
            rendered = self.render(val, depth)
            lines.append(head + _indent_continuation(rendered, " " * len(head)))
        return "\n".join(lines) + " }"


class _Truncated:
    """Stand-in element rendered as ``...`` after the length limit."""

    def __repr__(self) -> str:
        return ELLIPSIS


def layout(value: Any, settings: RenderSettings | None = None) -> str:
    """Structural text for ``value``."""
    return _Layout(settings or default_settings()).render(value, depth=0)
