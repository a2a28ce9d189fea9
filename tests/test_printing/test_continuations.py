"""Tests for continuation entry points and curried printers."""

from __future__ import annotations

import io

import pytest

from strictfmt.binding import Printer
from strictfmt.exceptions import ArgumentTypeMismatchError, FailwithError
from strictfmt.printing import (
    failwithf,
    kbprintf,
    kfprintf,
    kprintf,
    ksprintf,
    sprintf,
    with_continuation,
)
from strictfmt.sinks.builder import TextBuilder


class TestWithContinuation:
    """The composition helper."""

    def test_composes(self) -> None:
        shout = with_continuation(lambda s: s + "!", str.upper)
        assert shout("hi") == "HI!"

    def test_keeps_metadata(self) -> None:
        def render_name(name: str) -> str:
            """Render a name."""
            return name

        wrapped = with_continuation(render_name, len)
        assert wrapped.__name__ == "render_name"
        assert wrapped.__doc__ == "Render a name."

    def test_failure_skips_continuation(self) -> None:
        calls: list[str] = []

        def failing() -> str:
            raise ValueError("nope")

        wrapped = with_continuation(failing, calls.append)
        with pytest.raises(ValueError, match="nope"):
            wrapped()
        assert calls == []


class TestStringContinuations:
    """ksprintf, kprintf and failwithf."""

    def test_ksprintf(self) -> None:
        assert ksprintf(str.upper, "%d apples", 3) == "3 APPLES"

    def test_kprintf_alias(self) -> None:
        assert kprintf(len, "%s", "four") == 4

    def test_continuation_runs_once(self) -> None:
        seen: list[str] = []
        ksprintf(seen.append, "%d-%d", 1, 2)
        assert seen == ["1-2"]

    def test_continuation_waits_for_all_arguments(self) -> None:
        seen: list[str] = []
        pending = ksprintf(seen.append, "%d-%d", 1)
        assert seen == []
        pending(2)
        assert seen == ["1-2"]

    def test_failwithf(self) -> None:
        with pytest.raises(FailwithError, match="bad value 7") as exc_info:
            failwithf("bad value %d", 7)
        assert exc_info.value.message == "bad value 7"

    def test_failwithf_curried(self) -> None:
        fail = failwithf("missing %s")
        with pytest.raises(FailwithError, match="missing key"):
            fail("key")


class TestWriteContinuations:
    """kfprintf and kbprintf call their continuation with no arguments."""

    def test_kfprintf(self, buffer: io.StringIO) -> None:
        result = kfprintf(lambda: buffer.getvalue(), buffer, "%d", 9)
        assert result == "9"

    def test_kbprintf(self, builder: TextBuilder) -> None:
        assert kbprintf(lambda: len(builder), builder, "%s", "abc") == 3

    def test_kbprintf_requires_builder(self, buffer: io.StringIO) -> None:
        calls: list[int] = []
        with pytest.raises(TypeError, match="TextBuilder"):
            kbprintf(lambda: calls.append(1), buffer, "%d", 1)  # type: ignore[arg-type]
        assert calls == []
        assert buffer.getvalue() == ""

    def test_continuation_skipped_on_bad_argument(self, builder: TextBuilder) -> None:
        calls: list[int] = []
        with pytest.raises(ArgumentTypeMismatchError):
            kbprintf(lambda: calls.append(1), builder, "%d", "x")
        assert calls == []
        assert str(builder) == ""


class TestCurrying:
    """Partial application through the public entry points."""

    def test_one_at_a_time(self) -> None:
        step = sprintf("%s %d %b")
        assert isinstance(step, Printer)
        step = step("a")
        step = step(1)
        assert step(True) == "a 1 true"

    def test_printer_is_reusable(self) -> None:
        greet = sprintf("Hello %s!")
        assert greet("world") == "Hello world!"
        assert greet("there") == "Hello there!"

    def test_signature_in_repr(self) -> None:
        assert repr(sprintf("%d %s")) == "<Printer '%d %s': int -> str -> str>"
