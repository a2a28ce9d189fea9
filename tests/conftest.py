"""Shared fixtures for strictfmt tests."""

from __future__ import annotations

import io
from collections.abc import Iterator

import pytest

from strictfmt.printing import PrintfEngine, get_default_engine
from strictfmt.sinks.accumulator import StringAccumulator
from strictfmt.sinks.builder import TextBuilder
from strictfmt.sinks.defaults import get_default_sinks
from strictfmt.sinks.stream import StreamWriter


class FailingStream(io.StringIO):
    """A text stream that accepts ``ok_writes`` writes, then raises OSError.

    Used to exercise sink failure propagation without touching real files.
    """

    def __init__(self, ok_writes: int = 0) -> None:
        super().__init__()
        self.ok_writes = ok_writes
        self.attempts = 0

    def write(self, text: str) -> int:
        self.attempts += 1
        if self.attempts > self.ok_writes:
            raise OSError("disk full")
        return super().write(text)


class CapturedEngine:
    """A PrintfEngine whose standard sinks write to in-memory buffers."""

    def __init__(self) -> None:
        self.out = io.StringIO()
        self.err = io.StringIO()
        self.engine = PrintfEngine(stdout=StreamWriter(self.out), stderr=StreamWriter(self.err))


@pytest.fixture(autouse=True)
def _reset_default_sinks() -> Iterator[None]:
    """Re-capture sys.stdout/sys.stderr for every test (pytest swaps them)."""
    get_default_sinks.cache_clear()
    get_default_engine.cache_clear()
    yield
    get_default_sinks.cache_clear()
    get_default_engine.cache_clear()


@pytest.fixture
def accumulator() -> StringAccumulator:
    """Return a fresh StringAccumulator."""
    return StringAccumulator()


@pytest.fixture
def builder() -> TextBuilder:
    """Return an empty TextBuilder."""
    return TextBuilder()


@pytest.fixture
def buffer() -> io.StringIO:
    """Return an empty in-memory text stream."""
    return io.StringIO()


@pytest.fixture
def captured() -> CapturedEngine:
    """Return an engine wired to in-memory stdout/stderr buffers."""
    return CapturedEngine()
