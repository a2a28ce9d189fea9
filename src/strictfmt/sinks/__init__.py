"""Sink adapters: string accumulator, stream writer and text builder."""

from .accumulator import StringAccumulator
from .builder import TextBuilder
from .defaults import DefaultSinks, get_default_sinks
from .factory import SinkKind, bind_sink
from .stream import StreamWriter

__all__ = [
    "DefaultSinks",
    "SinkKind",
    "StreamWriter",
    "StringAccumulator",
    "TextBuilder",
    "bind_sink",
    "get_default_sinks",
]
