"""Sink construction by kind."""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from strictfmt.protocols.sink import Sink

from .accumulator import StringAccumulator
from .builder import TextBuilder
from .stream import StreamWriter


class SinkKind(StrEnum):
    """The destinations a render can be bound to."""

    STRING = "string"
    STREAM = "stream"
    BUILDER = "builder"


def bind_sink(kind: SinkKind | str, target: Any = None) -> Sink:
    """Create a sink of ``kind`` over ``target``.

    Parameters:
        kind: ``"string"``, ``"stream"`` or ``"builder"``.
        target: Required text stream for ``"stream"``; optional existing
            :class:`TextBuilder` for ``"builder"``; must be ``None`` for
            ``"string"``.

    Returns:
        A fresh sink owned by the caller.

    Raises:
        ValueError: Unknown kind, or a target that does not fit the kind.
    """
    try:
        sink_kind = SinkKind(kind)
    except ValueError:
        valid = ", ".join(k.value for k in SinkKind)
        msg = f"unknown sink kind {kind!r}; expected one of: {valid}"
        raise ValueError(msg) from None

    if sink_kind == SinkKind.STRING:
        if target is not None:
            msg = "a string sink takes no target"
            raise ValueError(msg)
        return StringAccumulator()
    if sink_kind == SinkKind.STREAM:
        if target is None:
            msg = "a stream sink needs a text stream target"
            raise ValueError(msg)
        return StreamWriter(target)
    if target is None:
        return TextBuilder()
    if not isinstance(target, TextBuilder):
        msg = f"a builder sink target must be a TextBuilder, got {type(target).__name__}"
        raise ValueError(msg)
    return target
