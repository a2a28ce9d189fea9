"""Sink protocol for render destinations."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Sink(Protocol):
    """Protocol for a destination that accepts formatted text incrementally.

    Any object with ``write()``, ``context`` and ``residue()`` satisfies it
    via structural subtyping.  A sink belongs to the render that uses it;
    writing to one sink from several threads needs external locking.
    """

    @property
    def context(self) -> Any:
        """Object handed to ``%a`` and ``%t`` formatter functions.

        ``None`` for string accumulators (formatters return their text),
        the underlying stream or builder otherwise (formatters may write to
        it directly).
        """
        ...

    def write(self, text: str) -> None:
        """Append ``text``.

        Raises:
            SinkWriteError: The destination rejected the write.
        """
        ...

    def residue(self) -> str | None:
        """Text accumulated so far, or ``None`` for write-through sinks."""
        ...
