"""Single-use in-memory string accumulator."""

from __future__ import annotations

from strictfmt.exceptions import SinkWriteError


class StringAccumulator:
    """Collects rendered text in memory.

    Implements the :class:`~strictfmt.protocols.sink.Sink` protocol.  The
    accumulator is single-use: :meth:`finish` seals it and returns the text,
    after which writes raise :class:`SinkWriteError`.
    """

    __slots__ = ("_finished", "_parts")

    def __init__(self) -> None:
        self._parts: list[str] = []
        self._finished = False

    @property
    def context(self) -> None:
        return None

    @property
    def finished(self) -> bool:
        return self._finished

    def write(self, text: str) -> None:
        if self._finished:
            msg = "cannot write to a finished StringAccumulator"
            raise SinkWriteError(msg)
        self._parts.append(text)

    def residue(self) -> str:
        return "".join(self._parts)

    def finish(self) -> str:
        """Seal the accumulator and return its text."""
        self._finished = True
        return self.residue()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(chars={len(self.residue())}, finished={self._finished})"
