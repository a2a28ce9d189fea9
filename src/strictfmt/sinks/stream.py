"""Write-through sink over a text stream."""

from __future__ import annotations

import logging
from typing import TextIO

from strictfmt.exceptions import SinkWriteError

logger = logging.getLogger(__name__)


class StreamWriter:
    """Writes rendered text straight to a text stream (file, ``sys.stdout``, ``io.StringIO``).

    Implements the :class:`~strictfmt.protocols.sink.Sink` protocol.
    Failures from the stream abort the render as :class:`SinkWriteError`;
    text already written is not rolled back.
    """

    __slots__ = ("_flush", "_stream")

    def __init__(self, stream: TextIO, *, flush: bool = False) -> None:
        if not callable(getattr(stream, "write", None)):
            msg = f"StreamWriter needs an object with write(), got {type(stream).__name__}"
            raise TypeError(msg)
        self._stream = stream
        self._flush = flush

    @property
    def context(self) -> TextIO:
        return self._stream

    @property
    def stream(self) -> TextIO:
        return self._stream

    def write(self, text: str) -> None:
        try:
            self._stream.write(text)
        except (OSError, ValueError) as exc:
            logger.warning("Write to %r failed", self._stream, exc_info=True)
            msg = f"failed to write to {self._stream!r}: {exc}"
            raise SinkWriteError(msg) from exc

    def flush(self) -> None:
        """Flush the stream when this writer was created with ``flush=True``."""
        if not self._flush:
            return
        try:
            self._stream.flush()
        except (OSError, ValueError) as exc:
            msg = f"failed to flush {self._stream!r}: {exc}"
            raise SinkWriteError(msg) from exc

    def residue(self) -> None:
        return None

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._stream!r})"
