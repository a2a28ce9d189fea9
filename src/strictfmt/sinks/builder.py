"""Growable append-only text builder."""

from __future__ import annotations


class TextBuilder:
    """Append-only text buffer, the target of ``bprintf``.

    Implements the :class:`~strictfmt.protocols.sink.Sink` protocol; its
    ``context`` is the builder itself so ``%a``/``%t`` formatters can
    append to it directly.

    Example::

        builder = TextBuilder()
        bprintf(builder, "%d items", 3)
        builder.append("!")
        str(builder)   # '3 items!'
    """

    __slots__ = ("_length", "_parts")

    def __init__(self, initial: str = "") -> None:
        self._parts: list[str] = [initial] if initial else []
        self._length = len(initial)

    @property
    def context(self) -> TextBuilder:
        return self

    def append(self, text: str) -> None:
        """Append ``text``."""
        if not isinstance(text, str):
            msg = f"TextBuilder.append expects str, got {type(text).__name__}"
            raise TypeError(msg)
        if text:
            self._parts.append(text)
            self._length += len(text)

    def write(self, text: str) -> None:
        self.append(text)

    def residue(self) -> None:
        return None

    def to_string(self) -> str:
        if len(self._parts) > 1:
            self._parts = ["".join(self._parts)]
        return self._parts[0] if self._parts else ""

    def __len__(self) -> int:
        return self._length

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_string()!r})"
