"""Directive parser: scans a format string into literal and placeholder directives.

Grammar::

    %[flags][width][.precision]<conversion>

    flags       0 - + space        ('#' is rejected)
    width       decimal literal or '*'
    precision   '.' followed by a decimal literal or '*'
    conversion  b s c d i u x X o e E f F g G M O A a t

``%%`` is a literal percent sign.  Parsing is pure, so results are cached
per raw string and shared between callers.
"""

from __future__ import annotations

import functools
import logging

from strictfmt.exceptions import InvalidDirectiveError, UnsupportedFlagError
from strictfmt.models.directive import (
    CONVERSION_CHARS,
    DYNAMIC,
    Directive,
    Extent,
    Flags,
    LiteralText,
    Placeholder,
)

logger = logging.getLogger(__name__)

_FLAG_FIELDS: dict[str, str] = {
    "0": "zero_pad",
    "-": "left_justify",
    "+": "force_sign",
    " ": "space_sign",
}
_UNSUPPORTED_FLAGS: frozenset[str] = frozenset({"#"})

PARSE_CACHE_SIZE = 1024


class _Scanner:
    """Cursor over the raw format string."""

    __slots__ = ("pos", "raw")

    def __init__(self, raw: str) -> None:
        self.raw = raw
        self.pos = 0

    def peek(self) -> str:
        return self.raw[self.pos] if self.pos < len(self.raw) else ""

    def take_digits(self) -> str:
        start = self.pos
        while self.pos < len(self.raw) and self.raw[self.pos].isdigit():
            self.pos += 1
        return self.raw[start : self.pos]

    def reject_unsupported(self) -> None:
        ch = self.peek()
        if ch in _UNSUPPORTED_FLAGS:
            msg = f"unsupported flag {ch!r} at position {self.pos}"
            raise UnsupportedFlagError(msg, flag=ch, position=self.pos)


def _invalid(raw: str, start: int, reason: str) -> InvalidDirectiveError:
    msg = f"invalid format directive at position {start} in {raw!r}: {reason}"
    return InvalidDirectiveError(msg, position=start)


def _read_extent(scanner: _Scanner) -> Extent:
    """Read a decimal literal or ``*``; ``None`` when neither is present."""
    if scanner.peek() == DYNAMIC:
        scanner.pos += 1
        return DYNAMIC
    digits = scanner.take_digits()
    return int(digits) if digits else None


def _parse_placeholder(scanner: _Scanner, start: int) -> Placeholder:
    raw = scanner.raw
    flags: dict[str, bool] = {}
    while True:
        scanner.reject_unsupported()
        ch = scanner.peek()
        if ch not in _FLAG_FIELDS:
            break
        flags[_FLAG_FIELDS[ch]] = True
        scanner.pos += 1

    width = _read_extent(scanner)
    scanner.reject_unsupported()

    precision: Extent = None
    if scanner.peek() == ".":
        scanner.pos += 1
        scanner.reject_unsupported()
        precision = _read_extent(scanner)
        if precision is None:
            raise _invalid(raw, start, "'.' must be followed by a precision")
        scanner.reject_unsupported()

    ch = scanner.peek()
    if not ch:
        raise _invalid(raw, start, "format string ends inside a directive")
    if ch not in CONVERSION_CHARS:
        raise _invalid(raw, start, f"unknown conversion {ch!r}")
    scanner.pos += 1
    return Placeholder(
        position=start,
        flags=Flags(**flags),
        width=width,
        precision=precision,
        conversion=CONVERSION_CHARS[ch],
        char=ch,
    )


@functools.lru_cache(maxsize=PARSE_CACHE_SIZE)
def parse(raw: str) -> tuple[Directive, ...]:
    """Parse ``raw`` into an immutable directive sequence.

    Parameters:
        raw: The format string.

    Returns:
        Directives in argument-consumption order.  Adjacent literal text
        (including unescaped ``%%``) is merged into a single
        :class:`LiteralText`.

    Raises:
        UnsupportedFlagError: A directive uses the ``#`` flag.
        InvalidDirectiveError: Any other malformed ``%`` sequence.
    """
    scanner = _Scanner(raw)
    directives: list[Directive] = []
    literal: list[str] = []

    def flush() -> None:
        text = "".join(literal)
        literal.clear()
        if text:
            directives.append(LiteralText(text=text))

    while scanner.pos < len(raw):
        next_pct = raw.find("%", scanner.pos)
        if next_pct < 0:
            literal.append(raw[scanner.pos :])
            break
        literal.append(raw[scanner.pos : next_pct])
        if raw.startswith("%%", next_pct):
            literal.append("%")
            scanner.pos = next_pct + 2
            continue
        flush()
        scanner.pos = next_pct + 1
        directives.append(_parse_placeholder(scanner, next_pct))

    flush()
    logger.debug("Parsed %r into %d directives", raw, len(directives))
    return tuple(directives)


def placeholders(directives: tuple[Directive, ...]) -> list[Placeholder]:
    """The placeholder directives of a sequence, in order."""
    return [d for d in directives if isinstance(d, Placeholder)]
