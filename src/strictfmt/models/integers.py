"""Fixed-width integer arguments.

A plain ``int`` is a basic integer whose width is resolved by context.
Wrap it in :class:`SizedInt` to pin the width used by the unsigned
conversions (``%u``, ``%x``, ``%X``, ``%o``)::

    sprintf("%x", int8(-1))   # 'ff'
    sprintf("%x", -1)         # 'ffffffff'
"""

from __future__ import annotations

from typing import NamedTuple

NATIVE_BITS = 64


class SizedInt(NamedTuple):
    """An integer value tagged with its bit width and signedness."""

    value: int
    bits: int
    signed: bool

    def unsigned_value(self) -> int:
        """The value reinterpreted as an unsigned integer of ``bits`` width."""
        return self.value % (1 << self.bits)

    def __str__(self) -> str:
        return str(self.value)


def sized(value: int, bits: int, *, signed: bool) -> SizedInt:
    """Build a :class:`SizedInt`, rejecting values outside the range of the width."""
    if isinstance(value, bool) or not isinstance(value, int):
        msg = f"expected an int, got {type(value).__name__}"
        raise TypeError(msg)
    if bits <= 0:
        msg = f"bits must be positive, got {bits}"
        raise ValueError(msg)
    if signed:
        low, high = -(1 << (bits - 1)), (1 << (bits - 1)) - 1
    else:
        low, high = 0, (1 << bits) - 1
    if not low <= value <= high:
        kind = "int" if signed else "uint"
        msg = f"{value} is out of range for {kind}{bits} [{low}, {high}]"
        raise ValueError(msg)
    return SizedInt(value, bits, signed)


def int8(value: int) -> SizedInt:
    return sized(value, 8, signed=True)


def uint8(value: int) -> SizedInt:
    return sized(value, 8, signed=False)


def int16(value: int) -> SizedInt:
    return sized(value, 16, signed=True)


def uint16(value: int) -> SizedInt:
    return sized(value, 16, signed=False)


def int32(value: int) -> SizedInt:
    return sized(value, 32, signed=True)


def uint32(value: int) -> SizedInt:
    return sized(value, 32, signed=False)


def int64(value: int) -> SizedInt:
    return sized(value, 64, signed=True)


def uint64(value: int) -> SizedInt:
    return sized(value, 64, signed=False)


def nativeint(value: int) -> SizedInt:
    return sized(value, NATIVE_BITS, signed=True)


def unativeint(value: int) -> SizedInt:
    return sized(value, NATIVE_BITS, signed=False)


def context_width(value: int) -> int:
    """Narrowest of 32, 64, 128, ... bits whose signed range holds ``value``."""
    bits = 32
    while not -(1 << (bits - 1)) <= value < (1 << (bits - 1)):
        bits *= 2
    return bits
