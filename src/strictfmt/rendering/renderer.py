"""Renderer: walks a directive sequence and writes formatted arguments to a sink."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import Any

from strictfmt.derivation.deriver import derive_types
from strictfmt.exceptions import ArgumentTypeMismatchError, SinkWriteError
from strictfmt.models.directive import (
    NUMERIC_CONVERSIONS,
    SIGNED_CONVERSIONS,
    ConversionKind,
    Directive,
    LiteralText,
    Placeholder,
)
from strictfmt.models.integers import SizedInt
from strictfmt.models.outcome import RenderOutcome
from strictfmt.models.settings import RenderSettings, default_settings
from strictfmt.protocols.sink import Sink
from strictfmt.sinks.stream import StreamWriter

from . import numeric
from .numeric import NumberText
from .structural import layout

logger = logging.getLogger(__name__)

Converter = Callable[[Placeholder, Any, int | None, RenderSettings], str | NumberText]


def _float_precision(precision: int | None, settings: RenderSettings) -> int:
    return settings.default_float_precision if precision is None else precision


_CONVERTERS: dict[ConversionKind, Converter] = {
    ConversionKind.BOOL: lambda ph, v, p, s: "true" if v else "false",
    ConversionKind.STRING: lambda ph, v, p, s: "" if v is None else v,
    ConversionKind.CHAR: lambda ph, v, p, s: v,
    ConversionKind.SIGNED_INT: lambda ph, v, p, s: numeric.signed_decimal(v),
    ConversionKind.UNSIGNED_INT: lambda ph, v, p, s: numeric.unsigned_decimal(v),
    ConversionKind.HEX_LOWER: lambda ph, v, p, s: numeric.hexadecimal(v, upper=False),
    ConversionKind.HEX_UPPER: lambda ph, v, p, s: numeric.hexadecimal(v, upper=True),
    ConversionKind.OCTAL: lambda ph, v, p, s: numeric.octal(v),
    ConversionKind.FLOAT_EXP: lambda ph, v, p, s: numeric.float_exp(
        v, _float_precision(p, s), upper=ph.uppercase, exponent_digits=s.exponent_digits
    ),
    ConversionKind.FLOAT_FIXED: lambda ph, v, p, s: numeric.float_fixed(
        v, _float_precision(p, s)
    ),
    ConversionKind.FLOAT_GENERAL: lambda ph, v, p, s: numeric.float_general(
        v, _float_precision(p, s), upper=ph.uppercase, exponent_digits=s.exponent_digits
    ),
    ConversionKind.DECIMAL: lambda ph, v, p, s: numeric.decimal_text(v, p),
    ConversionKind.GENERIC_DISPLAY: lambda ph, v, p, s: "<null>" if v is None else str(v),
    ConversionKind.GENERIC_STRUCTURAL: lambda ph, v, p, s: layout(v, s),
}
"""Rendering function per conversion kind."""


def justify(text: str, width: int | None, *, left: bool, zero: bool, sign: str = "") -> str:
    """Pad ``sign + text`` to ``width``.

    Zero padding goes between the sign and the digits; left justification
    always pads with spaces on the right.
    """
    size = len(sign) + len(text)
    if width is None or size >= width:
        return sign + text
    fill = width - size
    if left:
        return sign + text + " " * fill
    if zero:
        return sign + "0" * fill + text
    return " " * fill + sign + text


def _sign(ph: Placeholder, number: NumberText) -> str:
    if number.negative:
        return "-"
    if ph.conversion not in SIGNED_CONVERSIONS or not number.signable:
        return ""
    if ph.flags.force_sign:
        return "+"
    if ph.flags.space_sign:
        return " "
    return ""


class _Arguments:
    """Left-to-right cursor over the argument values."""

    __slots__ = ("_index", "_values")

    def __init__(self, values: Sequence[Any]) -> None:
        self._values = values
        self._index = 0

    def take(self) -> Any:
        if self._index >= len(self._values):
            msg = f"ran out of arguments after {self._index}"
            raise ArgumentTypeMismatchError(msg, slot=self._index)
        value = self._values[self._index]
        self._index += 1
        return value

    def take_int(self) -> int:
        value = self.take()
        return value.value if isinstance(value, SizedInt) else int(value)


def format_placeholder(
    ph: Placeholder,
    value: Any,
    width: int | None,
    precision: int | None,
    settings: RenderSettings,
) -> str:
    """Render one non-custom placeholder with its resolved width and precision."""
    left = ph.flags.left_justify
    if width is not None and width < 0:
        left = True
        width = -width

    converted = _CONVERTERS[ph.conversion](ph, value, precision, settings)
    if isinstance(converted, NumberText):
        zero = (
            ph.flags.zero_pad
            and ph.conversion in NUMERIC_CONVERSIONS
            and converted.finite
        )
        return justify(converted.body, width, left=left, zero=zero, sign=_sign(ph, converted))
    return justify(converted, width, left=left, zero=False)


def _call_formatter(sink: Sink, formatter: Callable[..., Any], *value: Any) -> Any:
    """Run a %a/%t formatter against the sink context.

    Stream failures raised while the formatter writes to a stream context
    surface as :class:`SinkWriteError`, like failures of the sink itself.
    """
    if not isinstance(sink, StreamWriter):
        return formatter(sink.context, *value)
    try:
        return formatter(sink.context, *value)
    except (OSError, ValueError) as exc:
        logger.warning("Formatter write to %r failed", sink.stream, exc_info=True)
        msg = f"failed to write to {sink.stream!r}: {exc}"
        raise SinkWriteError(msg) from exc


def render(
    directives: Sequence[Directive],
    args: Sequence[Any],
    sink: Sink,
    settings: RenderSettings | None = None,
    *,
    arity: int | None = None,
) -> RenderOutcome:
    """Render ``args`` through ``directives`` into ``sink``.

    Literal directives are written verbatim.  Placeholders consume their
    ``*`` width, ``*`` precision and value from ``args`` in that order.
    ``%a`` and ``%t`` call their formatter with ``sink.context``; a ``str``
    return value is the residue and is written to the sink, anything else
    (``None``, the count returned by ``stream.write``) is ignored.

    Parameters:
        directives: Parsed directive sequence.
        args: Argument values, already checked by the binding layer.
        sink: Destination for the output.
        settings: Rendering settings (defaults to :func:`default_settings`).
        arity: Expected argument count, usually a cached
            :attr:`FormatSpec.arity`.  Derived from ``directives`` when omitted.

    Returns:
        The sink's residue and the number of characters written.

    Raises:
        ArgumentTypeMismatchError: ``args`` has the wrong length.
        SinkWriteError: The sink rejected a write; the render stops.
    """
    settings = settings or default_settings()
    expected = derive_types(directives).arity if arity is None else arity
    if len(args) != expected:
        msg = f"format expects {expected} argument(s), got {len(args)}"
        raise ArgumentTypeMismatchError(msg)

    cursor = _Arguments(args)
    length = 0

    def emit(text: str) -> None:
        nonlocal length
        if text:
            sink.write(text)
            length += len(text)

    for directive in directives:
        if isinstance(directive, LiteralText):
            emit(directive.text)
            continue

        width = cursor.take_int() if directive.dynamic_width else directive.width
        precision = cursor.take_int() if directive.dynamic_precision else directive.precision
        if precision is not None and precision < 0:
            precision = None

        if directive.conversion == ConversionKind.CUSTOM_CONTEXT_FN:
            formatter = cursor.take()
            residue = _call_formatter(sink, formatter, cursor.take())
        elif directive.conversion == ConversionKind.CUSTOM_CONTEXT_ACTION:
            residue = _call_formatter(sink, cursor.take())
        else:
            emit(format_placeholder(directive, cursor.take(), width, precision, settings))
            continue
        if isinstance(residue, str):
            emit(residue)

    if isinstance(sink, StreamWriter):
        sink.flush()
    logger.debug("Rendered %d directive(s), %d char(s) to %r", len(directives), length, sink)
    return RenderOutcome(residue=sink.residue(), length=length)
