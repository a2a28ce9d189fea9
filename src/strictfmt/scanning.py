"""``sscanf``: read values back out of text using a format string.

The format's directives are compiled into an anchored regular expression;
each placeholder becomes one capture group and its text is converted to
the Python type matching the conversion.
"""

from __future__ import annotations

import functools
import re
from collections.abc import Callable
from decimal import Decimal
from typing import Any

from strictfmt.exceptions import ScanError
from strictfmt.format_spec import FormatSpec
from strictfmt.models.directive import ConversionKind, LiteralText, Placeholder

_FLOAT = r"[+-]?(?:NaN|Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)"

_PATTERNS: dict[ConversionKind, str] = {
    ConversionKind.BOOL: r"true|false",
    ConversionKind.STRING: r".*?",
    ConversionKind.CHAR: r".",
    ConversionKind.SIGNED_INT: r"[+-]?\d+",
    ConversionKind.UNSIGNED_INT: r"\+?\d+",
    ConversionKind.HEX_LOWER: r"[0-9a-fA-F]+",
    ConversionKind.HEX_UPPER: r"[0-9a-fA-F]+",
    ConversionKind.OCTAL: r"[0-7]+",
    ConversionKind.FLOAT_EXP: _FLOAT,
    ConversionKind.FLOAT_FIXED: _FLOAT,
    ConversionKind.FLOAT_GENERAL: _FLOAT,
    ConversionKind.DECIMAL: r"[+-]?(?:\d+\.?\d*|\.\d+)",
}

_CONVERTERS: dict[ConversionKind, Callable[[str], Any]] = {
    ConversionKind.BOOL: lambda s: s == "true",
    ConversionKind.STRING: str,
    ConversionKind.CHAR: str,
    ConversionKind.SIGNED_INT: int,
    ConversionKind.UNSIGNED_INT: int,
    ConversionKind.HEX_LOWER: lambda s: int(s, 16),
    ConversionKind.HEX_UPPER: lambda s: int(s, 16),
    ConversionKind.OCTAL: lambda s: int(s, 8),
    ConversionKind.FLOAT_EXP: float,
    ConversionKind.FLOAT_FIXED: float,
    ConversionKind.FLOAT_GENERAL: float,
    ConversionKind.DECIMAL: Decimal,
}


def _group(ph: Placeholder) -> str:
    if ph.dynamic_width or ph.dynamic_precision:
        msg = f"cannot scan with '*' width or precision ({ph.source()} at position {ph.position})"
        raise ScanError(msg)
    pattern = _PATTERNS.get(ph.conversion)
    if pattern is None:
        msg = f"conversion '%{ph.char}' cannot be scanned (position {ph.position})"
        raise ScanError(msg)
    padded = ph.width is not None and ph.conversion not in (
        ConversionKind.STRING,
        ConversionKind.CHAR,
    )
    lead = r" *" if padded and not ph.flags.left_justify else ""
    trail = r" *" if padded and ph.flags.left_justify else ""
    return f"{lead}({pattern}){trail}"


@functools.lru_cache(maxsize=256)
def compile_pattern(spec: FormatSpec) -> re.Pattern[str]:
    """Anchored pattern with one group per placeholder of ``spec``.

    Raises:
        ScanError: The format uses ``*`` extents or a conversion that
            cannot be read back (``%O``, ``%A``, ``%a``, ``%t``).
    """
    parts = []
    for directive in spec.directives:
        if isinstance(directive, LiteralText):
            parts.append(re.escape(directive.text))
        else:
            parts.append(_group(directive))
    return re.compile("".join(parts), re.DOTALL)


def sscanf(fmt: str | FormatSpec, text: str) -> tuple[Any, ...]:
    """Match ``text`` against ``fmt`` and return the converted values.

    Example::

        sscanf("%s is %d years old", "Ada is 36 years old")   # ('Ada', 36)

    Raises:
        ScanError: ``text`` does not match, or the format cannot be scanned.
    """
    spec = FormatSpec.of(fmt)
    match = compile_pattern(spec).fullmatch(text)
    if match is None:
        msg = f"input {text!r} does not match format {spec.raw!r}"
        raise ScanError(msg)
    values = []
    for ph, raw in zip(spec.placeholders, match.groups(), strict=True):
        try:
            values.append(_CONVERTERS[ph.conversion](raw))
        except (ValueError, ArithmeticError) as exc:
            msg = f"cannot convert {raw!r} for {ph.source()}: {exc}"
            raise ScanError(msg) from exc
    return tuple(values)
