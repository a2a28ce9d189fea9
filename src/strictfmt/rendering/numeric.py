"""Number formatting for the integer, float and decimal conversions.

Every function returns a :class:`NumberText`: the unsigned body plus the
facts the renderer needs to place a sign and padding around it.
"""

from __future__ import annotations

import math
from decimal import Decimal
from typing import NamedTuple

from strictfmt.models.integers import SizedInt, context_width

NAN_TEXT = "NaN"
INFINITY_TEXT = "Infinity"

Real = int | float | Decimal


class NumberText(NamedTuple):
    """Formatted magnitude of a number.

    ``finite`` is false for NaN and infinities (never zero padded);
    ``signable`` is false for NaN (no ``+``/space sign).
    """

    body: str
    negative: bool = False
    finite: bool = True
    signable: bool = True


# ---------------------------------------------------------------------------
# Integers
# ---------------------------------------------------------------------------


def _int_value(value: int | SizedInt) -> int:
    return value.value if isinstance(value, SizedInt) else value


def unsigned(value: int | SizedInt) -> int:
    """Reinterpret a negative integer as two's complement at its width."""
    if isinstance(value, SizedInt):
        return value.unsigned_value()
    if value < 0:
        return value % (1 << context_width(value))
    return value


def signed_decimal(value: int | SizedInt) -> NumberText:
    n = _int_value(value)
    return NumberText(str(abs(n)), negative=n < 0)


def unsigned_decimal(value: int | SizedInt) -> NumberText:
    return NumberText(str(unsigned(value)))


def hexadecimal(value: int | SizedInt, *, upper: bool) -> NumberText:
    return NumberText(format(unsigned(value), "X" if upper else "x"))


def octal(value: int | SizedInt) -> NumberText:
    return NumberText(format(unsigned(value), "o"))


# ---------------------------------------------------------------------------
# Floats
# ---------------------------------------------------------------------------


def _as_real(value: Real | SizedInt) -> float | Decimal:
    if isinstance(value, SizedInt):
        return Decimal(value.value)
    if isinstance(value, int):
        return Decimal(value)
    return value


def _non_finite(value: float | Decimal) -> NumberText | None:
    if isinstance(value, Decimal):
        if value.is_nan():
            return NumberText(NAN_TEXT, finite=False, signable=False)
        if value.is_infinite():
            return NumberText(INFINITY_TEXT, negative=value.is_signed(), finite=False)
        return None
    if math.isnan(value):
        return NumberText(NAN_TEXT, finite=False, signable=False)
    if math.isinf(value):
        return NumberText(INFINITY_TEXT, negative=value < 0, finite=False)
    return None


def _is_negative(value: float | Decimal) -> bool:
    if isinstance(value, Decimal):
        return value.is_signed()
    return math.copysign(1.0, value) < 0


def _exponent(exp: int, digits: int) -> str:
    sign = "-" if exp < 0 else "+"
    return f"{sign}{abs(exp):0{digits}d}"


def _split_exp(text: str) -> tuple[str, int]:
    mantissa, _, exp = text.partition("e")
    return mantissa, int(exp)


def float_exp(value: Real, precision: int, *, upper: bool, exponent_digits: int) -> NumberText:
    """``%e``: one digit before the point, explicit exponent sign, fixed exponent width."""
    real = _as_real(value)
    special = _non_finite(real)
    if special is not None:
        return special
    mantissa, exp = _split_exp(format(abs(real), f".{precision}e"))
    if not mantissa.replace(".", "").strip("0"):
        exp = 0
    body = f"{mantissa}e{_exponent(exp, exponent_digits)}"
    return NumberText(body.upper() if upper else body, negative=_is_negative(real))


def float_fixed(value: Real, precision: int) -> NumberText:
    """``%f``: ``precision`` digits after the decimal point."""
    real = _as_real(value)
    special = _non_finite(real)
    if special is not None:
        return special
    return NumberText(format(abs(real), f".{precision}f"), negative=_is_negative(real))


def _positional(digits: str, exp: int) -> str:
    """Place the point in ``d.ddd * 10**exp`` and strip trailing fraction zeros."""
    if exp >= 0:
        whole = digits[: exp + 1].ljust(exp + 1, "0")
        frac = digits[exp + 1 :]
    else:
        whole = "0"
        frac = "0" * (-exp - 1) + digits
    frac = frac.rstrip("0")
    return f"{whole}.{frac}" if frac else whole


def float_general(
    value: Real, precision: int, *, upper: bool, exponent_digits: int
) -> NumberText:
    """``%g``: ``precision`` significant digits in fixed or exponential form.

    The exponential form is used when the decimal exponent is below -4 or
    at least the number of significant digits, so no digit beyond the
    requested precision is printed as if it were exact.  Both candidates
    drop trailing zeros; when they are equally long the fixed form is used.
    """
    real = _as_real(value)
    special = _non_finite(real)
    if special is not None:
        return special
    significant = max(precision, 1)
    mantissa, exp = _split_exp(format(abs(real), f".{significant - 1}e"))
    digits = mantissa.replace(".", "")
    if not digits.strip("0"):
        exp = 0

    fixed = _positional(digits, exp)
    short_mantissa = mantissa.rstrip("0").rstrip(".") if "." in mantissa else mantissa
    exponential = f"{short_mantissa}e{_exponent(exp, exponent_digits)}"

    use_fixed = -4 <= exp < significant or len(fixed) == len(exponential)
    body = fixed if use_fixed else exponential
    return NumberText(body.upper() if upper else body, negative=_is_negative(real))


def decimal_text(value: Decimal | int, precision: int | None) -> NumberText:
    """``%M``: plain notation, rounded to ``precision`` fractional digits when given."""
    number = value if isinstance(value, Decimal) else Decimal(value)
    special = _non_finite(number)
    if special is not None:
        return special
    spec = "f" if precision is None else f".{precision}f"
    return NumberText(format(abs(number), spec), negative=number.is_signed())
