"""Binding layer: checks call-site arguments against a derived type chain.

This is where an argument that does not fit its slot is rejected, before
the renderer writes anything to a sink.  :class:`Printer` adds curried
application on top: supplying fewer arguments than the chain expects
yields a printer waiting for the rest.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from decimal import Decimal
from typing import Any

from strictfmt.exceptions import ArgumentTypeMismatchError
from strictfmt.format_spec import FormatSpec
from strictfmt.models.chain import ArgKind, ArgSlot, ArgumentTypeChain
from strictfmt.models.integers import SizedInt


def _is_integer(value: Any) -> bool:
    return isinstance(value, SizedInt) or (isinstance(value, int) and not isinstance(value, bool))


def _is_float(value: Any) -> bool:
    return isinstance(value, int | float | Decimal) and not isinstance(value, bool)


def _is_decimal(value: Any) -> bool:
    return isinstance(value, Decimal) or (isinstance(value, int) and not isinstance(value, bool))


def _is_char(value: Any) -> bool:
    return isinstance(value, str) and len(value) == 1


def _anything(value: Any) -> bool:
    return True


_ACCEPTS: dict[ArgKind, Callable[[Any], bool]] = {
    ArgKind.BOOL: lambda v: isinstance(v, bool),
    ArgKind.STRING: lambda v: v is None or isinstance(v, str),
    ArgKind.CHAR: _is_char,
    ArgKind.INTEGER: _is_integer,
    ArgKind.FLOAT: _is_float,
    ArgKind.DECIMAL: _is_decimal,
    ArgKind.DISPLAY: _anything,
    ArgKind.STRUCTURAL: _anything,
    ArgKind.GENERIC: _anything,
    ArgKind.CONTEXT_FN: callable,
    ArgKind.CONTEXT_ACTION: callable,
}


def accepts(slot: ArgSlot, value: Any) -> bool:
    """Whether ``value`` can fill ``slot``."""
    return _ACCEPTS[slot.kind](value)


def check_arguments(chain: ArgumentTypeChain, args: Sequence[Any], offset: int = 0) -> None:
    """Validate ``args`` against ``chain`` starting at slot ``offset``.

    Raises:
        ArgumentTypeMismatchError: Too many arguments, or a value whose type
            does not fit its slot.
    """
    remaining = chain.arity - offset
    if len(args) > remaining:
        msg = (
            f"expected at most {remaining} more argument(s) for "
            f"'{chain.signature()}', got {len(args)}"
        )
        raise ArgumentTypeMismatchError(msg)
    for i, value in enumerate(args):
        slot = chain.slots[offset + i]
        if not accepts(slot, value):
            expected = slot.type_name()
            msg = (
                f"argument {slot.index} ({slot.role.value} of directive at position "
                f"{slot.directive_position}) expects {expected}, got {type(value).__name__}"
            )
            raise ArgumentTypeMismatchError(msg, slot=slot.index, expected=expected, actual=value)


class Printer:
    """A printer function partially applied to a prefix of its arguments.

    Calling the printer checks the new arguments; once every slot of the
    chain is filled, ``finish`` runs with the full argument tuple and its
    return value is returned.
    """

    __slots__ = ("_bound", "_chain", "_finish", "_spec")

    def __init__(
        self,
        spec: FormatSpec,
        chain: ArgumentTypeChain,
        finish: Callable[[tuple[Any, ...]], Any],
        bound: tuple[Any, ...] = (),
    ) -> None:
        self._spec = spec
        self._chain = chain
        self._finish = finish
        self._bound = bound

    @property
    def spec(self) -> FormatSpec:
        return self._spec

    @property
    def chain(self) -> ArgumentTypeChain:
        return self._chain

    @property
    def remaining(self) -> int:
        """Number of arguments still expected."""
        return self._chain.arity - len(self._bound)

    def __call__(self, *args: Any) -> Any:
        check_arguments(self._chain, args, offset=len(self._bound))
        bound = self._bound + args
        if len(bound) == self._chain.arity:
            return self._finish(bound)
        return Printer(self._spec, self._chain, self._finish, bound)

    def __repr__(self) -> str:
        rest = ArgumentTypeChain(
            slots=self._chain.slots[len(self._bound) :], result=self._chain.result
        )
        return f"<{type(self).__name__} {self._spec.raw!r}: {rest.signature()}>"


def apply(
    fmt: str | FormatSpec,
    result: str,
    finish: Callable[[FormatSpec, tuple[Any, ...]], Any],
    args: tuple[Any, ...],
) -> Any:
    """Bind ``args`` to the printer for ``fmt``.

    Returns ``finish(spec, all_args)`` when ``args`` fills the chain, or a
    :class:`Printer` awaiting the remaining arguments otherwise.
    """
    spec = FormatSpec.of(fmt)
    printer = Printer(spec, spec.chain(result), lambda bound: finish(spec, bound))
    return printer(*args)
