"""Type deriver: maps a directive sequence to its argument type chain.

The derivation never looks at argument values, so a chain can be computed
once per format string and reused to check every call site.
"""

from __future__ import annotations

from collections.abc import Iterable

from strictfmt.models.chain import ArgKind, ArgSlot, ArgumentTypeChain, SlotRole
from strictfmt.models.directive import ConversionKind, Directive, Placeholder

_VALUE_KINDS: dict[ConversionKind, ArgKind] = {
    ConversionKind.BOOL: ArgKind.BOOL,
    ConversionKind.STRING: ArgKind.STRING,
    ConversionKind.CHAR: ArgKind.CHAR,
    ConversionKind.SIGNED_INT: ArgKind.INTEGER,
    ConversionKind.UNSIGNED_INT: ArgKind.INTEGER,
    ConversionKind.HEX_LOWER: ArgKind.INTEGER,
    ConversionKind.HEX_UPPER: ArgKind.INTEGER,
    ConversionKind.OCTAL: ArgKind.INTEGER,
    ConversionKind.FLOAT_EXP: ArgKind.FLOAT,
    ConversionKind.FLOAT_FIXED: ArgKind.FLOAT,
    ConversionKind.FLOAT_GENERAL: ArgKind.FLOAT,
    ConversionKind.DECIMAL: ArgKind.DECIMAL,
    ConversionKind.GENERIC_DISPLAY: ArgKind.DISPLAY,
    ConversionKind.GENERIC_STRUCTURAL: ArgKind.STRUCTURAL,
}


def _type_var(n: int) -> str:
    """``'a``, ``'b``, ... ``'z``, ``'a1``, ..."""
    letter = chr(ord("a") + n % 26)
    suffix = "" if n < 26 else str(n // 26)
    return f"'{letter}{suffix}"


def derive_types(directives: Iterable[Directive], result: str = "str") -> ArgumentTypeChain:
    """Derive the ordered argument slots for ``directives``.

    Each ``*`` width and ``*`` precision adds an integer slot before the
    value slot of its placeholder.  ``%a`` adds a formatter slot and a
    generic value slot sharing a type variable; ``%t`` adds one formatter
    slot.

    Parameters:
        directives: Parsed directive sequence.
        result: Label of the printer's terminal result type.

    Returns:
        The :class:`ArgumentTypeChain` ending in ``result``.
    """
    slots: list[ArgSlot] = []
    type_vars = 0

    def add(kind: ArgKind, role: SlotRole, ph: Placeholder, type_var: str | None = None) -> None:
        slots.append(
            ArgSlot(
                index=len(slots),
                kind=kind,
                role=role,
                directive_position=ph.position,
                type_var=type_var,
            )
        )

    for directive in directives:
        if not isinstance(directive, Placeholder):
            continue
        if directive.dynamic_width:
            add(ArgKind.INTEGER, SlotRole.WIDTH, directive)
        if directive.dynamic_precision:
            add(ArgKind.INTEGER, SlotRole.PRECISION, directive)

        if directive.conversion == ConversionKind.CUSTOM_CONTEXT_FN:
            var = _type_var(type_vars)
            type_vars += 1
            add(ArgKind.CONTEXT_FN, SlotRole.FORMATTER, directive, var)
            add(ArgKind.GENERIC, SlotRole.VALUE, directive, var)
        elif directive.conversion == ConversionKind.CUSTOM_CONTEXT_ACTION:
            add(ArgKind.CONTEXT_ACTION, SlotRole.FORMATTER, directive)
        else:
            add(_VALUE_KINDS[directive.conversion], SlotRole.VALUE, directive)

    return ArgumentTypeChain(slots=tuple(slots), result=result)
