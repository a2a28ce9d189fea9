"""Directive models produced by the format-string parser."""

from __future__ import annotations

from enum import StrEnum
from typing import Annotated, Literal, TypeAlias

from pydantic import BaseModel, ConfigDict, Field

DYNAMIC: Literal["*"] = "*"
"""Marker for a width or precision taken from the argument list."""

Extent: TypeAlias = int | Literal["*"] | None


class ConversionKind(StrEnum):
    """The closed set of conversions a placeholder can request."""

    BOOL = "bool"
    STRING = "string"
    CHAR = "char"
    SIGNED_INT = "signed-int"
    UNSIGNED_INT = "unsigned-int"
    HEX_LOWER = "hex-lower"
    HEX_UPPER = "hex-upper"
    OCTAL = "octal"
    FLOAT_EXP = "float-exp"
    FLOAT_FIXED = "float-fixed"
    FLOAT_GENERAL = "float-general"
    DECIMAL = "decimal"
    GENERIC_DISPLAY = "generic-via-display"
    GENERIC_STRUCTURAL = "generic-via-structural-layout"
    CUSTOM_CONTEXT_FN = "custom-context-fn"
    CUSTOM_CONTEXT_ACTION = "custom-context-action"


CONVERSION_CHARS: dict[str, ConversionKind] = {
    "b": ConversionKind.BOOL,
    "s": ConversionKind.STRING,
    "c": ConversionKind.CHAR,
    "d": ConversionKind.SIGNED_INT,
    "i": ConversionKind.SIGNED_INT,
    "u": ConversionKind.UNSIGNED_INT,
    "x": ConversionKind.HEX_LOWER,
    "X": ConversionKind.HEX_UPPER,
    "o": ConversionKind.OCTAL,
    "e": ConversionKind.FLOAT_EXP,
    "E": ConversionKind.FLOAT_EXP,
    "f": ConversionKind.FLOAT_FIXED,
    "F": ConversionKind.FLOAT_FIXED,
    "g": ConversionKind.FLOAT_GENERAL,
    "G": ConversionKind.FLOAT_GENERAL,
    "M": ConversionKind.DECIMAL,
    "O": ConversionKind.GENERIC_DISPLAY,
    "A": ConversionKind.GENERIC_STRUCTURAL,
    "a": ConversionKind.CUSTOM_CONTEXT_FN,
    "t": ConversionKind.CUSTOM_CONTEXT_ACTION,
}

NUMERIC_CONVERSIONS: frozenset[ConversionKind] = frozenset(
    {
        ConversionKind.SIGNED_INT,
        ConversionKind.UNSIGNED_INT,
        ConversionKind.HEX_LOWER,
        ConversionKind.HEX_UPPER,
        ConversionKind.OCTAL,
        ConversionKind.FLOAT_EXP,
        ConversionKind.FLOAT_FIXED,
        ConversionKind.FLOAT_GENERAL,
        ConversionKind.DECIMAL,
    }
)
"""Conversions that honour the zero-pad flag."""

SIGNED_CONVERSIONS: frozenset[ConversionKind] = frozenset(
    {
        ConversionKind.SIGNED_INT,
        ConversionKind.FLOAT_EXP,
        ConversionKind.FLOAT_FIXED,
        ConversionKind.FLOAT_GENERAL,
        ConversionKind.DECIMAL,
    }
)
"""Conversions that honour the ``+`` and space sign flags."""


class Flags(BaseModel):
    """Flags parsed from the ``[flags]`` part of a placeholder."""

    zero_pad: bool = False
    left_justify: bool = False
    force_sign: bool = False
    space_sign: bool = False

    model_config = ConfigDict(frozen=True)


class LiteralText(BaseModel):
    """Verbatim text between placeholders (``%%`` already unescaped)."""

    kind: Literal["literal"] = "literal"
    text: str

    model_config = ConfigDict(frozen=True)


class Placeholder(BaseModel):
    """A single ``%[flags][width][.precision]<conversion>`` directive."""

    kind: Literal["placeholder"] = "placeholder"
    position: int = Field(ge=0)
    flags: Flags = Field(default_factory=Flags)
    width: Extent = None
    precision: Extent = None
    conversion: ConversionKind
    char: str = Field(min_length=1, max_length=1)

    model_config = ConfigDict(frozen=True)

    @property
    def dynamic_width(self) -> bool:
        return self.width == DYNAMIC

    @property
    def dynamic_precision(self) -> bool:
        return self.precision == DYNAMIC

    @property
    def uppercase(self) -> bool:
        """Whether the conversion letter asks for uppercase output (``E``, ``G``, ``X``)."""
        return self.char.isupper()

    def source(self) -> str:
        """Reconstruct the directive text, e.g. ``%-6.2f``."""
        flags = "".join(
            ch
            for ch, on in (
                ("-", self.flags.left_justify),
                ("+", self.flags.force_sign),
                (" ", self.flags.space_sign),
                ("0", self.flags.zero_pad),
            )
            if on
        )
        width = "" if self.width is None else str(self.width)
        precision = "" if self.precision is None else f".{self.precision}"
        return f"%{flags}{width}{precision}{self.char}"


Directive: TypeAlias = Annotated[LiteralText | Placeholder, Field(discriminator="kind")]
