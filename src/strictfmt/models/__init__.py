"""Data models for strictfmt."""

from .chain import ArgKind, ArgSlot, ArgumentTypeChain, SlotRole
from .directive import (
    CONVERSION_CHARS,
    DYNAMIC,
    ConversionKind,
    Directive,
    Flags,
    LiteralText,
    Placeholder,
)
from .integers import (
    SizedInt,
    int8,
    int16,
    int32,
    int64,
    nativeint,
    sized,
    uint8,
    uint16,
    uint32,
    uint64,
    unativeint,
)
from .outcome import RenderOutcome
from .settings import RenderSettings, default_settings

__all__ = [
    "CONVERSION_CHARS",
    "DYNAMIC",
    "ArgKind",
    "ArgSlot",
    "ArgumentTypeChain",
    "ConversionKind",
    "Directive",
    "Flags",
    "LiteralText",
    "Placeholder",
    "RenderOutcome",
    "RenderSettings",
    "SizedInt",
    "SlotRole",
    "default_settings",
    "int8",
    "int16",
    "int32",
    "int64",
    "nativeint",
    "sized",
    "uint8",
    "uint16",
    "uint32",
    "uint64",
    "unativeint",
]
