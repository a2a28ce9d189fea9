"""strictfmt: checked printf-style formatting with pluggable sinks.

Entry points:
    sprintf, printf, printfn, eprintf, eprintfn, fprintf, fprintfn, bprintf,
    ksprintf, kprintf, kfprintf, kbprintf, failwithf, sscanf,
    PrintfEngine, get_default_engine, with_continuation

Engine:
    FormatSpec, parse, derive_types, check_arguments, Printer, render, layout

Sinks:
    Sink, StringAccumulator, StreamWriter, TextBuilder, SinkKind, bind_sink,
    DefaultSinks, get_default_sinks

Models & Types:
    ArgKind, ArgSlot, ArgumentTypeChain, ConversionKind, Directive, Flags,
    LiteralText, Placeholder, RenderOutcome, RenderSettings, SizedInt,
    SlotRole, default_settings, int8, uint8, int16, uint16, int32, uint32,
    int64, uint64, nativeint, unativeint

Exceptions:
    StrictFmtError, FormatError, InvalidDirectiveError, UnsupportedFlagError,
    ArgumentTypeMismatchError, SinkWriteError, FailwithError, ScanError
"""

from importlib.metadata import PackageNotFoundError, version

from strictfmt.binding import Printer, check_arguments
from strictfmt.derivation import derive_types
from strictfmt.exceptions import (
    ArgumentTypeMismatchError,
    FailwithError,
    FormatError,
    InvalidDirectiveError,
    ScanError,
    SinkWriteError,
    StrictFmtError,
    UnsupportedFlagError,
)
from strictfmt.format_spec import FormatSpec
from strictfmt.models import (
    ArgKind,
    ArgSlot,
    ArgumentTypeChain,
    ConversionKind,
    Directive,
    Flags,
    LiteralText,
    Placeholder,
    RenderOutcome,
    RenderSettings,
    SizedInt,
    SlotRole,
    default_settings,
    int8,
    int16,
    int32,
    int64,
    nativeint,
    uint8,
    uint16,
    uint32,
    uint64,
    unativeint,
)
from strictfmt.parsing import parse
from strictfmt.printing import (
    PrintfEngine,
    bprintf,
    eprintf,
    eprintfn,
    failwithf,
    fprintf,
    fprintfn,
    get_default_engine,
    kbprintf,
    kfprintf,
    kprintf,
    ksprintf,
    printf,
    printfn,
    sprintf,
    with_continuation,
)
from strictfmt.protocols import Sink
from strictfmt.rendering import layout, render
from strictfmt.scanning import sscanf
from strictfmt.sinks import (
    DefaultSinks,
    SinkKind,
    StreamWriter,
    StringAccumulator,
    TextBuilder,
    bind_sink,
    get_default_sinks,
)

try:
    __version__ = version("strictfmt")
except PackageNotFoundError:
    __version__ = "0.0.0-dev"

__all__ = [
    "ArgKind",
    "ArgSlot",
    "ArgumentTypeChain",
    "ArgumentTypeMismatchError",
    "ConversionKind",
    "DefaultSinks",
    "Directive",
    "FailwithError",
    "Flags",
    "FormatError",
    "FormatSpec",
    "InvalidDirectiveError",
    "LiteralText",
    "Placeholder",
    "Printer",
    "PrintfEngine",
    "RenderOutcome",
    "RenderSettings",
    "ScanError",
    "Sink",
    "SinkKind",
    "SinkWriteError",
    "SizedInt",
    "SlotRole",
    "StreamWriter",
    "StrictFmtError",
    "StringAccumulator",
    "TextBuilder",
    "UnsupportedFlagError",
    "__version__",
    "bind_sink",
    "bprintf",
    "check_arguments",
    "default_settings",
    "derive_types",
    "eprintf",
    "eprintfn",
    "failwithf",
    "fprintf",
    "fprintfn",
    "get_default_engine",
    "get_default_sinks",
    "int8",
    "int16",
    "int32",
    "int64",
    "kbprintf",
    "kfprintf",
    "kprintf",
    "ksprintf",
    "layout",
    "nativeint",
    "parse",
    "printf",
    "printfn",
    "render",
    "sprintf",
    "sscanf",
    "uint8",
    "uint16",
    "uint32",
    "uint64",
    "unativeint",
    "with_continuation",
]
