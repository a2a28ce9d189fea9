"""CLI interface for strictfmt.

Requires the 'cli' extra: pip install strictfmt[cli]
"""

from __future__ import annotations

import sys
from decimal import Decimal, InvalidOperation
from typing import Any

try:
    import typer
    from rich.console import Console
    from rich.markup import escape
    from rich.table import Table
except ImportError:
    print(
        "CLI dependencies not installed. Install with: pip install strictfmt[cli]",
        file=sys.stderr,
    )
    sys.exit(1)

from strictfmt import __version__
from strictfmt.exceptions import StrictFmtError
from strictfmt.format_spec import FormatSpec
from strictfmt.models.chain import ArgKind, ArgSlot
from strictfmt.models.directive import LiteralText
from strictfmt.printing import get_default_engine
from strictfmt.rendering.structural import layout
from strictfmt.scanning import sscanf

app = typer.Typer(
    name="strictfmt",
    help="Checked printf-style formatting.",
    add_completion=False,
)
console = Console()


def _fail(message: str) -> typer.Exit:
    console.print(f"[red]Error: {escape(message)}[/red]", highlight=False, soft_wrap=True)
    return typer.Exit(code=1)


def _load_spec(fmt: str) -> FormatSpec:
    try:
        return FormatSpec.of(fmt)
    except StrictFmtError as exc:
        raise _fail(str(exc)) from exc


def _coerce(slot: ArgSlot, text: str) -> Any:
    """Convert one command-line string to the value its slot expects."""
    kind = slot.kind
    if kind in (ArgKind.CONTEXT_FN, ArgKind.CONTEXT_ACTION):
        msg = f"argument {slot.index} needs a function and cannot be given on the command line"
        raise ValueError(msg)
    if kind == ArgKind.INTEGER:
        return int(text, 0)
    if kind == ArgKind.FLOAT:
        return float(text)
    if kind == ArgKind.DECIMAL:
        try:
            return Decimal(text)
        except InvalidOperation:
            msg = f"invalid decimal {text!r}"
            raise ValueError(msg) from None
    if kind == ArgKind.BOOL:
        lowered = text.lower()
        if lowered not in ("true", "false"):
            msg = f"invalid bool {text!r}; use true or false"
            raise ValueError(msg)
        return lowered == "true"
    if kind == ArgKind.CHAR and len(text) != 1:
        msg = f"argument {slot.index} expects a single character, got {text!r}"
        raise ValueError(msg)
    return text


@app.callback()
def main(
    version: bool = typer.Option(False, "--version", "-v", help="Show version"),
) -> None:
    if version:
        console.print(f"strictfmt {__version__}")
        raise typer.Exit()


@app.command()
def info() -> None:
    """Show information about the strictfmt installation."""
    table = Table(title="strictfmt info")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="green")
    table.add_row("Version", __version__)
    table.add_row("Python", sys.version.split()[0])

    for dep_name in ["pydantic", "typer", "rich"]:
        try:
            mod = __import__(dep_name)
            ver = getattr(mod, "__version__", "installed")
            table.add_row(dep_name, str(ver))
        except ImportError:
            table.add_row(dep_name, "[red]not installed[/red]")

    console.print(table)


@app.command()
def check(
    fmt: str = typer.Argument(..., help="Format string to validate"),
) -> None:
    """Parse a format string and show its directives and derived signature."""
    spec = _load_spec(fmt)
    table = Table(title=f"Directives of {fmt!r}")
    table.add_column("Pos", justify="right", style="cyan")
    table.add_column("Directive", style="green")
    table.add_column("Conversion")
    for directive in spec.directives:
        if isinstance(directive, LiteralText):
            table.add_row("", repr(directive.text), "literal")
        else:
            table.add_row(
                str(directive.position), directive.source(), directive.conversion.value
            )
    console.print(table)
    console.print(
        f"Signature: {spec.chain().signature()}", markup=False, highlight=False, soft_wrap=True
    )


@app.command()
def render(
    fmt: str = typer.Argument(..., help="Format string"),
    args: list[str] = typer.Argument(None, help="Arguments, converted by slot type"),  # noqa: B008
    newline: bool = typer.Option(True, "--newline/--no-newline", help="Print a trailing newline"),
) -> None:
    """Render a format string with command-line arguments."""
    spec = _load_spec(fmt)
    chain = spec.chain()
    values = args or []
    if len(values) != chain.arity:
        msg = f"{fmt!r} expects {chain.arity} argument(s) ({chain.signature()}), got {len(values)}"
        raise _fail(msg)
    try:
        converted = [_coerce(slot, text) for slot, text in zip(chain.slots, values, strict=True)]
        result = get_default_engine().sprintf(spec, *converted)
    except (ValueError, StrictFmtError) as exc:
        raise _fail(str(exc)) from exc
    typer.echo(result, nl=newline)


@app.command()
def scan(
    fmt: str = typer.Argument(..., help="Format string"),
    text: str = typer.Argument(..., help="Text to read values from"),
) -> None:
    """Read values out of TEXT using a format string."""
    spec = _load_spec(fmt)
    try:
        values = sscanf(spec, text)
    except StrictFmtError as exc:
        raise _fail(str(exc)) from exc
    typer.echo(layout(values))


if __name__ == "__main__":
    app()
