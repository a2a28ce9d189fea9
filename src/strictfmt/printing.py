"""Public printf entry points, sink binding and continuations.

Every entry point takes the format (a ``str`` or :class:`FormatSpec`)
followed by its arguments.  Arguments are checked against the format's
type chain before anything is written.  Supplying fewer arguments than
the format needs returns a :class:`~strictfmt.binding.Printer` that
waits for the rest::

    sprintf("%-6.2f|%s", 3.14159, "pi")   # '3.14  |pi'
    greet = sprintf("Hello %s!")
    greet("world")                        # 'Hello world!'
    ksprintf(str.upper, "%d apples", 3)   # '3 APPLES'
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Callable
from typing import Any, NoReturn, TextIO, TypeVar

from strictfmt.binding import apply
from strictfmt.exceptions import FailwithError, SinkWriteError
from strictfmt.format_spec import FormatSpec
from strictfmt.models.outcome import RenderOutcome
from strictfmt.models.settings import RenderSettings, default_settings
from strictfmt.protocols.sink import Sink
from strictfmt.rendering.renderer import render
from strictfmt.sinks.accumulator import StringAccumulator
from strictfmt.sinks.builder import TextBuilder
from strictfmt.sinks.defaults import get_default_sinks
from strictfmt.sinks.factory import SinkKind, bind_sink
from strictfmt.sinks.stream import StreamWriter

logger = logging.getLogger(__name__)

R = TypeVar("R")
T = TypeVar("T")

Format = str | FormatSpec

RESULT_STRING = "str"
RESULT_UNIT = "None"
RESULT_CONTINUATION = "'Result"
RESULT_NEVER = "NoReturn"


def with_continuation(
    render_fn: Callable[..., T], cont: Callable[[T], R]
) -> Callable[..., R]:
    """Compose ``cont`` after ``render_fn``.

    ``cont`` runs exactly once, after ``render_fn`` returns.  If
    ``render_fn`` raises, the exception propagates and ``cont`` never runs.
    """

    @functools.wraps(render_fn)
    def wrapped(*args: Any, **kwargs: Any) -> R:
        return cont(render_fn(*args, **kwargs))

    return wrapped


def _raise_failure(message: str) -> NoReturn:
    logger.debug("failwithf: %s", message)
    raise FailwithError(message)


def _require_builder(builder: Any) -> TextBuilder:
    if not isinstance(builder, TextBuilder):
        msg = f"expected a TextBuilder, got {type(builder).__name__}"
        raise TypeError(msg)
    return builder


def _as_stream_sink(target: TextIO | Sink) -> Sink:
    if isinstance(target, Sink):
        return target
    return bind_sink(SinkKind.STREAM, target)


class PrintfEngine:
    """The printf family bound to explicit settings and standard sinks.

    Parameters:
        settings: Rendering settings; :func:`default_settings` when omitted.
        stdout: Sink for ``printf``/``printfn``.  When omitted the process's
            standard output sink from :func:`get_default_sinks` is used.
        stderr: Sink for ``eprintf``/``eprintfn``, resolved the same way.

    Example::

        buffer = io.StringIO()
        engine = PrintfEngine(stdout=StreamWriter(buffer))
        engine.printfn("%s=%d", "answer", 42)
        buffer.getvalue()   # 'answer=42\\n'
    """

    __slots__ = ("_settings", "_stderr", "_stdout")

    def __init__(
        self,
        *,
        settings: RenderSettings | None = None,
        stdout: Sink | None = None,
        stderr: Sink | None = None,
    ) -> None:
        self._settings = settings
        self._stdout = stdout
        self._stderr = stderr

    @property
    def settings(self) -> RenderSettings:
        return self._settings or default_settings()

    @property
    def stdout(self) -> Sink | None:
        return self._stdout if self._stdout is not None else get_default_sinks().stdout

    @property
    def stderr(self) -> Sink | None:
        return self._stderr if self._stderr is not None else get_default_sinks().stderr

    # ------------------------------------------------------------------
    # Rendering primitives
    # ------------------------------------------------------------------

    def render_to(self, sink: Sink, spec: FormatSpec, args: tuple[Any, ...]) -> RenderOutcome:
        """Render ``args`` with ``spec`` into ``sink``."""
        return render(spec.directives, args, sink, self.settings, arity=spec.arity)

    def render_to_string(self, spec: FormatSpec, args: tuple[Any, ...]) -> str:
        """Render into a fresh :class:`StringAccumulator` and return its text."""
        accumulator = StringAccumulator()
        self.render_to(accumulator, spec, args)
        return accumulator.finish()

    def _writer(
        self, get_sink: Callable[[], Sink], *, line: bool = False
    ) -> Callable[[FormatSpec, tuple[Any, ...]], None]:
        """Finisher that renders into ``get_sink()``, resolved when the printer completes."""

        def finish(spec: FormatSpec, args: tuple[Any, ...]) -> None:
            sink = get_sink()
            self.render_to(sink, spec, args)
            if line:
                sink.write(self.settings.newline)
                if isinstance(sink, StreamWriter):
                    sink.flush()

        return finish

    def _standard(self, name: str) -> Callable[[], Sink]:
        def resolve() -> Sink:
            sink = self.stdout if name == "stdout" else self.stderr
            if sink is None:
                msg = f"standard {name} is not available in this process"
                raise SinkWriteError(msg)
            return sink

        return resolve

    # ------------------------------------------------------------------
    # String
    # ------------------------------------------------------------------

    def sprintf(self, fmt: Format, *args: Any) -> Any:
        """Format to a new string."""
        return apply(fmt, RESULT_STRING, self.render_to_string, args)

    def ksprintf(self, cont: Callable[[str], R], fmt: Format, *args: Any) -> Any:
        """Format to a string, then return ``cont(text)``."""
        finish = with_continuation(self.render_to_string, cont)
        return apply(fmt, RESULT_CONTINUATION, finish, args)

    def kprintf(self, cont: Callable[[str], R], fmt: Format, *args: Any) -> Any:
        """Alias of :meth:`ksprintf`."""
        return self.ksprintf(cont, fmt, *args)

    def failwithf(self, fmt: Format, *args: Any) -> Any:
        """Format a message and raise it as :class:`FailwithError`."""
        finish = with_continuation(self.render_to_string, _raise_failure)
        return apply(fmt, RESULT_NEVER, finish, args)

    # ------------------------------------------------------------------
    # Streams
    # ------------------------------------------------------------------

    def fprintf(self, stream: TextIO | Sink, fmt: Format, *args: Any) -> Any:
        """Format to a text stream (or any sink)."""
        sink = _as_stream_sink(stream)
        return apply(fmt, RESULT_UNIT, self._writer(lambda: sink), args)

    def fprintfn(self, stream: TextIO | Sink, fmt: Format, *args: Any) -> Any:
        """Format to a text stream followed by the configured newline."""
        sink = _as_stream_sink(stream)
        return apply(fmt, RESULT_UNIT, self._writer(lambda: sink, line=True), args)

    def kfprintf(
        self, cont: Callable[[], R], stream: TextIO | Sink, fmt: Format, *args: Any
    ) -> Any:
        """Format to a text stream, then return ``cont()``."""
        sink = _as_stream_sink(stream)
        finish = with_continuation(self._writer(lambda: sink), lambda _: cont())
        return apply(fmt, RESULT_CONTINUATION, finish, args)

    def printf(self, fmt: Format, *args: Any) -> Any:
        """Format to standard output."""
        return apply(fmt, RESULT_UNIT, self._writer(self._standard("stdout")), args)

    def printfn(self, fmt: Format, *args: Any) -> Any:
        return apply(fmt, RESULT_UNIT, self._writer(self._standard("stdout"), line=True), args)

    def eprintf(self, fmt: Format, *args: Any) -> Any:
        """Format to standard error.

        Raises:
            SinkWriteError: The process has no standard error stream.
        """
        return apply(fmt, RESULT_UNIT, self._writer(self._standard("stderr")), args)

    def eprintfn(self, fmt: Format, *args: Any) -> Any:
        return apply(fmt, RESULT_UNIT, self._writer(self._standard("stderr"), line=True), args)

    # ------------------------------------------------------------------
    # Builders
    # ------------------------------------------------------------------

    def bprintf(self, builder: TextBuilder, fmt: Format, *args: Any) -> Any:
        """Append formatted text to ``builder``.

        Raises:
            TypeError: ``builder`` is not a :class:`TextBuilder`.
        """
        sink = bind_sink(SinkKind.BUILDER, _require_builder(builder))
        return apply(fmt, RESULT_UNIT, self._writer(lambda: sink), args)

    def kbprintf(
        self, cont: Callable[[], R], builder: TextBuilder, fmt: Format, *args: Any
    ) -> Any:
        """Append formatted text to ``builder``, then return ``cont()``."""
        sink = bind_sink(SinkKind.BUILDER, _require_builder(builder))
        finish = with_continuation(self._writer(lambda: sink), lambda _: cont())
        return apply(fmt, RESULT_CONTINUATION, finish, args)


@functools.cache
def get_default_engine() -> PrintfEngine:
    """Shared engine used by the module-level functions.

    Call ``get_default_engine.cache_clear()`` to reset it (useful in tests).
    """
    return PrintfEngine()


def sprintf(fmt: Format, *args: Any) -> Any:
    """Format ``args`` with ``fmt`` and return the string.

    Example::

        sprintf("%6d|%-6d|%06d", 42, 42, 42)   # '    42|42    |000042'
    """
    return get_default_engine().sprintf(fmt, *args)


def ksprintf(cont: Callable[[str], R], fmt: Format, *args: Any) -> Any:
    """Format to a string and return ``cont(string)``.

    ``cont`` is called exactly once, after the whole string is built.
    """
    return get_default_engine().ksprintf(cont, fmt, *args)


def kprintf(cont: Callable[[str], R], fmt: Format, *args: Any) -> Any:
    """Alias of :func:`ksprintf`."""
    return get_default_engine().kprintf(cont, fmt, *args)


def failwithf(fmt: Format, *args: Any) -> Any:
    """Format a message and raise :class:`FailwithError` carrying it."""
    return get_default_engine().failwithf(fmt, *args)


def fprintf(stream: TextIO | Sink, fmt: Format, *args: Any) -> Any:
    """Format to ``stream``."""
    return get_default_engine().fprintf(stream, fmt, *args)


def fprintfn(stream: TextIO | Sink, fmt: Format, *args: Any) -> Any:
    """Format to ``stream`` followed by a newline."""
    return get_default_engine().fprintfn(stream, fmt, *args)


def kfprintf(cont: Callable[[], R], stream: TextIO | Sink, fmt: Format, *args: Any) -> Any:
    return get_default_engine().kfprintf(cont, stream, fmt, *args)


def printf(fmt: Format, *args: Any) -> Any:
    """Format to standard output."""
    return get_default_engine().printf(fmt, *args)


def printfn(fmt: Format, *args: Any) -> Any:
    """Format to standard output followed by a newline."""
    return get_default_engine().printfn(fmt, *args)


def eprintf(fmt: Format, *args: Any) -> Any:
    """Format to standard error."""
    return get_default_engine().eprintf(fmt, *args)


def eprintfn(fmt: Format, *args: Any) -> Any:
    return get_default_engine().eprintfn(fmt, *args)


def bprintf(builder: TextBuilder, fmt: Format, *args: Any) -> Any:
    """Append formatted text to ``builder``."""
    return get_default_engine().bprintf(builder, fmt, *args)


def kbprintf(cont: Callable[[], R], builder: TextBuilder, fmt: Format, *args: Any) -> Any:
    return get_default_engine().kbprintf(cont, builder, fmt, *args)
