"""Process-wide standard output and error sinks."""

from __future__ import annotations

import functools
import sys
from typing import NamedTuple

from .stream import StreamWriter


class DefaultSinks(NamedTuple):
    """Sinks over the process's standard streams.

    Either member is ``None`` when the process has no such stream (for
    example ``pythonw`` on Windows).
    """

    stdout: StreamWriter | None
    stderr: StreamWriter | None


@functools.cache
def get_default_sinks() -> DefaultSinks:
    """Create the standard-stream sinks once and share them.

    The streams are captured on the first call.  Call
    ``get_default_sinks.cache_clear()`` to pick up replaced streams
    (useful in tests).
    """
    stdout = StreamWriter(sys.stdout) if sys.stdout is not None else None
    stderr = StreamWriter(sys.stderr, flush=True) if sys.stderr is not None else None
    return DefaultSinks(stdout=stdout, stderr=stderr)
