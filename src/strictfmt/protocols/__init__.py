"""Protocol definitions for strictfmt's pluggable sinks."""

from .sink import Sink

__all__ = ["Sink"]
