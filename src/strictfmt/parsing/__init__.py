"""Format-string parsing."""

from .parser import parse, placeholders

__all__ = ["parse", "placeholders"]
