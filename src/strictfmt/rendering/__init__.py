"""Rendering of directive sequences to sinks."""

from .renderer import format_placeholder, justify, render
from .structural import layout

__all__ = ["format_placeholder", "justify", "layout", "render"]
