"""Rendering settings."""

from __future__ import annotations

import functools

from pydantic import BaseModel, ConfigDict, Field


class RenderSettings(BaseModel):
    """Tunable knobs for the renderer.

    The defaults reproduce the classic printf output: six digits of float
    precision and a three-digit exponent.  The ``print_*`` fields bound the
    structural ``%A`` layout.
    """

    default_float_precision: int = Field(default=6, ge=0, le=100)
    exponent_digits: int = Field(default=3, ge=1, le=10)
    newline: str = "\n"
    print_width: int = Field(default=80, gt=0)
    print_length: int = Field(default=100, gt=0)
    print_depth: int = Field(default=100, gt=0)

    model_config = ConfigDict(frozen=True)


@functools.cache
def default_settings() -> RenderSettings:
    """Shared default :class:`RenderSettings` instance."""
    return RenderSettings()
