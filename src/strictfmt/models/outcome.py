"""Render outcome model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class RenderOutcome(BaseModel):
    """Result of one render.

    ``residue`` is the accumulated text for string sinks and ``None`` for
    sinks that write through to an external target.  ``length`` counts the
    characters the renderer wrote.
    """

    residue: str | None = None
    length: int = Field(default=0, ge=0)

    model_config = ConfigDict(frozen=True)
