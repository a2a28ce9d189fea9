"""Argument type derivation."""

from .deriver import derive_types

__all__ = ["derive_types"]
