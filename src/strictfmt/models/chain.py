"""Argument type chain models derived from a directive sequence."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field


class ArgKind(StrEnum):
    """Semantic category of one argument slot."""

    BOOL = "bool"
    STRING = "str"
    CHAR = "char"
    INTEGER = "int"
    FLOAT = "float"
    DECIMAL = "decimal"
    DISPLAY = "obj"
    STRUCTURAL = "any"
    CONTEXT_FN = "context-fn"
    CONTEXT_ACTION = "context-action"
    GENERIC = "generic"


class SlotRole(StrEnum):
    """What a slot feeds in its placeholder."""

    WIDTH = "width"
    PRECISION = "precision"
    VALUE = "value"
    FORMATTER = "formatter"


class ArgSlot(BaseModel):
    """One expected argument of a printer function.

    ``type_var`` ties a ``%a`` formatter to the value slot it receives
    (both carry the same name, e.g. ``'a``).
    """

    index: int = Field(ge=0)
    kind: ArgKind
    role: SlotRole
    directive_position: int = Field(ge=0)
    type_var: str | None = None

    model_config = ConfigDict(frozen=True)

    def type_name(self) -> str:
        """Render this slot as a type in a curried signature."""
        if self.kind == ArgKind.CONTEXT_FN:
            return f"(ctx -> {self.type_var} -> residue)"
        if self.kind == ArgKind.CONTEXT_ACTION:
            return "(ctx -> residue)"
        if self.kind == ArgKind.GENERIC:
            return self.type_var or "'a"
        return self.kind.value


class ArgumentTypeChain(BaseModel):
    """Ordered argument slots terminating in the printer's result type."""

    slots: tuple[ArgSlot, ...] = ()
    result: str = "str"

    model_config = ConfigDict(frozen=True)

    @property
    def arity(self) -> int:
        return len(self.slots)

    def signature(self) -> str:
        """Curried signature, e.g. ``int -> str -> str``."""
        parts = [slot.type_name() for slot in self.slots]
        parts.append(self.result)
        return " -> ".join(parts)

    def with_result(self, result: str) -> ArgumentTypeChain:
        """Return the same chain terminating in another result type."""
        if result == self.result:
            return self
        return self.model_copy(update={"result": result})
