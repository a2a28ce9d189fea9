"""Tests for strictfmt.derivation.deriver and FormatSpec chain caching."""

from __future__ import annotations

import pytest

from strictfmt.derivation.deriver import derive_types
from strictfmt.exceptions import InvalidDirectiveError
from strictfmt.format_spec import FormatSpec
from strictfmt.models.chain import ArgKind, SlotRole
from strictfmt.parsing.parser import parse


def _kinds(fmt: str) -> list[ArgKind]:
    return [slot.kind for slot in derive_types(parse(fmt)).slots]


class TestConversionTable:
    """Each conversion maps to one semantic argument kind."""

    @pytest.mark.parametrize(
        ("fmt", "kind"),
        [
            ("%b", ArgKind.BOOL),
            ("%s", ArgKind.STRING),
            ("%c", ArgKind.CHAR),
            ("%d", ArgKind.INTEGER),
            ("%i", ArgKind.INTEGER),
            ("%u", ArgKind.INTEGER),
            ("%x", ArgKind.INTEGER),
            ("%X", ArgKind.INTEGER),
            ("%o", ArgKind.INTEGER),
            ("%e", ArgKind.FLOAT),
            ("%F", ArgKind.FLOAT),
            ("%G", ArgKind.FLOAT),
            ("%M", ArgKind.DECIMAL),
            ("%O", ArgKind.DISPLAY),
            ("%A", ArgKind.STRUCTURAL),
        ],
    )
    def test_single_value_slot(self, fmt: str, kind: ArgKind) -> None:
        assert _kinds(fmt) == [kind]

    def test_literals_contribute_nothing(self) -> None:
        chain = derive_types(parse("no placeholders 100%%"))
        assert chain.arity == 0
        assert chain.signature() == "str"


class TestExtraSlots:
    """Dynamic extents and custom-context directives add slots."""

    def test_dynamic_width_precedes_value(self) -> None:
        chain = derive_types(parse("%*d"))
        assert [s.role for s in chain.slots] == [SlotRole.WIDTH, SlotRole.VALUE]
        assert [s.kind for s in chain.slots] == [ArgKind.INTEGER, ArgKind.INTEGER]

    def test_dynamic_width_then_precision_then_value(self) -> None:
        chain = derive_types(parse("%*.*f"))
        assert [s.role for s in chain.slots] == [
            SlotRole.WIDTH,
            SlotRole.PRECISION,
            SlotRole.VALUE,
        ]
        assert chain.signature() == "int -> int -> float -> str"

    def test_custom_fn_adds_formatter_and_value(self) -> None:
        chain = derive_types(parse("%a"))
        formatter, value = chain.slots
        assert formatter.kind == ArgKind.CONTEXT_FN
        assert value.kind == ArgKind.GENERIC
        assert formatter.type_var == value.type_var == "'a"
        assert chain.signature() == "(ctx -> 'a -> residue) -> 'a -> str"

    def test_each_custom_fn_gets_a_fresh_type_variable(self) -> None:
        chain = derive_types(parse("%a %a"))
        assert [s.type_var for s in chain.slots] == ["'a", "'a", "'b", "'b"]

    def test_custom_action_adds_one_slot(self) -> None:
        chain = derive_types(parse("%t"))
        assert chain.arity == 1
        assert chain.signature() == "(ctx -> residue) -> str"

    def test_slot_indices_and_positions(self) -> None:
        chain = derive_types(parse("x%*dy%s"))
        assert [s.index for s in chain.slots] == [0, 1, 2]
        assert [s.directive_position for s in chain.slots] == [1, 1, 5]


class TestResultType:
    """The chain terminates in the declared result."""

    def test_default_result_is_str(self) -> None:
        assert derive_types(parse("%d %s")).signature() == "int -> str -> str"

    def test_custom_result(self) -> None:
        assert derive_types(parse("%d"), result="None").signature() == "int -> None"

    def test_with_result_keeps_slots(self) -> None:
        chain = derive_types(parse("%d"))
        other = chain.with_result("'Result")
        assert other.slots == chain.slots
        assert other.result == "'Result"
        assert chain.with_result("str") is chain


class TestDeterminism:
    """Derivation is a pure function of the directives."""

    def test_same_string_same_chain(self) -> None:
        fmt = "%-6.2f %s %*d %a"
        assert derive_types(parse(fmt)) == derive_types(parse(fmt))


class TestFormatSpec:
    """FormatSpec validates eagerly and caches chains."""

    def test_invalid_format_fails_on_construction(self) -> None:
        with pytest.raises(InvalidDirectiveError):
            FormatSpec("%q")

    def test_non_string_rejected(self) -> None:
        with pytest.raises(TypeError):
            FormatSpec(42)  # type: ignore[arg-type]

    def test_chain_is_cached(self) -> None:
        spec = FormatSpec("%d %s")
        assert spec.chain() is spec.chain()
        assert spec.chain("None") is spec.chain("None")
        assert spec.chain("None").slots == spec.chain().slots

    def test_arity(self) -> None:
        assert FormatSpec("%*d %a %t").arity == 5

    def test_of_returns_shared_instance(self) -> None:
        assert FormatSpec.of("%d") is FormatSpec.of("%d")

    def test_of_passes_spec_through(self) -> None:
        spec = FormatSpec("%s")
        assert FormatSpec.of(spec) is spec

    def test_equality_by_raw_string(self) -> None:
        assert FormatSpec("%d") == FormatSpec("%d")
        assert hash(FormatSpec("%d")) == hash(FormatSpec("%d"))
        assert FormatSpec("%d") != FormatSpec("%i")

    def test_placeholders(self) -> None:
        assert [ph.char for ph in FormatSpec("a%db%sc").placeholders] == ["d", "s"]

    def test_repr(self) -> None:
        assert repr(FormatSpec("%d")) == "FormatSpec('%d')"
