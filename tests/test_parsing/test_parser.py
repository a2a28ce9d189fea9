"""Tests for strictfmt.parsing.parser."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from strictfmt.exceptions import FormatError, InvalidDirectiveError, UnsupportedFlagError
from strictfmt.models.directive import (
    DYNAMIC,
    ConversionKind,
    Flags,
    LiteralText,
    Placeholder,
)
from strictfmt.parsing.parser import parse, placeholders


class TestLiterals:
    """Literal text and escaped percent signs."""

    def test_empty_string(self) -> None:
        assert parse("") == ()

    def test_plain_text(self) -> None:
        assert parse("hello") == (LiteralText(text="hello"),)

    def test_escaped_percent_merges_into_one_literal(self) -> None:
        assert parse("100%%") == (LiteralText(text="100%"),)

    def test_escaped_percent_before_letter_is_not_a_directive(self) -> None:
        assert parse("%%d") == (LiteralText(text="%d"),)

    def test_literal_around_placeholders(self) -> None:
        directives = parse("a%db%%c")
        assert directives[0] == LiteralText(text="a")
        assert isinstance(directives[1], Placeholder)
        assert directives[2] == LiteralText(text="b%c")
        assert len(directives) == 3


class TestPlaceholders:
    """Flags, width, precision and conversion parsing."""

    def test_simple_directive(self) -> None:
        (ph,) = parse("%d")
        assert isinstance(ph, Placeholder)
        assert ph.position == 0
        assert ph.conversion == ConversionKind.SIGNED_INT
        assert ph.char == "d"
        assert ph.flags == Flags()
        assert ph.width is None
        assert ph.precision is None

    def test_full_grammar(self) -> None:
        ph, space, text = parse("%-6.2f %s")
        assert isinstance(ph, Placeholder)
        assert ph.flags.left_justify is True
        assert ph.width == 6
        assert ph.precision == 2
        assert ph.conversion == ConversionKind.FLOAT_FIXED
        assert space == LiteralText(text=" ")
        assert isinstance(text, Placeholder)
        assert text.conversion == ConversionKind.STRING
        assert text.position == 7

    def test_all_flags(self) -> None:
        (ph,) = parse("%0-+ 5d")
        assert ph.flags == Flags(zero_pad=True, left_justify=True, force_sign=True, space_sign=True)
        assert ph.width == 5

    def test_dynamic_width_and_precision(self) -> None:
        (ph,) = parse("%*.*f")
        assert ph.width == DYNAMIC
        assert ph.precision == DYNAMIC
        assert ph.dynamic_width
        assert ph.dynamic_precision

    def test_zero_precision(self) -> None:
        (ph,) = parse("%.0f")
        assert ph.precision == 0

    @pytest.mark.parametrize("char", list("bscdiuxXoeEfFgGMOAat"))
    def test_every_conversion_letter_parses(self, char: str) -> None:
        (ph,) = parse(f"%{char}")
        assert ph.char == char

    def test_uppercase_letters_select_uppercase_output(self) -> None:
        upper, lower = placeholders(parse("%X%x"))
        assert upper.uppercase
        assert not lower.uppercase

    def test_custom_context_directives(self) -> None:
        a, t = placeholders(parse("%a%t"))
        assert a.conversion == ConversionKind.CUSTOM_CONTEXT_FN
        assert t.conversion == ConversionKind.CUSTOM_CONTEXT_ACTION

    def test_positions_index_the_percent_sign(self) -> None:
        positions = [ph.position for ph in placeholders(parse("x%dy%s"))]
        assert positions == [1, 4]

    def test_source_reconstructs_directive(self) -> None:
        (ph,) = parse("%-+6.2f")
        assert ph.source() == "%-+6.2f"


class TestRejection:
    """Malformed sequences and the unsupported '#' flag."""

    def test_hash_flag_rejected(self) -> None:
        with pytest.raises(UnsupportedFlagError) as exc_info:
            parse("%#d")
        assert exc_info.value.flag == "#"
        assert exc_info.value.position == 1

    def test_hash_after_width_rejected(self) -> None:
        with pytest.raises(UnsupportedFlagError) as exc_info:
            parse("abc %5#x")
        assert exc_info.value.position == 6

    def test_hash_anywhere_in_string_rejected(self) -> None:
        with pytest.raises(UnsupportedFlagError):
            parse("ok %d then %#d")

    def test_unsupported_flag_is_a_format_error(self) -> None:
        with pytest.raises(FormatError):
            parse("%#x")

    def test_unknown_conversion(self) -> None:
        with pytest.raises(InvalidDirectiveError) as exc_info:
            parse("ab%q")
        assert exc_info.value.position == 2

    def test_dangling_percent(self) -> None:
        with pytest.raises(InvalidDirectiveError) as exc_info:
            parse("abc%")
        assert exc_info.value.position == 3

    def test_dangling_after_flags(self) -> None:
        with pytest.raises(InvalidDirectiveError):
            parse("%-5")

    def test_percent_with_width_is_not_an_escape(self) -> None:
        with pytest.raises(InvalidDirectiveError) as exc_info:
            parse("%5%")
        assert exc_info.value.position == 0

    def test_dot_without_precision(self) -> None:
        with pytest.raises(InvalidDirectiveError):
            parse("%.f")

    def test_message_names_position(self) -> None:
        with pytest.raises(InvalidDirectiveError, match="position 0"):
            parse("%z")


class TestDeterminism:
    """Parsing is pure and cached."""

    def test_same_string_same_directives(self) -> None:
        assert parse("%-6.2f %s") == parse("%-6.2f %s")

    def test_cached_result_is_shared(self) -> None:
        assert parse("%d items") is parse("%d items")

    def test_directives_are_immutable(self) -> None:
        (ph,) = parse("%d")
        with pytest.raises(ValidationError):
            ph.width = 3  # type: ignore[misc]
