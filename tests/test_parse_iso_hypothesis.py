"""Hypothesis property-based tests for ISO 4217 code parsing.

Properties:
- parse_iso(S) succeeds iff upper(S) is in the table, for every 3-letter ASCII S
- a successful parse renders as upper(S) and returns the shared instance
- malformed text always yields XXX with exactly one error
"""

from __future__ import annotations

import itertools
import string

import pytest
from hypothesis import event, given

from isocurrency import XXX, is_valid_currency_code, list_currencies, parse_iso
from tests.strategies.iso import (
    TABLE_CODES,
    all_alpha3_codes,
    currency_codes,
    malformed_currency_text,
    mixed_case_alpha3,
)

_TABLE = frozenset(TABLE_CODES)


class TestParseIsoProperties:
    """Property-based tests for parse_iso()."""

    @given(text=mixed_case_alpha3)
    def test_accepts_iff_in_table(self, text: str) -> None:
        """Membership of the uppercased text decides success."""
        code, errors = parse_iso(text)
        known = text.upper() in _TABLE
        event(f"known={known}")
        if known:
            assert errors == ()
            assert str(code) == text.upper()
        else:
            assert code is XXX
            assert len(errors) == 1

    @given(text=currency_codes)
    def test_idempotent(self, text: str) -> None:
        """Parsing the rendered form returns the same object."""
        code, _ = parse_iso(text)
        again, errors = parse_iso(str(code))
        assert not errors
        assert again is code

    @given(text=currency_codes)
    def test_case_insensitive(self, text: str) -> None:
        """Upper, lower and swapped case agree."""
        upper, _ = parse_iso(text.upper())
        lower, _ = parse_iso(text.lower())
        swapped, _ = parse_iso(text.swapcase())
        assert upper is lower is swapped

    @given(text=malformed_currency_text)
    def test_malformed_rejected(self, text: str) -> None:
        """Wrong length or non-ASCII-letter text never parses."""
        code, errors = parse_iso(text)
        assert code is XXX
        assert len(errors) == 1
        assert errors[0].input_value == text

    @given(text=all_alpha3_codes)
    def test_type_guard_matches_parse(self, text: str) -> None:
        """is_valid_currency_code() agrees with parse_iso()."""
        _, errors = parse_iso(text)
        assert is_valid_currency_code(text) == (not errors)


class TestParseIsoExhaustive:
    """Sweep the complete three-letter code space."""

    @pytest.mark.fuzz
    def test_all_three_letter_codes(self) -> None:
        """Exactly the table's codes parse, out of all 17,576 candidates."""
        accepted = []
        for letters in itertools.product(string.ascii_uppercase, repeat=3):
            text = "".join(letters)
            code, errors = parse_iso(text)
            if not errors:
                accepted.append(code)
        assert tuple(accepted) == list_currencies()
