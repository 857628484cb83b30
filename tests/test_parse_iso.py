"""Tests for parse_iso(), must_parse_iso() and is_valid_currency_code().

parse_iso() returns tuple[CurrencyCode, tuple[IdentifierParseError, ...]]
and never raises; failures yield the XXX sentinel plus one error.
"""

from __future__ import annotations

import pytest

from isocurrency import (
    EUR,
    USD,
    XXX,
    CurrencyCodeStr,
    IdentifierParseError,
    is_valid_currency_code,
    must_parse_iso,
    parse_iso,
)
from isocurrency.diagnostics import CurrencyError, DiagnosticCode


class TestParseIsoSuccess:
    """Test successful parsing."""

    def test_uppercase(self) -> None:
        """Canonical uppercase code parses."""
        code, errors = parse_iso("USD")
        assert errors == ()
        assert code is USD

    def test_lowercase_and_mixed_case(self) -> None:
        """Case is not significant."""
        for text in ("usd", "Usd", "uSd", "usD"):
            code, errors = parse_iso(text)
            assert not errors
            assert code is USD

    def test_sentinel_codes_parse(self) -> None:
        """XXX itself is a valid code, distinguishable by empty errors."""
        code, errors = parse_iso("xxx")
        assert not errors
        assert code is XXX

        code, errors = parse_iso("XTS")
        assert not errors
        assert str(code) == "XTS"

    def test_withdrawn_codes_parse(self) -> None:
        """Historical codes stay in the table."""
        for text in ("DEM", "NLG", "ADP", "ZWR"):
            code, errors = parse_iso(text)
            assert not errors
            assert str(code) == text


class TestParseIsoFailure:
    """Test rejection paths and their diagnostics."""

    @pytest.mark.parametrize("text", ["", "U", "US", "USDD", "EURO", "  USD"])
    def test_wrong_length(self, text: str) -> None:
        """Length other than three is rejected."""
        code, errors = parse_iso(text)
        assert code is XXX
        assert len(errors) == 1
        assert errors[0].diagnostic is not None
        assert errors[0].diagnostic.code == DiagnosticCode.CURRENCY_LENGTH_INVALID

    @pytest.mark.parametrize("text", ["US1", "U D", "12A", "US-", "ÿÿÿ", "ÉUR", "€UR"])
    def test_non_ascii_letter(self, text: str) -> None:
        """Digits, punctuation and non-ASCII letters are rejected."""
        code, errors = parse_iso(text)
        assert code is XXX
        assert len(errors) == 1
        assert errors[0].diagnostic is not None
        assert errors[0].diagnostic.code == DiagnosticCode.CURRENCY_CHARACTER_INVALID

    @pytest.mark.parametrize("text", ["UUU", "abc", "QQQ", "EUX"])
    def test_unknown_code(self, text: str) -> None:
        """Well-formed codes absent from the table are rejected."""
        code, errors = parse_iso(text)
        assert code is XXX
        assert len(errors) == 1
        assert errors[0].diagnostic is not None
        assert errors[0].diagnostic.code == DiagnosticCode.CURRENCY_UNKNOWN
        assert text.upper() in str(errors[0])

    def test_error_carries_input(self) -> None:
        """Errors record the input text and identifier kind."""
        _, errors = parse_iso("us1")
        error = errors[0]
        assert isinstance(error, IdentifierParseError)
        assert isinstance(error, ValueError)
        assert isinstance(error, CurrencyError)
        assert error.input_value == "us1"
        assert error.parse_type == "currency"

    def test_never_raises_on_odd_input(self) -> None:
        """Control characters and whitespace are plain failures."""
        for text in ("\x00\x00\x00", "\n\n\n", "   ", "\t"):
            code, errors = parse_iso(text)
            assert code is XXX
            assert errors


class TestMustParseIso:
    """Test the raising variant."""

    def test_returns_code(self) -> None:
        """Valid literals return the shared instance."""
        assert must_parse_iso("eur") is EUR

    def test_raises_on_invalid(self) -> None:
        """Invalid literals raise IdentifierParseError."""
        with pytest.raises(IdentifierParseError, match="CURRENCY_UNKNOWN"):
            must_parse_iso("UUU")

    def test_raises_value_error_subclass(self) -> None:
        """Callers catching ValueError also catch parse failures."""
        with pytest.raises(ValueError):  # noqa: PT011 - hierarchy check
            must_parse_iso("12")


class TestIsValidCurrencyCode:
    """Test the TypeIs type guard."""

    def test_valid_strings(self) -> None:
        """Known codes in any case are accepted."""
        assert is_valid_currency_code("USD")
        assert is_valid_currency_code("eur")

    def test_invalid_strings(self) -> None:
        """Unknown and malformed codes are rejected."""
        assert not is_valid_currency_code("UUU")
        assert not is_valid_currency_code("US")
        assert not is_valid_currency_code("")

    @pytest.mark.parametrize("value", [None, 840, b"USD", ["USD"], USD])
    def test_non_strings(self, value: object) -> None:
        """Non-string values are never valid codes."""
        assert not is_valid_currency_code(value)

    def test_rejected_string_stays_usable(self) -> None:
        """Both branches of the guard keep working with the string."""
        for text in ("eur", "UUU"):
            if is_valid_currency_code(text):
                narrowed: CurrencyCodeStr = text
                assert narrowed.upper() == "EUR"
            else:
                assert text.upper() == "UUU"

    def test_narrowed_type_is_str_at_runtime(self) -> None:
        """CurrencyCodeStr wraps nothing at runtime."""
        assert CurrencyCodeStr("USD") == "USD"
        assert type(CurrencyCodeStr("USD")) is str
