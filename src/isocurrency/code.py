"""ISO 4217 currency codes backed by the static code table.

API: parse_iso() returns tuple[CurrencyCode, tuple[IdentifierParseError, ...]].
The function NEVER raises - errors are returned in the tuple alongside the
XXX sentinel. must_parse_iso() raises and is reserved for literals known to be
valid (module constants, fixtures); never call it with user input.

Every table row has exactly one CurrencyCode instance, created at import.
Parsing returns that shared instance, so identity and equality agree.

Thread-safe. Lookups are binary searches over an immutable tuple.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from bisect import bisect_left
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, NewType

from isocurrency.constants import ISO_CURRENCY_CODE_LENGTH
from isocurrency.data import CURRENCIES, NUM_CURRENCIES
from isocurrency.diagnostics import Diagnostic, ErrorTemplate, IdentifierParseError

if TYPE_CHECKING:
    from typing import TypeIs

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Value type
    "CurrencyCode",
    # Parsing
    "parse_iso",
    "must_parse_iso",
    # Table access
    "currency_by_index",
    "list_currencies",
    "is_valid_currency_code",
    "CurrencyCodeStr",
    # Well-known codes
    "XXX",
    "XTS",
    "USD",
    "EUR",
    "GBP",
    "JPY",
    "CHF",
    "CAD",
    "AUD",
    "CNY",
    "INR",
    "BRL",
    "RUB",
    "TWD",
    "CZK",
]


# Text known to name a table code, in any letter case.
CurrencyCodeStr = NewType("CurrencyCodeStr", str)


@dataclass(frozen=True, slots=True, order=True)
class CurrencyCode:
    """ISO 4217 alphabetic currency code.

    Immutable, thread-safe, hashable. Ordering follows the code table, which
    is alphabetical. Obtain instances from parse_iso() or the module
    constants rather than constructing them directly.

    Attributes:
        index: 1-based position in the code table.
        code: Uppercase three-letter code (e.g. 'USD').
    """

    index: int
    code: str = field(compare=False)

    def __str__(self) -> str:
        """Return the canonical three-letter form."""
        return self.code

    @property
    def rounding_exception(self) -> int:
        """Index of this code's rounding exception (0 for none).

        Codes that do not match their table row (hand-built instances with an
        out-of-range index or a different code) have no exception.
        """
        if not 1 <= self.index <= NUM_CURRENCIES:
            return 0
        entry = CURRENCIES[self.index]
        if entry.code != self.code:
            return 0
        return entry.rounding


# Position 0 of the table is reserved; keep it so indexes line up.
_CODES: tuple[str, ...] = tuple(entry.code for entry in CURRENCIES)

_CANONICAL: tuple[CurrencyCode, ...] = tuple(
    CurrencyCode(index=i, code=code) for i, code in enumerate(_CODES)
)


def _find(code_upper: str) -> int:
    """Return the table index of code_upper, or 0 if absent."""
    i = bisect_left(_CODES, code_upper, 1)
    if i <= NUM_CURRENCIES and _CODES[i] == code_upper:
        return i
    return 0


XXX: CurrencyCode = _CANONICAL[_find("XXX")]
"""ISO 4217 "no currency". Returned on every failure path."""


def _failure(
    diagnostic: Diagnostic, text: str
) -> tuple[CurrencyCode, tuple[IdentifierParseError, ...]]:
    error = IdentifierParseError(diagnostic, input_value=text, parse_type="currency")
    return (XXX, (error,))


def parse_iso(text: str) -> tuple[CurrencyCode, tuple[IdentifierParseError, ...]]:
    """Parse an ISO 4217 alphabetic code.

    Case-insensitive. The text must be exactly three ASCII letters naming a
    code present in the table.

    Args:
        text: Candidate code (e.g. 'usd', 'EUR')

    Returns:
        Tuple of (code, errors):
        - code: The canonical CurrencyCode, or XXX on failure
        - errors: Tuple of IdentifierParseError (empty tuple on success)

    Examples:
        >>> code, errors = parse_iso("usd")
        >>> str(code), errors
        ('USD', ())
        >>> code, errors = parse_iso("UUU")
        >>> str(code), len(errors)
        ('XXX', 1)
    """
    if len(text) != ISO_CURRENCY_CODE_LENGTH:
        return _failure(
            ErrorTemplate.currency_length_invalid(text, ISO_CURRENCY_CODE_LENGTH), text
        )
    # isalpha() alone accepts non-ASCII letters such as 'ÿ'.
    if not (text.isascii() and text.isalpha()):
        return _failure(ErrorTemplate.currency_character_invalid(text), text)

    code_upper = text.upper()
    index = _find(code_upper)
    if index == 0:
        return _failure(ErrorTemplate.currency_unknown(code_upper), text)
    return (_CANONICAL[index], ())


def must_parse_iso(text: str) -> CurrencyCode:
    """Parse an ISO 4217 code that is known to be valid.

    Intended for literals fixed at import time. A failure is a programming
    error and is not meant to be handled.

    Args:
        text: Currency code literal

    Returns:
        The canonical CurrencyCode

    Raises:
        IdentifierParseError: If text is not a known ISO 4217 code.
    """
    code, errors = parse_iso(text)
    if errors:
        raise errors[0]
    return code


def currency_by_index(index: int) -> CurrencyCode:
    """Return the code stored at a 1-based table index.

    Raises:
        IndexError: If index is outside 1..NUM_CURRENCIES.
    """
    if not 1 <= index <= NUM_CURRENCIES:
        msg = f"Currency index {index} outside 1..{NUM_CURRENCIES}"
        raise IndexError(msg)
    return _CANONICAL[index]


def list_currencies() -> tuple[CurrencyCode, ...]:
    """Return every code in table order (reserved slot excluded)."""
    return _CANONICAL[1:]


def is_valid_currency_code(value: object) -> TypeIs[CurrencyCodeStr]:
    """Check if value is a string that parse_iso() accepts.

    Args:
        value: Object to check.

    Returns:
        True if value is a known ISO 4217 code (any letter case).
    """
    if not isinstance(value, str):
        return False
    _, errors = parse_iso(value)
    return not errors


# ============================================================================
# WELL-KNOWN CODES
# ============================================================================

XTS = must_parse_iso("XTS")  # reserved for testing
USD = must_parse_iso("USD")
EUR = must_parse_iso("EUR")
GBP = must_parse_iso("GBP")
JPY = must_parse_iso("JPY")
CHF = must_parse_iso("CHF")
CAD = must_parse_iso("CAD")
AUD = must_parse_iso("AUD")
CNY = must_parse_iso("CNY")
INR = must_parse_iso("INR")
BRL = must_parse_iso("BRL")
RUB = must_parse_iso("RUB")
TWD = must_parse_iso("TWD")
CZK = must_parse_iso("CZK")
