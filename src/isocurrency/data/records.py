"""Record types for the static reference tables.

All records are immutable, hashable and slotted. Tables built from them are
module-level tuples created once at import and never mutated.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

__all__ = [
    "CurrencyEntry",
    "LanguageCurrency",
    "RegionCurrency",
    "RoundingException",
    "RoundingRule",
]


@dataclass(frozen=True, slots=True)
class RoundingRule:
    """Decimal scale and minimal increment in units of the last decimal.

    RoundingRule(2, 5) rounds to 0.05; RoundingRule(0, 1) to whole units.
    """

    scale: int
    increment: int


@dataclass(frozen=True, slots=True)
class RoundingException:
    """Per-kind rounding override referenced by a code table entry."""

    standard: RoundingRule
    cash: RoundingRule


@dataclass(frozen=True, slots=True)
class CurrencyEntry:
    """One code table row.

    Attributes:
        code: ISO 4217 alphabetic code, uppercase.
        rounding: Index into ROUNDING_EXCEPTIONS (0 means no exception).
    """

    code: str
    rounding: int = 0


@dataclass(frozen=True, slots=True)
class RegionCurrency:
    """Association of a currency with a region over a validity window.

    Attributes:
        region: ISO 3166-1 alpha-2 or M49 code.
        currency: ISO 4217 code.
        valid_from: First day of validity, None if unbounded.
        valid_to: Last day of validity (inclusive), None if still valid.
        tender: False marks a non-tender unit or an explicit "no currency".
    """

    region: str
    currency: str
    valid_from: date | None = None
    valid_to: date | None = None
    tender: bool = True

    def is_valid_at(self, day: date) -> bool:
        """Return True if the window contains day."""
        if self.valid_from is not None and day < self.valid_from:
            return False
        return self.valid_to is None or day <= self.valid_to


@dataclass(frozen=True, slots=True)
class LanguageCurrency:
    """Language-only fallback association."""

    language: str
    currency: str
