"""Monetary rounding rules per currency and transaction kind.

The default rule is two decimals with a one-unit increment. A currency's
table entry may reference a rounding exception that overrides the standard
and the cash rule independently: CHF keeps two decimals for accounting but
rounds cash to 0.05, TWD accounts in cents but pays cash in whole dollars.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from enum import StrEnum
from typing import TYPE_CHECKING

from isocurrency.data import ROUNDING_EXCEPTIONS

if TYPE_CHECKING:
    from isocurrency.code import CurrencyCode
    from isocurrency.data import RoundingRule

__all__ = ["Kind"]


class Kind(StrEnum):
    """Transaction kind selecting which rounding rule applies.

    StrEnum provides automatic string conversion: str(Kind.CASH) == "cash"
    """

    STANDARD = "standard"
    """Regular accounting and electronic payments."""

    CASH = "cash"
    """Physical cash, where the smallest coin may exceed the minor unit."""

    ACCOUNTING = "accounting"
    """Accounting presentation. Rounds like STANDARD."""

    def rounding(self, currency: CurrencyCode) -> tuple[int, int]:
        """Return (scale, increment) for currency under this kind.

        The increment is expressed in units of the last decimal: (2, 5)
        means amounts are multiples of 0.05. Never fails; a currency with no
        exception (XXX included) gets (2, 1).

        Example:
            >>> Kind.CASH.rounding(CHF)
            (2, 5)
        """
        rule = self._rule(currency)
        return (rule.scale, rule.increment)

    def _rule(self, currency: CurrencyCode) -> RoundingRule:
        exception = ROUNDING_EXCEPTIONS[currency.rounding_exception]
        if self is Kind.CASH:
            return exception.cash
        return exception.standard
