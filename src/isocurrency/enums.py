"""Enumerations for isocurrency type-safe constants.

Confidence is an IntEnum because callers compare levels (NO < LOW < EXACT).
RegionCoverage uses StrEnum for automatic string conversion.

Python 3.13+.
"""

from enum import IntEnum, StrEnum


class Confidence(IntEnum):
    """Certainty of a locale-to-currency inference.

    Ordered low to high, so ``conf >= Confidence.LOW`` reads naturally.
    """

    NO = 0
    """Nothing determined the currency; the result is the XXX sentinel."""

    LOW = 1
    """Inferred from the language alone, which may span currency zones."""

    EXACT = 2
    """Determined by an explicit currency extension or an explicit region."""


class RegionCoverage(StrEnum):
    """How the region table covers a region at a given date.

    StrEnum provides automatic string conversion: str(RegionCoverage.CURRENT) == "current"
    """

    CURRENT = "current"
    """A tender currency is valid for the region."""

    NO_CURRENCY = "no_currency"
    """The region is listed as deliberately having no official currency."""

    NOT_COVERED = "not_covered"
    """No entries for the region, or every entry has expired."""


__all__ = [
    "Confidence",
    "RegionCoverage",
]
