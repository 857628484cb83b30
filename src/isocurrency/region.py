"""Region to currency resolution.

from_region() answers "what currency does this region use today?". Absence
is a normal outcome, reported as (XXX, False) rather than an exception.

Internally a region is in one of three states at a given date
(RegionCoverage): a tender currency is valid, the region is explicitly
listed as having no currency, or the table does not cover it (no rows, or
every row expired). The public boolean collapses the last two.

When several tender currencies are valid at once (CU: CUP and CUC), the
first row in table order wins. Table order is the only priority.

Thread-safe. Region groups are located by binary search.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from dataclasses import dataclass
from datetime import date

from isocurrency.code import XXX, CurrencyCode, must_parse_iso
from isocurrency.data import REGION_CURRENCIES, RegionCurrency
from isocurrency.enums import RegionCoverage
from isocurrency.language.region import Region, must_parse_region

__all__ = [
    "CurrencyValidity",
    "from_region",
    "query",
    "region_coverage",
]

_REGION_KEYS: tuple[str, ...] = tuple(row.region for row in REGION_CURRENCIES)


@dataclass(frozen=True, slots=True)
class CurrencyValidity:
    """A currency's use in a region over a period.

    Attributes:
        currency: The currency.
        region: Region using it.
        valid_from: First day of use, None if unknown.
        valid_to: Last day of use, None if still in use.
        tender: False for non-tender units and explicit "no currency" rows.
    """

    currency: CurrencyCode
    region: Region
    valid_from: date | None
    valid_to: date | None
    tender: bool


def _as_region(region: Region | str) -> Region:
    if isinstance(region, Region):
        return region
    return must_parse_region(region)


def _rows_for(code: str) -> tuple[RegionCurrency, ...]:
    lo = bisect_left(_REGION_KEYS, code)
    hi = bisect_right(_REGION_KEYS, code, lo)
    return REGION_CURRENCIES[lo:hi]


def region_coverage(
    region: Region | str,
    *,
    at: date | None = None,
) -> tuple[RegionCoverage, CurrencyCode]:
    """Classify how the table covers region at a date.

    Args:
        region: Region or region text (text must be well-formed)
        at: Evaluation date (default: today)

    Returns:
        (RegionCoverage.CURRENT, currency) for a valid tender currency,
        otherwise (NO_CURRENCY or NOT_COVERED, XXX).

    Raises:
        IdentifierParseError: If region is malformed text.
    """
    day = at if at is not None else date.today()
    current = [row for row in _rows_for(_as_region(region).code) if row.is_valid_at(day)]
    if not current:
        return (RegionCoverage.NOT_COVERED, XXX)
    for row in current:
        if row.tender:
            return (RegionCoverage.CURRENT, must_parse_iso(row.currency))
    return (RegionCoverage.NO_CURRENCY, XXX)


def from_region(region: Region | str, *, at: date | None = None) -> tuple[CurrencyCode, bool]:
    """Return the currency a region uses.

    Args:
        region: Region or region text (text must be well-formed)
        at: Evaluation date (default: today)

    Returns:
        (currency, True) when a tender currency is valid, else (XXX, False).

    Raises:
        IdentifierParseError: If region is malformed text.

    Example:
        >>> currency, ok = from_region("NL")
        >>> str(currency), ok
        ('EUR', True)
    """
    coverage, currency = region_coverage(region, at=at)
    return (currency, coverage is RegionCoverage.CURRENT)


def query(
    *,
    region: Region | str | None = None,
    historical: bool = False,
    non_tender: bool = False,
    at: date | None = None,
) -> tuple[CurrencyValidity, ...]:
    """List region/currency associations.

    By default returns only tender currencies valid at the evaluation date,
    grouped by region in table order.

    Args:
        region: Restrict to one region (default: all regions)
        historical: Also include rows not valid at the evaluation date
        non_tender: Also include non-tender rows
        at: Evaluation date (default: today)

    Raises:
        IdentifierParseError: If region is malformed text.
    """
    day = at if at is not None else date.today()
    rows = REGION_CURRENCIES if region is None else _rows_for(_as_region(region).code)
    return tuple(
        CurrencyValidity(
            currency=must_parse_iso(row.currency),
            region=Region(row.region),
            valid_from=row.valid_from,
            valid_to=row.valid_to,
            tender=row.tender,
        )
        for row in rows
        if (non_tender or row.tender) and (historical or row.is_valid_at(day))
    )
