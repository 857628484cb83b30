"""Prebuilt, immutable reference tables.

Tables:
    CURRENCIES - ISO 4217 code table, 1-indexed, strictly ascending
    ROUNDING_EXCEPTIONS - per-kind rounding overrides referenced by index
    REGION_CURRENCIES - region to currency associations with validity windows
    LANGUAGE_CURRENCIES - language-only fallback associations

Python 3.13+. Zero external dependencies.
"""

from .currencies import CURRENCIES, NUM_CURRENCIES, ROUNDING_EXCEPTIONS
from .languages import LANGUAGE_CURRENCIES
from .records import (
    CurrencyEntry,
    LanguageCurrency,
    RegionCurrency,
    RoundingException,
    RoundingRule,
)
from .regions import REGION_CURRENCIES

__all__ = [
    "CURRENCIES",
    "LANGUAGE_CURRENCIES",
    "NUM_CURRENCIES",
    "REGION_CURRENCIES",
    "ROUNDING_EXCEPTIONS",
    "CurrencyEntry",
    "LanguageCurrency",
    "RegionCurrency",
    "RoundingException",
    "RoundingRule",
]
