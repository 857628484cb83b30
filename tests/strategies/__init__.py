"""Hypothesis strategies for isocurrency property-based testing.

Usage:
    from tests.strategies import currency_codes, region_with_currency
    from tests.strategies.iso import malformed_tags
"""

from .iso import (
    TABLE_CODES,
    all_alpha2_codes,
    all_alpha3_codes,
    cash_zero_currencies,
    currency_by_decimals,
    currency_codes,
    four_decimal_currencies,
    language_with_currency,
    m49_codes,
    malformed_currency_text,
    malformed_regions,
    malformed_tags,
    mixed_case_alpha3,
    region_by_group,
    region_with_currency,
    separators,
    three_decimal_currencies,
    two_decimal_currencies,
    zero_decimal_currencies,
)

__all__ = [
    "TABLE_CODES",
    "all_alpha2_codes",
    "all_alpha3_codes",
    "cash_zero_currencies",
    "currency_by_decimals",
    "currency_codes",
    "four_decimal_currencies",
    "language_with_currency",
    "m49_codes",
    "malformed_currency_text",
    "malformed_regions",
    "malformed_tags",
    "mixed_case_alpha3",
    "region_by_group",
    "region_with_currency",
    "separators",
    "three_decimal_currencies",
    "two_decimal_currencies",
    "zero_decimal_currencies",
]
