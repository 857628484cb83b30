"""isocurrency - ISO 4217 currency identity, rounding and locale inference.

Parses and validates currency codes against a static ISO 4217 table,
resolves the currency a region or language tag most likely uses, and
supplies monetary rounding rules that distinguish cash from accounting.

Public API:
    CurrencyCode - Table-backed ISO 4217 code
    parse_iso - Parse a code (never raises; returns (code, errors))
    must_parse_iso - Parse a trusted literal (raises)
    Kind - Transaction kind with Kind.rounding(currency)
    from_region - Currency a region uses
    from_tag - Likely currency for a language tag, with a Confidence
    query - Region/currency associations, current or historical

Exceptions:
    CurrencyError - Base exception class
    IdentifierParseError - Malformed currency, region or language tag

Submodules:
    isocurrency.language - Region and LanguageTag identifiers
    isocurrency.diagnostics - Diagnostic codes, messages and errors
    isocurrency.data - Prebuilt reference tables
"""

from .code import (
    AUD,
    BRL,
    CAD,
    CHF,
    CNY,
    CZK,
    EUR,
    GBP,
    INR,
    JPY,
    RUB,
    TWD,
    USD,
    XTS,
    XXX,
    CurrencyCode,
    CurrencyCodeStr,
    currency_by_index,
    is_valid_currency_code,
    list_currencies,
    must_parse_iso,
    parse_iso,
)
from .config import get_default_currency
from .diagnostics import CurrencyError, IdentifierParseError
from .enums import Confidence, RegionCoverage
from .language import (
    UNDETERMINED,
    LanguageTag,
    Region,
    must_parse_region,
    must_parse_tag,
    parse_region,
    parse_tag,
)
from .region import CurrencyValidity, from_region, query, region_coverage
from .rounding import Kind
from .tag import from_tag

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("isocurrency")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

# ISO 4217 edition the code table follows
__iso4217_edition__ = "ISO 4217:2015"

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Currency codes
    "CurrencyCode",
    "CurrencyCodeStr",
    "parse_iso",
    "must_parse_iso",
    "list_currencies",
    "is_valid_currency_code",
    "currency_by_index",
    # Rounding
    "Kind",
    # Resolution
    "Confidence",
    "RegionCoverage",
    "CurrencyValidity",
    "from_region",
    "region_coverage",
    "query",
    "from_tag",
    "get_default_currency",
    # Identifiers
    "Region",
    "parse_region",
    "must_parse_region",
    "LanguageTag",
    "parse_tag",
    "must_parse_tag",
    "UNDETERMINED",
    # Errors
    "CurrencyError",
    "IdentifierParseError",
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
    # Metadata
    "__iso4217_edition__",
    "__version__",
]
