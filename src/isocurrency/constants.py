"""Shared constants for isocurrency.

Centralizes configuration constants used across the code table, the resolvers
and the language collaborators. Placing constants here avoids circular imports
and provides a single source of truth.

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Identifier shapes
    "ISO_CURRENCY_CODE_LENGTH",
    "ISO_REGION_ALPHA_LENGTH",
    "M49_REGION_LENGTH",
    "UNDETERMINED_LANGUAGE",
    "CURRENCY_EXTENSION_KEY",
    # Configuration
    "DEFAULT_CURRENCY_CODE",
    "DEFAULT_CURRENCY_ENV_VAR",
    # Cache limits
    "MAX_LIKELY_SUBTAG_CACHE_SIZE",
]

# ============================================================================
# IDENTIFIER SHAPES
# ============================================================================

# ISO 4217 alphabetic codes are exactly 3 ASCII letters.
ISO_CURRENCY_CODE_LENGTH: int = 3

# ISO 3166-1 alpha-2 region codes.
ISO_REGION_ALPHA_LENGTH: int = 2

# UN M49 numeric area codes (e.g. "150" Europe, "419" Latin America).
M49_REGION_LENGTH: int = 3

# BCP 47 "undetermined" primary language subtag.
UNDETERMINED_LANGUAGE: str = "und"

# Unicode locale extension key carrying an explicit currency (en-u-cu-eur).
CURRENCY_EXTENSION_KEY: str = "cu"

# ============================================================================
# CONFIGURATION
# ============================================================================

# Deployment default returned for the undetermined language tag.
DEFAULT_CURRENCY_CODE: str = "USD"

# Environment variable overriding DEFAULT_CURRENCY_CODE.
DEFAULT_CURRENCY_ENV_VAR: str = "ISOCURRENCY_DEFAULT_CURRENCY"

# ============================================================================
# CACHE LIMITS
# ============================================================================

# Likely-subtag lookups keyed by (language, script). Covers every CLDR
# language/script pair with room to spare.
MAX_LIKELY_SUBTAG_CACHE_SIZE: int = 1024
