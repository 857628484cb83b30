"""Deployment configuration.

The only setting is the default currency returned for the undetermined
language tag ('und'). It comes from the ISOCURRENCY_DEFAULT_CURRENCY
environment variable when set, otherwise DEFAULT_CURRENCY_CODE.

Python 3.13+.
"""

from __future__ import annotations

import logging
import os

from isocurrency.code import CurrencyCode, must_parse_iso, parse_iso
from isocurrency.constants import DEFAULT_CURRENCY_CODE, DEFAULT_CURRENCY_ENV_VAR
from isocurrency.diagnostics import ErrorTemplate

__all__ = ["get_default_currency"]

logger = logging.getLogger(__name__)


def get_default_currency() -> CurrencyCode:
    """Return the configured deployment default currency.

    The environment is read on every call so that tests and long-running
    processes observe changes. An unknown or malformed value is logged as a
    warning and DEFAULT_CURRENCY_CODE is used instead.

    Example:
        >>> import os
        >>> os.environ["ISOCURRENCY_DEFAULT_CURRENCY"] = "eur"
        >>> str(get_default_currency())
        'EUR'
    """
    configured = os.environ.get(DEFAULT_CURRENCY_ENV_VAR, "").strip()
    if not configured:
        return must_parse_iso(DEFAULT_CURRENCY_CODE)

    currency, errors = parse_iso(configured)
    if errors:
        diagnostic = ErrorTemplate.default_currency_invalid(
            configured, DEFAULT_CURRENCY_ENV_VAR, DEFAULT_CURRENCY_CODE
        )
        logger.warning(diagnostic.format_error())
        return must_parse_iso(DEFAULT_CURRENCY_CODE)
    return currency
