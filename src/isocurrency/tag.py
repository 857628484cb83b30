"""Language tag to currency resolution with a confidence level.

Language does not determine currency, so every answer carries a Confidence.
Precedence is strict:

1. An explicit currency extension ('en-u-cu-eur') that names a known code
   wins at EXACT, whatever the region.
2. An explicit region decides at EXACT. If the region has no valid
   currency the answer is (XXX, NO); the language is not consulted.
3. Without a region the language decides at LOW: the language table for
   plain tags, CLDR likely subtags for tags with a script (and for
   languages the table lacks).
4. The undetermined language (plain 'und') resolves to the configured default
   currency at LOW.
5. Anything else is (XXX, NO).

Thread-safe.

Python 3.13+.
"""

from __future__ import annotations

import logging
from bisect import bisect_left
from datetime import date

from isocurrency.code import XXX, CurrencyCode, must_parse_iso, parse_iso
from isocurrency.config import get_default_currency
from isocurrency.data import LANGUAGE_CURRENCIES
from isocurrency.enums import Confidence
from isocurrency.language.tag import LanguageTag, must_parse_tag
from isocurrency.region import from_region

__all__ = ["from_tag"]

logger = logging.getLogger(__name__)

_LANGUAGE_KEYS: tuple[str, ...] = tuple(row.language for row in LANGUAGE_CURRENCIES)


def _from_language_table(language: str) -> CurrencyCode | None:
    i = bisect_left(_LANGUAGE_KEYS, language)
    if i < len(_LANGUAGE_KEYS) and _LANGUAGE_KEYS[i] == language:
        return must_parse_iso(LANGUAGE_CURRENCIES[i].currency)
    return None


def _from_likely_region(tag: LanguageTag, at: date | None) -> CurrencyCode | None:
    region = tag.likely_region()
    if region is None:
        return None
    currency, ok = from_region(region, at=at)
    return currency if ok else None


def _from_language(tag: LanguageTag, at: date | None) -> CurrencyCode | None:
    """Infer a currency from language and script alone."""
    # A script can move the likely region away from the language's default
    # (zh-Hant is TW, not CN), so likely subtags take precedence for it.
    if tag.script is None:
        return _from_language_table(tag.language) or _from_likely_region(tag, at)
    return _from_likely_region(tag, at) or _from_language_table(tag.language)


def from_tag(
    tag: LanguageTag | str,
    *,
    default: CurrencyCode | None = None,
    at: date | None = None,
) -> tuple[CurrencyCode, Confidence]:
    """Return the likely currency for a language tag.

    Args:
        tag: LanguageTag or tag text (text must be well-formed)
        default: Currency for the undetermined language (default: the
            configured deployment default, see get_default_currency())
        at: Evaluation date for region validity (default: today)

    Returns:
        (currency, confidence); (XXX, Confidence.NO) when nothing applies.

    Raises:
        IdentifierParseError: If tag is malformed text.

    Examples:
        >>> currency, conf = from_tag("nl-BE")
        >>> str(currency), conf.name
        ('EUR', 'EXACT')
        >>> currency, conf = from_tag("nl")
        >>> str(currency), conf.name
        ('EUR', 'LOW')
    """
    if not isinstance(tag, LanguageTag):
        tag = must_parse_tag(tag)

    extension = tag.currency_extension
    if extension is not None:
        currency, errors = parse_iso(extension)
        if not errors:
            return (currency, Confidence.EXACT)
        logger.debug("Ignoring currency extension %r of %s: not a known code", extension, tag)

    if tag.region is not None:
        currency, ok = from_region(tag.region, at=at)
        if ok:
            return (currency, Confidence.EXACT)
        logger.debug("Region %s of %s has no valid currency", tag.region, tag)
        return (XXX, Confidence.NO)

    inferred = _from_language(tag, at)
    if inferred is not None:
        return (inferred, Confidence.LOW)

    if tag.is_undetermined and tag.script is None:
        return (default if default is not None else get_default_currency(), Confidence.LOW)

    logger.debug("No currency inferable for %s", tag)
    return (XXX, Confidence.NO)
