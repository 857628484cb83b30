"""BCP 47 language tags, reduced to what currency inference needs.

API: parse_tag() returns tuple[LanguageTag | None, tuple[IdentifierParseError, ...]].
Accepts '-' (BCP 47) and '_' (POSIX) separators, like the locale strings
Babel and the operating system produce. Subtags are canonicalized for case:
language lowercase, script titlecase, region uppercase.

Grammar handled:
    language ["-" extlang{0,3}] ["-" script] ["-" region] *("-" variant)
    *("-" singleton 1*("-" subtag)) ["-" "x" 1*("-" subtag)]

Region inference for tags without an explicit region uses CLDR likely
subtags from Babel (e.g. 'zh-Hant' is most likely spoken in TW).

Thread-safe. Likely-subtag lookups are cached.

Python 3.13+. Requires Babel.
"""

from __future__ import annotations

import functools
import logging
import re
from dataclasses import dataclass

from babel.core import get_global, parse_locale

from isocurrency.constants import (
    CURRENCY_EXTENSION_KEY,
    MAX_LIKELY_SUBTAG_CACHE_SIZE,
    UNDETERMINED_LANGUAGE,
)
from isocurrency.diagnostics import ErrorTemplate, IdentifierParseError

from .region import Region, parse_region

__all__ = [
    "UNDETERMINED",
    "LanguageTag",
    "must_parse_tag",
    "parse_tag",
]

logger = logging.getLogger(__name__)

_SEPARATORS = re.compile(r"[-_]")

_PRIVATE_USE = "x"
_UNICODE_EXTENSION = "u"


@dataclass(frozen=True, slots=True)
class LanguageTag:
    """Parsed language tag.

    Immutable, thread-safe, hashable.

    Attributes:
        language: Primary language subtag, lowercase ('nl', 'und', ...).
        extlangs: Extended language subtags ('yue' in 'zh-yue').
        script: ISO 15924 script, titlecase, or None.
        region: Explicit region, or None.
        variants: Variant subtags, lowercase.
        extensions: (singleton, subtags) pairs in tag order.
        private_use: Subtags following 'x'.
    """

    language: str
    extlangs: tuple[str, ...] = ()
    script: str | None = None
    region: Region | None = None
    variants: tuple[str, ...] = ()
    extensions: tuple[tuple[str, tuple[str, ...]], ...] = ()
    private_use: tuple[str, ...] = ()

    def __str__(self) -> str:
        parts = [self.language, *self.extlangs]
        if self.script:
            parts.append(self.script)
        if self.region:
            parts.append(self.region.code)
        parts.extend(self.variants)
        for singleton, subtags in self.extensions:
            parts.append(singleton)
            parts.extend(subtags)
        if self.private_use:
            parts.append(_PRIVATE_USE)
            parts.extend(self.private_use)
        return "-".join(parts)

    @property
    def is_undetermined(self) -> bool:
        """True for the 'und' primary language."""
        return self.language == UNDETERMINED_LANGUAGE

    @property
    def unicode_keywords(self) -> dict[str, str]:
        """Key/type pairs of the 'u' extension ({'cu': 'eur'} for en-u-cu-eur).

        A key without a type maps to 'true'. The first occurrence of a key wins.
        """
        keywords: dict[str, str] = {}
        for singleton, subtags in self.extensions:
            if singleton != _UNICODE_EXTENSION:
                continue
            key: str | None = None
            values: list[str] = []
            for subtag in subtags:
                if len(subtag) == 2:
                    if key is not None:
                        keywords.setdefault(key, "-".join(values) or "true")
                    key, values = subtag, []
                elif key is not None:
                    values.append(subtag)
                # Attributes precede the first key and carry no keyword.
            if key is not None:
                keywords.setdefault(key, "-".join(values) or "true")
        return keywords

    @property
    def currency_extension(self) -> str | None:
        """Raw value of the 'cu' keyword, or None."""
        return self.unicode_keywords.get(CURRENCY_EXTENSION_KEY)

    def likely_region(self) -> Region | None:
        """Infer the most likely region from language and script.

        Uses CLDR likely subtags. The explicit region, when present, is not
        consulted: callers decide how much an inferred region is worth.
        Returns None when CLDR has no data for the language.
        """
        territory = _likely_territory(self.language, self.script)
        if territory is None:
            return None
        region, _ = parse_region(territory)
        return region


UNDETERMINED: LanguageTag = LanguageTag(UNDETERMINED_LANGUAGE)


@functools.lru_cache(maxsize=MAX_LIKELY_SUBTAG_CACHE_SIZE)
def _likely_territory(language: str, script: str | None) -> str | None:
    """Look up the CLDR likely territory for language (and script).

    'und' alone is deliberately not looked up: CLDR maps it to en-Latn-US,
    while the undetermined language resolves to the configured default.
    """
    likely_subtags: dict[str, str] = get_global("likely_subtags")
    keys: list[str] = []
    if script is not None:
        keys.append(f"{language}_{script}")
    if language != UNDETERMINED_LANGUAGE:
        keys.append(language)

    for key in keys:
        value = likely_subtags.get(key)
        if not value:
            continue
        try:
            territory = parse_locale(value)[1]
        except ValueError:
            logger.debug("Unparseable likely subtag %r for %r", value, key)
            continue
        if territory:
            return territory
    return None


# ============================================================================
# PARSING
# ============================================================================


def _is_alpha(subtag: str, low: int, high: int) -> bool:
    return low <= len(subtag) <= high and subtag.isalpha()


def _is_variant(subtag: str) -> bool:
    if 5 <= len(subtag) <= 8:
        return True
    return len(subtag) == 4 and subtag[0].isdigit()


def _failure(text: str, reason: str) -> tuple[None, tuple[IdentifierParseError, ...]]:
    error = IdentifierParseError(
        ErrorTemplate.language_tag_invalid(text, reason),
        input_value=text,
        parse_type="language_tag",
    )
    return (None, (error,))


def parse_tag(  # noqa: PLR0911, PLR0912 - one branch per BCP 47 production
    text: str,
) -> tuple[LanguageTag | None, tuple[IdentifierParseError, ...]]:
    """Parse a BCP 47 language tag.

    Args:
        text: Tag such as 'nl', 'nl-BE', 'zh_Hant', 'en-u-cu-eur'

    Returns:
        Tuple of (tag, errors):
        - tag: LanguageTag on success, None on failure
        - errors: Tuple of IdentifierParseError (empty tuple on success)

    Examples:
        >>> tag, errors = parse_tag("en_us")
        >>> str(tag)
        'en-US'
        >>> tag.currency_extension is None
        True
    """
    if not text:
        return _failure(text, "empty tag")
    subtags = [s.lower() for s in _SEPARATORS.split(text)]
    for subtag in subtags:
        if not subtag:
            return _failure(text, "empty subtag")
        if len(subtag) > 8 or not (subtag.isascii() and subtag.isalnum()):
            return _failure(text, f"invalid subtag '{subtag}'")

    language = subtags[0]
    if not (_is_alpha(language, 2, 3) or _is_alpha(language, 5, 8)):
        return _failure(text, f"invalid language '{language}'")

    pos = 1
    count = len(subtags)

    extlangs: list[str] = []
    if len(language) <= 3:
        while pos < count and len(extlangs) < 3 and _is_alpha(subtags[pos], 3, 3):
            extlangs.append(subtags[pos])
            pos += 1

    script: str | None = None
    if pos < count and _is_alpha(subtags[pos], 4, 4):
        script = subtags[pos].title()
        pos += 1

    region: Region | None = None
    if pos < count and len(subtags[pos]) in (2, 3):
        region, _ = parse_region(subtags[pos])
        if region is not None:
            pos += 1

    variants: list[str] = []
    while pos < count and _is_variant(subtags[pos]):
        if subtags[pos] in variants:
            return _failure(text, f"duplicate variant '{subtags[pos]}'")
        variants.append(subtags[pos])
        pos += 1

    extensions: list[tuple[str, tuple[str, ...]]] = []
    while pos < count and len(subtags[pos]) == 1 and subtags[pos] != _PRIVATE_USE:
        singleton = subtags[pos]
        if any(singleton == seen for seen, _ in extensions):
            return _failure(text, f"duplicate extension '{singleton}'")
        pos += 1
        start = pos
        while pos < count and 2 <= len(subtags[pos]) <= 8:
            pos += 1
        if pos == start:
            return _failure(text, f"empty extension '{singleton}'")
        extensions.append((singleton, tuple(subtags[start:pos])))

    private_use: tuple[str, ...] = ()
    if pos < count and subtags[pos] == _PRIVATE_USE:
        private_use = tuple(subtags[pos + 1 :])
        if not private_use:
            return _failure(text, "empty private use section")
        pos = count

    if pos < count:
        return _failure(text, f"unexpected subtag '{subtags[pos]}'")

    tag = LanguageTag(
        language=language,
        extlangs=tuple(extlangs),
        script=script,
        region=region,
        variants=tuple(variants),
        extensions=tuple(extensions),
        private_use=private_use,
    )
    return (tag, ())


def must_parse_tag(text: str) -> LanguageTag:
    """Parse a language tag, raising on failure.

    Raises:
        IdentifierParseError: If text is not a well-formed tag.
    """
    tag, errors = parse_tag(text)
    if tag is None:
        raise errors[0]
    return tag
