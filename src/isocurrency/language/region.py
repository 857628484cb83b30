"""Region identifiers: ISO 3166-1 alpha-2 and UN M49 area codes.

API: parse_region() returns tuple[Region | None, tuple[IdentifierParseError, ...]].
Validation is syntactic: any well-formed code is accepted, including
private-use codes such as ZZ. Whether a region has a currency is the
resolver's concern, not the parser's.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass

from isocurrency.constants import ISO_REGION_ALPHA_LENGTH, M49_REGION_LENGTH
from isocurrency.diagnostics import ErrorTemplate, IdentifierParseError

__all__ = [
    "Region",
    "must_parse_region",
    "parse_region",
]


@dataclass(frozen=True, slots=True, order=True)
class Region:
    """Validated region identifier.

    Immutable, hashable, comparable. Alpha-2 codes are stored uppercase.

    Attributes:
        code: 'NL', 'US', '150', '419', ...
    """

    code: str

    def __str__(self) -> str:
        return self.code

    @property
    def is_m49(self) -> bool:
        """True for numeric UN M49 area codes (e.g. '150' Europe)."""
        return self.code.isdigit()


def parse_region(text: str) -> tuple[Region | None, tuple[IdentifierParseError, ...]]:
    """Parse a region identifier.

    Args:
        text: Two ASCII letters (case-insensitive) or three ASCII digits

    Returns:
        Tuple of (region, errors):
        - region: Region on success, None on failure
        - errors: Tuple of IdentifierParseError (empty tuple on success)
    """
    if text.isascii():
        if len(text) == ISO_REGION_ALPHA_LENGTH and text.isalpha():
            return (Region(text.upper()), ())
        if len(text) == M49_REGION_LENGTH and text.isdigit():
            return (Region(text), ())
    error = IdentifierParseError(
        ErrorTemplate.region_invalid(text),
        input_value=text,
        parse_type="region",
    )
    return (None, (error,))


def must_parse_region(text: str) -> Region:
    """Parse a region identifier, raising on failure.

    Raises:
        IdentifierParseError: If text is not a well-formed region code.
    """
    region, errors = parse_region(text)
    if region is None:
        raise errors[0]
    return region
