"""Language identifiers: BCP 47 language tags and region codes.

Public API:
    Region, parse_region, must_parse_region
    LanguageTag, parse_tag, must_parse_tag, UNDETERMINED

Python 3.13+. Requires Babel (likely-subtag inference only).
"""

from .region import Region, must_parse_region, parse_region
from .tag import UNDETERMINED, LanguageTag, must_parse_tag, parse_tag

__all__ = [
    "UNDETERMINED",
    "LanguageTag",
    "Region",
    "must_parse_region",
    "must_parse_tag",
    "parse_region",
    "parse_tag",
]
