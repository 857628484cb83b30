"""Tests for region to currency resolution.

from_region() returns (currency, True) for a valid tender currency and
(XXX, False) otherwise; region_coverage() keeps the three-way distinction.
"""

from __future__ import annotations

from datetime import date

import pytest
from hypothesis import given

from isocurrency import (
    CHF,
    EUR,
    USD,
    XXX,
    IdentifierParseError,
    Region,
    RegionCoverage,
    from_region,
    must_parse_iso,
    region_coverage,
)
from tests.strategies.iso import region_by_group, region_with_currency

# Fixed evaluation date so results do not drift with the calendar.
_TODAY = date(2024, 6, 1)


class TestFromRegion:
    """Test from_region() on representative regions."""

    @pytest.mark.parametrize("code", ["NL", "BE", "DE", "VA"])
    def test_euro_area(self, code: str) -> None:
        """Euro area members resolve to EUR."""
        assert from_region(code, at=_TODAY) == (EUR, True)

    def test_accepts_region_object(self) -> None:
        """Region instances and text are interchangeable."""
        assert from_region(Region("NL"), at=_TODAY) == from_region("nl", at=_TODAY)

    def test_shared_currency(self) -> None:
        """Antigua uses the East Caribbean dollar."""
        currency, ok = from_region("AG", at=_TODAY)
        assert ok
        assert str(currency) == "XCD"

    def test_non_tender_units_skipped(self) -> None:
        """CH lists CHE and CHW, but only CHF is tender."""
        assert from_region("CH", at=_TODAY) == (CHF, True)

    def test_first_of_several_wins(self) -> None:
        """CU has CUP and CUC valid at once; table order picks CUP."""
        currency, ok = from_region("CU", at=_TODAY)
        assert ok
        assert str(currency) == "CUP"

    def test_dependent_territory(self) -> None:
        """Diego Garcia uses the US dollar."""
        assert from_region("DG", at=_TODAY) == (USD, True)

    def test_explicit_no_currency(self) -> None:
        """Clipperton Island deliberately has no currency."""
        assert from_region("CP", at=_TODAY) == (XXX, False)

    def test_unknown_region(self) -> None:
        """ZZ has no rows."""
        assert from_region("ZZ", at=_TODAY) == (XXX, False)

    def test_all_rows_expired(self) -> None:
        """Serbia and Montenegro no longer exists."""
        assert from_region("CS", at=_TODAY) == (XXX, False)

    def test_m49_area(self) -> None:
        """M49 areas such as 150 (Europe) carry no currency."""
        assert from_region("150", at=_TODAY) == (XXX, False)

    def test_default_date_is_today(self) -> None:
        """Without at=, the current date is used."""
        assert from_region("NL") == from_region("NL", at=date.today())

    def test_malformed_text_raises(self) -> None:
        """Text is parsed with must_parse_region()."""
        with pytest.raises(IdentifierParseError):
            from_region("Netherlands")


class TestFromRegionHistorical:
    """Test evaluation at past dates."""

    def test_before_euro(self) -> None:
        """Germany used the mark before the euro."""
        currency, ok = from_region("DE", at=date(1990, 1, 1))
        assert ok
        assert str(currency) == "DEM"

    def test_overlap_prefers_listed_first(self) -> None:
        """During the changeover both are valid; EUR is listed first."""
        assert from_region("NL", at=date(2000, 6, 1)) == (EUR, True)

    def test_valid_to_is_inclusive(self) -> None:
        """The last day of validity still resolves."""
        currency, ok = from_region("CS", at=date(2006, 6, 3))
        assert ok
        assert str(currency) == "CSD"
        assert from_region("CS", at=date(2006, 6, 4)) == (XXX, False)

    def test_switch_day(self) -> None:
        """Latvia switched from LVL to EUR on 2014-01-01."""
        assert from_region("LV", at=date(2013, 12, 31)) == (must_parse_iso("LVL"), True)
        assert from_region("LV", at=date(2014, 1, 1)) == (EUR, True)

    def test_before_any_currency(self) -> None:
        """A date before every row is not covered."""
        assert region_coverage("DG", at=date(1900, 1, 1)) == (RegionCoverage.NOT_COVERED, XXX)


class TestRegionCoverage:
    """Test the three-way coverage classification."""

    def test_current(self) -> None:
        """A valid tender currency is CURRENT."""
        assert region_coverage("NL", at=_TODAY) == (RegionCoverage.CURRENT, EUR)

    def test_no_currency(self) -> None:
        """Explicit non-tender XXX rows are NO_CURRENCY."""
        assert region_coverage("CP", at=_TODAY) == (RegionCoverage.NO_CURRENCY, XXX)
        assert region_coverage("AQ", at=_TODAY) == (RegionCoverage.NO_CURRENCY, XXX)

    def test_not_covered(self) -> None:
        """Missing and fully expired regions are NOT_COVERED."""
        assert region_coverage("ZZ", at=_TODAY) == (RegionCoverage.NOT_COVERED, XXX)
        assert region_coverage("CS", at=_TODAY) == (RegionCoverage.NOT_COVERED, XXX)

    def test_string_values(self) -> None:
        """StrEnum renders snake-case values."""
        assert str(RegionCoverage.NO_CURRENCY) == "no_currency"


class TestFromRegionProperties:
    """Property-based tests for from_region()."""

    @given(pair=region_with_currency)
    def test_known_regions(self, pair: tuple[str, str]) -> None:
        """Sampled regions resolve to their expected currency."""
        code, expected = pair
        currency, ok = from_region(code, at=_TODAY)
        assert ok
        assert str(currency) == expected

    @given(pair=region_by_group())
    def test_bool_agrees_with_coverage(self, pair: tuple[str, str]) -> None:
        """from_region() collapses region_coverage() to a boolean."""
        code, _ = pair
        coverage, currency = region_coverage(code, at=_TODAY)
        assert from_region(code, at=_TODAY) == (
            currency,
            coverage is RegionCoverage.CURRENT,
        )

    @given(pair=region_with_currency)
    def test_case_insensitive(self, pair: tuple[str, str]) -> None:
        """Region text case does not matter."""
        code, _ = pair
        assert from_region(code.lower(), at=_TODAY) == from_region(code, at=_TODAY)
