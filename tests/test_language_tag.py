"""Tests for BCP 47 language tag parsing and likely-region inference."""

from __future__ import annotations

import pytest
from hypothesis import given

from isocurrency import UNDETERMINED, IdentifierParseError, LanguageTag, Region, parse_tag
from isocurrency.diagnostics import DiagnosticCode
from isocurrency.language import must_parse_tag
from tests.strategies.iso import language_with_currency, malformed_tags, separators


class TestParseTag:
    """Test parse_tag() on well-formed tags."""

    def test_language_only(self) -> None:
        """A bare language has no script or region."""
        tag, errors = parse_tag("nl")
        assert errors == ()
        assert tag == LanguageTag("nl")
        assert tag.region is None

    def test_language_region(self) -> None:
        """Region subtags become Region objects."""
        tag, errors = parse_tag("nl-BE")
        assert not errors
        assert tag is not None
        assert tag.region == Region("BE")
        assert str(tag) == "nl-BE"

    def test_posix_separator_and_case(self) -> None:
        """Underscores and any case canonicalize."""
        tag, errors = parse_tag("ZH_hant_tw")
        assert not errors
        assert tag is not None
        assert tag.language == "zh"
        assert tag.script == "Hant"
        assert tag.region == Region("TW")
        assert str(tag) == "zh-Hant-TW"

    def test_m49_region(self) -> None:
        """Three-digit regions are accepted."""
        tag, errors = parse_tag("es-419")
        assert not errors
        assert tag is not None
        assert tag.region == Region("419")

    def test_extlang_and_variant(self) -> None:
        """Extended language and variant subtags are kept."""
        tag = must_parse_tag("zh-yue-HK")
        assert tag.extlangs == ("yue",)
        assert tag.region == Region("HK")

        tag = must_parse_tag("sl-rozaj-biske")
        assert tag.variants == ("rozaj", "biske")
        assert tag.region is None

        tag = must_parse_tag("de-CH-1901")
        assert tag.variants == ("1901",)

    def test_currency_extension(self) -> None:
        """The 'cu' keyword of the 'u' extension is exposed."""
        tag = must_parse_tag("en-u-cu-eur")
        assert tag.currency_extension == "eur"
        assert tag.unicode_keywords == {"cu": "eur"}
        assert str(tag) == "en-u-cu-eur"

    def test_multiple_keywords(self) -> None:
        """Keys split the 'u' extension; other singletons are ignored."""
        tag = must_parse_tag("de-DE-u-co-phonebk-cu-chf-t-en-x-private")
        assert tag.unicode_keywords == {"co": "phonebk", "cu": "chf"}
        assert tag.currency_extension == "chf"
        assert tag.private_use == ("private",)
        assert tag.extensions == (("u", ("co", "phonebk", "cu", "chf")), ("t", ("en",)))

    def test_keyword_without_type(self) -> None:
        """A bare key maps to 'true'."""
        tag = must_parse_tag("en-u-cu")
        assert tag.currency_extension == "true"

    def test_no_extension(self) -> None:
        """Tags without 'cu' report None."""
        assert must_parse_tag("en-US").currency_extension is None

    def test_undetermined(self) -> None:
        """'und' is the undetermined language."""
        tag = must_parse_tag("und")
        assert tag == UNDETERMINED
        assert tag.is_undetermined
        assert not must_parse_tag("en").is_undetermined

    def test_private_use_only_after_language(self) -> None:
        """Private use subtags end the tag."""
        tag = must_parse_tag("en-x-a-b")
        assert tag.private_use == ("a", "b")


class TestParseTagFailure:
    """Test rejection of malformed tags."""

    @pytest.mark.parametrize(
        "text",
        ["", "e", "en--US", "en-", "en-u", "en-x", "1en", "en-u-cu-eur-u-cu-usd", "en-US-US"],
    )
    def test_rejected(self, text: str) -> None:
        """Malformed tags yield None and one LANGUAGE_TAG_INVALID error."""
        tag, errors = parse_tag(text)
        assert tag is None
        assert len(errors) == 1
        assert errors[0].parse_type == "language_tag"
        assert errors[0].input_value == text
        assert errors[0].diagnostic is not None
        assert errors[0].diagnostic.code == DiagnosticCode.LANGUAGE_TAG_INVALID

    def test_must_parse_tag_raises(self) -> None:
        """The raising variant surfaces the error."""
        with pytest.raises(IdentifierParseError, match="LANGUAGE_TAG_INVALID"):
            must_parse_tag("en--US")

    @given(text=malformed_tags)
    def test_malformed_property(self, text: str) -> None:
        """Malformed tags never parse."""
        tag, errors = parse_tag(text)
        assert tag is None
        assert errors


class TestParseTagProperties:
    """Property-based tests for parse_tag()."""

    @given(pair=language_with_currency, separator=separators)
    def test_separator_insensitive(self, pair: tuple[str, str], separator: str) -> None:
        """'-' and '_' produce the same tag."""
        language, _ = pair
        text = f"{language}{separator}US"
        tag, errors = parse_tag(text)
        assert not errors
        assert tag == must_parse_tag(f"{language}-US")

    @given(pair=language_with_currency)
    def test_str_reparses(self, pair: tuple[str, str]) -> None:
        """Rendered tags parse back to an equal tag."""
        language, _ = pair
        tag = must_parse_tag(f"{language}-latn-gb-u-cu-gbp")
        assert must_parse_tag(str(tag)) == tag


class TestLikelyRegion:
    """Test CLDR likely-region inference through Babel."""

    def test_language(self) -> None:
        """Dutch is most likely spoken in the Netherlands."""
        assert must_parse_tag("nl").likely_region() == Region("NL")

    def test_script_changes_region(self) -> None:
        """Traditional Chinese is most likely used in Taiwan."""
        assert must_parse_tag("zh").likely_region() == Region("CN")
        assert must_parse_tag("zh-Hant").likely_region() == Region("TW")

    def test_undetermined_not_inferred(self) -> None:
        """'und' alone infers nothing."""
        assert UNDETERMINED.likely_region() is None

    def test_unknown_language(self) -> None:
        """Languages without CLDR data infer nothing."""
        assert must_parse_tag("qaa").likely_region() is None
