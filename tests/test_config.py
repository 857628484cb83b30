"""Tests for deployment configuration."""

from __future__ import annotations

import logging

import pytest

from isocurrency import EUR, USD, get_default_currency
from isocurrency.constants import DEFAULT_CURRENCY_CODE, DEFAULT_CURRENCY_ENV_VAR


class TestDefaultCurrency:
    """Test get_default_currency()."""

    def test_unset(self) -> None:
        """Without the variable the built-in default applies."""
        assert DEFAULT_CURRENCY_CODE == "USD"
        assert get_default_currency() is USD

    def test_configured(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """The variable is parsed case-insensitively."""
        monkeypatch.setenv(DEFAULT_CURRENCY_ENV_VAR, "eur")
        assert get_default_currency() is EUR

    def test_whitespace_trimmed(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Surrounding whitespace is ignored."""
        monkeypatch.setenv(DEFAULT_CURRENCY_ENV_VAR, "  EUR\n")
        assert get_default_currency() is EUR

    def test_blank_is_unset(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """A blank value means no configuration."""
        monkeypatch.setenv(DEFAULT_CURRENCY_ENV_VAR, "   ")
        assert get_default_currency() is USD

    @pytest.mark.parametrize("value", ["EURO", "UUU", "12$"])
    def test_invalid_falls_back_with_warning(
        self,
        monkeypatch: pytest.MonkeyPatch,
        caplog: pytest.LogCaptureFixture,
        value: str,
    ) -> None:
        """Invalid values log a warning and use the built-in default."""
        monkeypatch.setenv(DEFAULT_CURRENCY_ENV_VAR, value)
        with caplog.at_level(logging.WARNING, logger="isocurrency.config"):
            assert get_default_currency() is USD
        assert "DEFAULT_CURRENCY_INVALID" in caplog.text
        assert DEFAULT_CURRENCY_ENV_VAR in caplog.text

    def test_read_on_every_call(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Changes to the environment take effect immediately."""
        monkeypatch.setenv(DEFAULT_CURRENCY_ENV_VAR, "EUR")
        assert get_default_currency() is EUR
        monkeypatch.setenv(DEFAULT_CURRENCY_ENV_VAR, "USD")
        assert get_default_currency() is USD
