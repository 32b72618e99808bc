"""Tests for infrastructure settings."""

from unittest.mock import MagicMock

from src.infrastructure import settings as settings_module
from src.infrastructure.settings import FinanceSettings


def _isolate(monkeypatch):
    logger = MagicMock()
    monkeypatch.setattr(settings_module.dotenv, "load_dotenv", lambda: None)
    monkeypatch.setattr(settings_module, "get_app_logger", lambda: logger)
    for name in (
        "FINANCE_CURRENCY",
        "FINANCE_SPENDING_MONTHS",
        "FINANCE_LOGIN_URL",
    ):
        monkeypatch.delenv(name, raising=False)
    return logger


def test_from_env_uses_defaults(monkeypatch) -> None:
    """Missing variables should fall back to SGD and one month."""
    _isolate(monkeypatch)

    settings = FinanceSettings.from_env()

    assert settings.currency == "SGD"
    assert settings.currency_symbol == "S$"
    assert settings.spending_months == 1
    assert settings.login_url == "/"


def test_from_env_reads_values(monkeypatch) -> None:
    _isolate(monkeypatch)
    monkeypatch.setenv("FINANCE_CURRENCY", " eur ")
    monkeypatch.setenv("FINANCE_SPENDING_MONTHS", "3")
    monkeypatch.setenv("FINANCE_LOGIN_URL", "https://auth.example/login")

    settings = FinanceSettings.from_env()

    assert settings.currency == "EUR"
    assert settings.currency_symbol == "€"
    assert settings.spending_months == 3
    assert settings.login_url == "https://auth.example/login"


def test_invalid_months_fall_back_with_warning(monkeypatch) -> None:
    """Non-numeric or non-positive windows should warn and use 1."""
    logger = _isolate(monkeypatch)

    for raw in ("abc", "0", "-2"):
        monkeypatch.setenv("FINANCE_SPENDING_MONTHS", raw)
        assert FinanceSettings.from_env().spending_months == 1

    assert logger.warning.call_count == 3


def test_unknown_currency_symbol_uses_code() -> None:
    assert FinanceSettings(currency="CHF").currency_symbol == "CHF "
