"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os

import dotenv

from src.domain.constants import DEFAULT_CURRENCY
from src.infrastructure.logging.logger import get_app_logger


DEFAULT_LOGIN_URL = "/"

CURRENCY_SYMBOLS = {
    "SGD": "S$",
    "USD": "$",
    "EUR": "€",
    "GBP": "£",
    "JPY": "¥",
    "AUD": "A$",
}


@dataclass(frozen=True)
class FinanceSettings:
    """Settings for the finance dashboard.

    Attributes:
        currency: ISO code used as the default for new assets and for
            formatting totals.
        spending_months: Number of months covered by the dashboard spending
            summary, current month included.
        login_url: Page the browser is sent to after signing out.
    """

    currency: str = DEFAULT_CURRENCY
    spending_months: int = 1
    login_url: str = DEFAULT_LOGIN_URL

    @property
    def currency_symbol(self) -> str:
        return CURRENCY_SYMBOLS.get(self.currency, f"{self.currency} ")

    @classmethod
    def from_env(cls) -> "FinanceSettings":
        """Build settings from environment variables.

        Returns:
            FinanceSettings: Settings sourced from environment variables.
        """
        dotenv.load_dotenv()
        logger = get_app_logger()
        currency = (
            os.getenv("FINANCE_CURRENCY", DEFAULT_CURRENCY).strip().upper()
            or DEFAULT_CURRENCY
        )
        spending_months = cls._parse_months(
            os.getenv("FINANCE_SPENDING_MONTHS"),
            logger=logger,
        )
        login_url = (
            os.getenv("FINANCE_LOGIN_URL", "").strip() or DEFAULT_LOGIN_URL
        )
        return cls(
            currency=currency,
            spending_months=spending_months,
            login_url=login_url,
        )

    @staticmethod
    def _parse_months(raw_value: str | None, logger) -> int:
        """Parse the spending window, falling back to one month.

        Args:
            raw_value: Raw environment value.
            logger: Logger used for warnings.

        Returns:
            int: A positive month count.
        """
        if raw_value is None or not raw_value.strip():
            return 1
        try:
            months = int(raw_value.strip())
        except ValueError:
            months = 0
        if months < 1:
            logger.warning(
                f"Invalid FINANCE_SPENDING_MONTHS={raw_value!r}; using 1"
            )
            return 1
        return months


__all__ = ["FinanceSettings", "CURRENCY_SYMBOLS", "DEFAULT_LOGIN_URL"]
