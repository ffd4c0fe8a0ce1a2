"""
Configuration for the budget engine.

Values come from BUDGET_* environment variables or a .env file.
"""

from dataclasses import dataclass
from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


CURRENCY_SYMBOLS = {
    "JPY": "￥",
    "USD": "$",
    "EUR": "€",
    "GBP": "£",
    "CNY": "¥",
    "KRW": "₩",
}


@dataclass(frozen=True)
class CurrencyFormat:
    """Display convention for money amounts."""

    locale: str = "ja-JP"
    currency: str = "JPY"
    symbol: str = "￥"
    fraction_digits: int = 0


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="BUDGET_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    locale: str = Field(default="ja-JP", description="Locale tag for display")
    currency: str = Field(default="JPY", description="ISO currency code")
    currency_symbol: Optional[str] = Field(
        default=None, description="Symbol prefix; looked up from currency if unset"
    )
    fraction_digits: int = Field(default=0, description="Fractional digits shown")
    strict_allocations: bool = Field(
        default=False,
        description="Reject allocation tables whose percentages do not sum to 100",
    )
    default_target_income: int = Field(
        default=300000, description="Target income used when a profile has none"
    )

    @field_validator("currency")
    @classmethod
    def normalize_currency(cls, v: str) -> str:
        return v.strip().upper()

    @field_validator("fraction_digits")
    @classmethod
    def fraction_digits_must_be_non_negative(cls, v: int) -> int:
        if v < 0:
            raise ValueError("Fraction digits must be non-negative")
        return v

    @property
    def currency_format(self) -> CurrencyFormat:
        return CurrencyFormat(
            locale=self.locale,
            currency=self.currency,
            symbol=self.currency_symbol
            or CURRENCY_SYMBOLS.get(self.currency, self.currency),
            fraction_digits=self.fraction_digits,
        )


@lru_cache()
def get_settings() -> Settings:
    """
    Get settings (cached).

    Call reset_settings() to re-read the environment.
    """
    return Settings()


def reset_settings() -> None:
    """Drop the cached settings so the next access re-reads the environment."""
    get_settings.cache_clear()
