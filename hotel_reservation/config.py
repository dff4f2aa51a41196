"""
Настройки системы бронирования.
Используют управление настройками Pydantic: значения читаются
из переменных окружения с префиксом HOTEL_ и из файла .env.
"""

from decimal import Decimal
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .domain import BillingRule, BillingRules, RoomType
from .shared_kernel import Money


class Settings(BaseSettings):
    """Настройки приложения с поддержкой переменных окружения."""

    model_config = SettingsConfigDict(
        env_prefix="HOTEL_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Состав каталога
    DELUXE_ROOMS: int = Field(default=3, ge=0)
    SUITE_ROOMS: int = Field(default=2, ge=0)

    # Тарифы
    DELUXE_RATE: Decimal = Field(default=Decimal("150.00"), ge=0)
    SUITE_RATE: Decimal = Field(default=Decimal("300.00"), ge=0)
    SUITE_FEE: Decimal = Field(default=Decimal("100.00"), ge=0)
    CURRENCY: str = Field(default="USD", min_length=3, max_length=3)

    LOG_LEVEL: str = "INFO"

    @field_validator("CURRENCY")
    @classmethod
    def upper_currency(cls, v: str) -> str:
        return v.upper()

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown log level: {v}")
        return level

    def billing_rules(self) -> BillingRules:
        """Таблица тарифов по типам номеров."""
        return {
            RoomType.DELUXE: BillingRule(
                nightly_rate=Money(amount=self.DELUXE_RATE, currency=self.CURRENCY),
                flat_fee=Money(amount=Decimal("0"), currency=self.CURRENCY),
            ),
            RoomType.SUITE: BillingRule(
                nightly_rate=Money(amount=self.SUITE_RATE, currency=self.CURRENCY),
                flat_fee=Money(amount=self.SUITE_FEE, currency=self.CURRENCY),
            ),
        }


@lru_cache()
def get_settings() -> Settings:
    """Возвращает настройки, прочитанные один раз за процесс."""
    return Settings()
