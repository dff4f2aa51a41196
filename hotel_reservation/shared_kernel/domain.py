"""
Основные доменные типы и утилиты общего ядра.
"""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Номер комнаты в каталоге отеля
RoomNumber = int

CENTS = Decimal("0.01")

CURRENCY_SYMBOLS = {
    "USD": "$",
    "EUR": "€",
    "RUB": "₽",
}


def to_decimal(value: Union[int, float, str, Decimal]) -> Decimal:
    """Приводит значение к Decimal с точностью до копеек."""
    if isinstance(value, float):
        value = str(value)
    try:
        return Decimal(value).quantize(CENTS, rounding=ROUND_HALF_UP)
    except InvalidOperation:
        raise ValueError(f"Некорректная денежная сумма: {value!r}") from None


class Money(BaseModel):
    """Денежная сумма с валютой."""

    model_config = ConfigDict(frozen=True)

    amount: Decimal = Field(..., ge=0, description="Сумма денег")
    currency: str = Field(
        default="USD", max_length=3, description="Код валюты (ISO 4217)"
    )

    @field_validator("amount", mode="before")
    @classmethod
    def quantize_amount(cls, v):
        return to_decimal(v)

    def __add__(self, other: "Money") -> "Money":
        if not isinstance(other, Money):
            raise TypeError("Можно складывать только объекты Money")
        if self.currency != other.currency:
            raise ValueError("Нельзя складывать разные валюты")
        return Money(amount=self.amount + other.amount, currency=self.currency)

    def __mul__(self, multiplier: Union[int, Decimal]) -> "Money":
        if isinstance(multiplier, bool) or not isinstance(multiplier, (int, Decimal)):
            raise TypeError("Множитель должен быть целым числом или Decimal")
        if multiplier < 0:
            raise ValueError("Множитель не может быть отрицательным")
        return Money(amount=self.amount * multiplier, currency=self.currency)

    __rmul__ = __mul__

    def display(self) -> str:
        """Форматирует сумму для вывода пользователю: $450.00."""
        symbol = CURRENCY_SYMBOLS.get(self.currency)
        if symbol is None:
            return str(self)
        return f"{symbol}{self.amount}"

    def __str__(self) -> str:
        return f"{self.amount} {self.currency}"


# Общие исключения
class DomainException(Exception):
    """Базовое исключение для доменных ошибок."""

    pass


class BusinessRuleValidationException(DomainException):
    """Исключение при нарушении бизнес-правил."""

    pass
