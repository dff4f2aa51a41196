"""
Правила расчета стоимости проживания.

Правило определяется только типом номера: стоимость ночи умножается
на количество ночей, к результату добавляется фиксированный сбор
(для люкса 100, для делюкса 0). Каталог берет цены номеров из тех же
тарифов, поэтому ставка номера и ставка тарифа всегда совпадают.
"""

from decimal import Decimal
from typing import Mapping, Optional

from pydantic import BaseModel, ConfigDict, ValidationError

from ..shared_kernel import Money
from .exceptions import InvalidStayLength
from .room import Room, RoomType


class BillingRule(BaseModel):
    """Тариф для типа номера."""

    model_config = ConfigDict(frozen=True)

    nightly_rate: Money
    flat_fee: Money

    def bill(self, nights: int) -> Money:
        """Считает сумму за проживание по ставке тарифа."""
        validate_stay_length(nights)
        try:
            return self.nightly_rate * nights + self.flat_fee
        except (ValidationError, ArithmeticError) as e:
            # Сумма не помещается в точность Decimal с копейками
            raise InvalidStayLength(nights) from e


BillingRules = Mapping[RoomType, BillingRule]


def default_billing_rules(currency: str = "USD") -> BillingRules:
    """Тарифы по умолчанию: делюкс 150 за ночь, люкс 300 за ночь + 100."""
    return {
        RoomType.DELUXE: BillingRule(
            nightly_rate=Money(amount=Decimal("150.00"), currency=currency),
            flat_fee=Money(amount=Decimal("0"), currency=currency),
        ),
        RoomType.SUITE: BillingRule(
            nightly_rate=Money(amount=Decimal("300.00"), currency=currency),
            flat_fee=Money(amount=Decimal("100.00"), currency=currency),
        ),
    }


DEFAULT_BILLING_RULES = default_billing_rules()


def validate_stay_length(nights: int) -> None:
    # bool является подклассом int, но ночами не является
    if isinstance(nights, bool) or not isinstance(nights, int) or nights < 1:
        raise InvalidStayLength(nights)


def billing_rule_for(
    room_type: RoomType, rules: Optional[BillingRules] = None
) -> BillingRule:
    """Возвращает тариф для типа номера."""
    return (rules or DEFAULT_BILLING_RULES)[room_type]


def compute_bill(
    room: Room, nights: int, rules: Optional[BillingRules] = None
) -> Money:
    """Считает итоговую сумму за проживание в номере."""
    rule = billing_rule_for(room.type, rules)
    return rule.bill(nights)
