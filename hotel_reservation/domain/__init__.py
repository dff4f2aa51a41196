"""
Доменная модель бронирования номеров.

Содержит номера отеля, учетные записи пользователей,
правила расчета стоимости и доменные ошибки.
"""

from .billing import (
    DEFAULT_BILLING_RULES,
    BillingRule,
    BillingRules,
    billing_rule_for,
    compute_bill,
    default_billing_rules,
)
from .exceptions import (
    AlreadyBooked,
    DuplicateUsername,
    InvalidStayLength,
    NotLoggedIn,
    NotYourBooking,
    RoomNotFound,
)
from .room import Room, RoomType
from .user import User

__all__ = [
    "Room",
    "RoomType",
    "User",
    "BillingRule",
    "BillingRules",
    "DEFAULT_BILLING_RULES",
    "billing_rule_for",
    "compute_bill",
    "default_billing_rules",
    "AlreadyBooked",
    "DuplicateUsername",
    "InvalidStayLength",
    "NotLoggedIn",
    "NotYourBooking",
    "RoomNotFound",
]
