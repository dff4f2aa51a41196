"""
Общее ядро (Shared Kernel) системы бронирования номеров.

Содержит общие типы данных и исключения, используемые всеми слоями.
"""

from .domain import (
    BusinessRuleValidationException,
    # Исключения
    DomainException,
    # Основные классы
    Money,
    # Базовые типы
    RoomNumber,
    # Утилиты
    to_decimal,
)

__all__ = [
    # Базовые типы
    "RoomNumber",
    # Основные классы
    "Money",
    # Исключения
    "DomainException",
    "BusinessRuleValidationException",
    # Утилиты
    "to_decimal",
]
