"""
Система бронирования номеров отеля.

Доменная модель для консольного приложения: каталог номеров,
учетные записи, бронирования и расчет стоимости проживания.
"""

from .bootstrap import bootstrap_app

__all__ = ["bootstrap_app"]
