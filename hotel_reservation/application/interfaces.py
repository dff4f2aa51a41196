"""
Интерфейсы (порты) прикладного слоя.
"""

from __future__ import annotations

from typing import Any, List, Optional, Protocol

from ..domain import BillingRules, Room, User
from ..shared_kernel import RoomNumber


class ILogger(Protocol):
    """Интерфейс для логгера."""

    def info(self, message: str, **kwargs: Any) -> None: ...
    def error(self, message: str, **kwargs: Any) -> None: ...
    def warning(self, message: str, **kwargs: Any) -> None: ...
    def debug(self, message: str, **kwargs: Any) -> None: ...


class IRoomCatalog(Protocol):
    """Интерфейс каталога номеров."""

    @property
    def billing_rules(self) -> BillingRules: ...
    def initialize(self) -> None: ...
    def list_available(self) -> List[Room]: ...
    def list_all(self) -> List[Room]: ...
    def find(self, room_number: RoomNumber) -> Room: ...
    def mark_booked(self, room_number: RoomNumber) -> None: ...
    def mark_vacant(self, room_number: RoomNumber) -> None: ...


class IAccountStore(Protocol):
    """Интерфейс хранилища учетных записей."""

    def signup(self, username: str, password: str) -> User: ...
    def authenticate(self, username: str, password: str) -> Optional[User]: ...
    def exists(self, username: str) -> bool: ...
    def get(self, username: str) -> Optional[User]: ...
