"""
Реализации репозиториев в памяти.

Данные живут только в пределах процесса.
"""

from typing import Dict, List, Optional

from ..application import interfaces as ports
from ..domain import (
    DEFAULT_BILLING_RULES,
    BillingRules,
    DuplicateUsername,
    Room,
    RoomNotFound,
    RoomType,
    User,
)
from ..shared_kernel import RoomNumber


class InMemoryRoomCatalog(ports.IRoomCatalog):
    """Фиксированный каталог номеров: сначала делюксы, затем люксы."""

    def __init__(
        self,
        deluxe_rooms: int = 3,
        suite_rooms: int = 2,
        billing_rules: Optional[BillingRules] = None,
    ):
        if deluxe_rooms < 0 or suite_rooms < 0:
            raise ValueError("Room counts cannot be negative")
        self._deluxe_rooms = deluxe_rooms
        self._suite_rooms = suite_rooms
        self._billing_rules = billing_rules or DEFAULT_BILLING_RULES
        self._rooms: Dict[RoomNumber, Room] = {}
        self.initialize()

    def initialize(self) -> None:
        """Заполняет каталог заново; все номера свободны."""
        layout = [RoomType.DELUXE] * self._deluxe_rooms + [
            RoomType.SUITE
        ] * self._suite_rooms
        self._rooms = {}
        for number, room_type in enumerate(layout, start=1):
            self._rooms[number] = Room(
                number=number,
                type=room_type,
                nightly_rate=self._billing_rules[room_type].nightly_rate,
            )

    @property
    def billing_rules(self) -> BillingRules:
        """Тарифы, по которым заданы цены номеров и считаются счета."""
        return self._billing_rules

    def list_all(self) -> List[Room]:
        return [self._rooms[number] for number in sorted(self._rooms)]

    def list_available(self) -> List[Room]:
        return [room for room in self.list_all() if room.is_available]

    def find(self, room_number: RoomNumber) -> Room:
        room = self._rooms.get(room_number)
        if room is None:
            raise RoomNotFound(room_number)
        return room

    def mark_booked(self, room_number: RoomNumber) -> None:
        self.find(room_number).book()

    def mark_vacant(self, room_number: RoomNumber) -> None:
        self.find(room_number).vacate()


class InMemoryAccountStore(ports.IAccountStore):
    """Хранилище учетных записей в памяти. Имена чувствительны к регистру."""

    def __init__(self) -> None:
        self._users: Dict[str, User] = {}

    def signup(self, username: str, password: str) -> User:
        # Проверка и вставка не атомарны: хранилище рассчитано на один поток
        if username in self._users:
            raise DuplicateUsername(username)
        user = User(username=username, password=password)
        self._users[username] = user
        return user

    def authenticate(self, username: str, password: str) -> Optional[User]:
        user = self._users.get(username)
        if user is None or not user.check_password(password):
            return None
        return user

    def exists(self, username: str) -> bool:
        return username in self._users

    def get(self, username: str) -> Optional[User]:
        return self._users.get(username)
