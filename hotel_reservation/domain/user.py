from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from ..shared_kernel import RoomNumber


@dataclass
class User:
    """Учетная запись пользователя и его текущие бронирования."""

    username: str
    password: str
    _booked_rooms: List[RoomNumber] = field(default_factory=list, init=False)

    @property
    def booked_rooms(self) -> List[RoomNumber]:
        return list(self._booked_rooms)

    def check_password(self, password: str) -> bool:
        # Пароли хранятся в открытом виде, сравнение точное
        return self.password == password

    def has_booking(self, room_number: RoomNumber) -> bool:
        return room_number in self._booked_rooms

    def add_booking(self, room_number: RoomNumber) -> None:
        if room_number in self._booked_rooms:
            # Идемпотентность: номер уже в списке
            return
        self._booked_rooms.append(room_number)

    def remove_booking(self, room_number: RoomNumber) -> None:
        if room_number in self._booked_rooms:
            self._booked_rooms.remove(room_number)

    def __hash__(self):
        return hash(self.username)

    def __eq__(self, other):
        if not isinstance(other, User):
            return NotImplemented
        return self.username == other.username
