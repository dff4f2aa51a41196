"""
Учет бронирований: связь доступности номера в каталоге
с набором номеров, забронированных пользователем.
"""

from typing import List, Optional

from ..domain import NotLoggedIn, NotYourBooking, User
from ..shared_kernel import RoomNumber
from . import interfaces as ports


class BookingLedger:
    """Сервис, согласующий каталог номеров и бронирования пользователя.

    Для каждого занятого номера ровно один пользователь держит его
    в своем наборе, и наоборот.
    """

    def __init__(self, catalog: ports.IRoomCatalog):
        self._catalog = catalog

    def book(self, user: Optional[User], room_number: RoomNumber) -> None:
        """Бронирует номер за пользователем."""
        if user is None:
            raise NotLoggedIn()
        self._catalog.find(room_number)
        self._catalog.mark_booked(room_number)
        user.add_booking(room_number)

    def cancel(self, user: Optional[User], room_number: RoomNumber) -> None:
        """Отменяет бронирование пользователя."""
        if user is None:
            raise NotLoggedIn()
        self._catalog.find(room_number)
        # Номер может быть занят, но не этим пользователем
        if not user.has_booking(room_number):
            raise NotYourBooking(room_number)
        self._catalog.mark_vacant(room_number)
        user.remove_booking(room_number)

    def list_bookings(self, user: Optional[User]) -> List[RoomNumber]:
        """Номера пользователя в порядке бронирования."""
        if user is None:
            raise NotLoggedIn()
        return user.booked_rooms
