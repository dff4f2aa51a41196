"""
Прикладной слой бронирования номеров.

Содержит сервис приложения, через который внешняя консоль
выполняет команды, и DTO для передачи данных наружу.
"""

from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel

from ..domain import Room, RoomType, compute_bill
from ..shared_kernel import DomainException, Money, RoomNumber
from . import interfaces as ports
from .ledger import BookingLedger
from .session import Session

# DTO для исходящих данных


class RoomDTO(BaseModel):
    """DTO для представления номера."""

    number: RoomNumber
    type: RoomType
    rate: Decimal
    currency: str
    is_available: bool

    @classmethod
    def from_domain(cls, room: Room) -> "RoomDTO":
        """Создает DTO из доменной модели."""
        return cls(
            number=room.number,
            type=room.type,
            rate=room.nightly_rate.amount,
            currency=room.nightly_rate.currency,
            is_available=room.is_available,
        )

    def describe(self) -> str:
        """Строка для вывода: Deluxe Room 1, Price: $150.00, Available: Yes."""
        price = Money(amount=self.rate, currency=self.currency).display()
        available = "Yes" if self.is_available else "No"
        return (
            f"{self.type.label} Room {self.number}, Price: {price}, "
            f"Available: {available}"
        )


class BookingsDTO(BaseModel):
    """DTO со списком номеров текущего пользователя."""

    username: str
    room_numbers: List[RoomNumber]

    @property
    def is_empty(self) -> bool:
        return not self.room_numbers

    def describe(self) -> str:
        if self.is_empty:
            return "No rooms currently booked."
        return "Booked rooms: " + " ".join(str(n) for n in self.room_numbers)


# Сервисы приложения


class ReservationService:
    """Сервис приложения для регистрации, входа и бронирования номеров."""

    def __init__(
        self,
        catalog: ports.IRoomCatalog,
        accounts: ports.IAccountStore,
        logger: ports.ILogger,
        session: Optional[Session] = None,
    ):
        """Инициализирует сервис."""
        self._catalog = catalog
        self._accounts = accounts
        self._logger = logger
        self._session = session or Session()
        self._ledger = BookingLedger(catalog)

    @property
    def session(self) -> Session:
        return self._session

    @property
    def current_username(self) -> Optional[str]:
        user = self._session.current_user
        return user.username if user else None

    def signup(self, username: str, password: str) -> None:
        """Регистрирует нового пользователя."""
        try:
            self._accounts.signup(username, password)
        except DomainException as e:
            self._logger.warning("Signup rejected", username=username, error=str(e))
            raise
        self._logger.info("User signed up", username=username)

    def login(self, username: str, password: str) -> bool:
        """Выполняет вход. При неудаче текущий пользователь не меняется."""
        user = self._accounts.authenticate(username, password)
        if user is None:
            self._logger.warning("Login failed", username=username)
            return False
        self._session.start(user)
        self._logger.info("Login successful", username=username)
        return True

    def list_available_rooms(self) -> List[RoomDTO]:
        """Возвращает свободные номера по возрастанию номера."""
        return [RoomDTO.from_domain(room) for room in self._catalog.list_available()]

    def book(self, room_number: RoomNumber) -> None:
        """Бронирует номер за текущим пользователем."""
        try:
            self._ledger.book(self._session.current_user, room_number)
        except DomainException as e:
            self._logger.warning(
                "Booking rejected",
                username=self.current_username,
                room_number=room_number,
                error=str(e),
            )
            raise
        self._logger.info(
            "Room booked", username=self.current_username, room_number=room_number
        )

    def cancel(self, room_number: RoomNumber) -> None:
        """Отменяет бронирование текущего пользователя."""
        try:
            self._ledger.cancel(self._session.current_user, room_number)
        except DomainException as e:
            self._logger.warning(
                "Cancellation rejected",
                username=self.current_username,
                room_number=room_number,
                error=str(e),
            )
            raise
        self._logger.info(
            "Booking cancelled", username=self.current_username, room_number=room_number
        )

    def calculate_bill(self, room_number: RoomNumber, nights: int) -> Money:
        """Считает стоимость проживания. Вход не требуется."""
        room = self._catalog.find(room_number)
        total = compute_bill(room, nights, self._catalog.billing_rules)
        self._logger.debug(
            "Bill calculated", room_number=room_number, nights=nights, total=str(total)
        )
        return total

    def show_my_bookings(self) -> BookingsDTO:
        """Возвращает номера текущего пользователя."""
        user = self._session.require_user()
        return BookingsDTO(
            username=user.username, room_numbers=self._ledger.list_bookings(user)
        )
