"""
Доменные ошибки бронирования.

Все ошибки восстановимы: вызывающая сторона (консоль) решает,
показать ли сообщение и продолжить работу.
"""

from ..shared_kernel import BusinessRuleValidationException, RoomNumber


class DuplicateUsername(BusinessRuleValidationException):
    """Пользователь с таким именем уже зарегистрирован."""

    def __init__(self, username: str):
        super().__init__("Username already exists.")
        self.username = username


class NotLoggedIn(BusinessRuleValidationException):
    """Операция требует вошедшего пользователя."""

    def __init__(self):
        super().__init__("No user logged in.")


class RoomNotFound(BusinessRuleValidationException):
    """Номер отсутствует в каталоге."""

    def __init__(self, room_number: RoomNumber):
        super().__init__("Room number not found.")
        self.room_number = room_number


class AlreadyBooked(BusinessRuleValidationException):
    """Номер уже забронирован."""

    def __init__(self, room_number: RoomNumber):
        super().__init__("Room already booked.")
        self.room_number = room_number


class NotYourBooking(BusinessRuleValidationException):
    """Номер не входит в бронирования текущего пользователя."""

    def __init__(self, room_number: RoomNumber):
        super().__init__("You haven't booked this room.")
        self.room_number = room_number


class InvalidStayLength(BusinessRuleValidationException):
    """Количество ночей должно быть положительным целым числом."""

    def __init__(self, nights):
        super().__init__(f"Stay length must be a positive number of nights, got {nights!r}.")
        self.nights = nights
