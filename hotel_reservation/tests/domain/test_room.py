from decimal import Decimal

import pytest
from pydantic import ValidationError

from hotel_reservation.domain import AlreadyBooked, Room, RoomType
from hotel_reservation.shared_kernel import Money


@pytest.fixture
def room() -> Room:
    return Room(number=4, type=RoomType.SUITE, nightly_rate=Money(amount=300))


def test_new_room_is_available(room: Room):
    assert room.is_available
    assert room.nightly_rate.amount == Decimal("300.00")


def test_book_marks_room_unavailable(room: Room):
    room.book()

    assert not room.is_available


def test_booking_twice_fails(room: Room):
    """Тест: повторное бронирование занятого номера вызывает ошибку."""
    room.book()

    with pytest.raises(AlreadyBooked, match="Room already booked.") as exc_info:
        room.book()
    assert exc_info.value.room_number == 4
    assert not room.is_available


def test_vacate_is_unconditional(room: Room):
    room.vacate()
    assert room.is_available

    room.book()
    room.vacate()
    room.vacate()
    assert room.is_available


def test_room_number_must_be_positive():
    with pytest.raises(ValidationError):
        Room(number=0, type=RoomType.DELUXE, nightly_rate=Money(amount=150))


def test_room_number_is_immutable(room: Room):
    with pytest.raises(ValidationError):
        room.number = 7


def test_room_type_label():
    assert RoomType.DELUXE.label == "Deluxe"
    assert RoomType.SUITE.label == "Suite"
