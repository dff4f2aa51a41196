"""
Прикладной слой: сессия, учет бронирований и сервис приложения.
"""

from .ledger import BookingLedger
from .services import BookingsDTO, ReservationService, RoomDTO
from .session import Session

__all__ = [
    "BookingLedger",
    "BookingsDTO",
    "ReservationService",
    "RoomDTO",
    "Session",
]
