"""
Номера отеля.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from ..shared_kernel import Money, RoomNumber
from .exceptions import AlreadyBooked


class RoomType(str, Enum):
    """Типы номеров в отеле."""

    DELUXE = "deluxe"
    SUITE = "suite"

    @property
    def label(self) -> str:
        return self.value.capitalize()


class Room(BaseModel):
    """Номер в отеле."""

    model_config = ConfigDict(validate_assignment=True)

    number: RoomNumber = Field(..., gt=0, frozen=True)
    type: RoomType = Field(..., frozen=True)
    nightly_rate: Money = Field(..., frozen=True)
    is_available: bool = True

    def book(self) -> None:
        """Помечает номер занятым."""
        if not self.is_available:
            raise AlreadyBooked(self.number)
        self.is_available = False

    def vacate(self) -> None:
        """Освобождает номер. Повторное освобождение не является ошибкой."""
        self.is_available = True
