from .entity import Booking
from .enum import BookingStatus
from .factory import BookingFactory
from .repository import BookingRepository
from .value_object import BookingId

__all__ = [
    "Booking",
    "BookingFactory",
    "BookingId",
    "BookingRepository",
    "BookingStatus",
]
