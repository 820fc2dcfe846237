from enum import Enum


class BookingStatus(str, Enum):
    """予約ステータス"""

    PENDING = "Pending"
    CONFIRMED = "Confirmed"
    CANCELLED = "Cancelled"
