from .booking_id import BookingId

__all__ = ["BookingId"]
