from .booking_factory import BookingFactory

__all__ = ["BookingFactory"]
