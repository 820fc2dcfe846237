import pytest

from travel.booking.domain import Booking, BookingId, BookingStatus
from travel.catalog.domain import HotelId, PackageId
from travel.customer.domain import CustomerId


@pytest.fixture
def create_booking():
    """Booking を生成する Factory fixture（Factories as fixtures パターン）"""

    def _factory(
        status: BookingStatus = BookingStatus.PENDING,
        booking_id: int = 1,
        customer_id: int = 1,
        package_id: int | None = 2,
        hotel_id: int | None = 2,
    ) -> Booking:
        return Booking(
            id=BookingId(booking_id),
            customer_id=CustomerId(customer_id),
            package_id=PackageId(package_id) if package_id else None,
            hotel_id=HotelId(hotel_id) if hotel_id else None,
            status=status,
        )

    return _factory
