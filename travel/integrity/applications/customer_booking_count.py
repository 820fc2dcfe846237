from travel.booking.domain.repository import BookingRepository
from travel.customer.domain.value_object import CustomerId


class CustomerBookingCountService:
    """顧客の予約数（ステータス問わず）を返す"""

    def __init__(self, booking_repository: BookingRepository) -> None:
        self._booking_repository = booking_repository

    def count(self, customer_id: CustomerId) -> int:
        return self._booking_repository.count_by_customer_id(customer_id)
