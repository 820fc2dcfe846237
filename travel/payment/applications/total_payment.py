from decimal import Decimal

from travel.booking.domain.value_object import BookingId
from travel.payment.domain.repository import PaymentRepository
from travel.shared.domain import Money


class TotalPaymentService:
    """予約の支払い合計を求める"""

    def __init__(self, payment_repository: PaymentRepository) -> None:
        self._payment_repository = payment_repository

    def total(self, booking_id: BookingId) -> Decimal:
        total = Money.zero()
        for payment in self._payment_repository.find_by_booking_id(booking_id):
            total = total.add(payment.amount)
        return total.amount
