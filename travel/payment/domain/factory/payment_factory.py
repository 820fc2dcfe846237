from travel.booking.domain.value_object import BookingId
from travel.payment.domain.entity import Payment
from travel.payment.domain.enum import PaymentStatus
from travel.payment.domain.value_object import PaymentId
from travel.shared.domain import IdGenerator, IsoDateTime, Money


class PaymentFactory:
    """支払いエンティティのファクトリ"""

    def __init__(self, id_generator: IdGenerator) -> None:
        self._id_generator = id_generator

    def create_placeholder(self, booking_id: BookingId) -> Payment:
        """予約に紐づく未決済の支払い（金額 0）を生成する"""
        return Payment(
            id=PaymentId(self._id_generator.next_id("PAYMENT")),
            booking_id=booking_id,
            amount=Money.zero(),
            paid_at=IsoDateTime.now(),
            status=PaymentStatus.PENDING,
        )
