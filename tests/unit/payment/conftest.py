from decimal import Decimal

import pytest

from travel.booking.domain import BookingId
from travel.payment.domain import Payment, PaymentId, PaymentStatus
from travel.shared.domain import IsoDateTime, Money


@pytest.fixture
def create_payment():
    """Payment を生成する Factory fixture（Factories as fixtures パターン）"""

    def _factory(
        status: PaymentStatus = PaymentStatus.PENDING,
        payment_id: int = 1,
        booking_id: int = 1,
        amount: Decimal = Decimal("0"),
    ) -> Payment:
        return Payment(
            id=PaymentId(payment_id),
            booking_id=BookingId(booking_id),
            amount=Money(amount),
            paid_at=IsoDateTime.from_string("2025-01-01T00:00:00+00:00"),
            status=status,
        )

    return _factory
