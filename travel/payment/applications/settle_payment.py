from travel.booking.domain.entity import Booking
from travel.booking.domain.enum import BookingStatus
from travel.booking.domain.repository import BookingRepository
from travel.booking.domain.value_object import BookingId
from travel.payment.domain.repository import PaymentRepository
from travel.shared.domain import Money, UnitOfWork
from travel.shared.domain.exception import ResourceNotFoundException
from travel.shared.utils import get_logger

logger = get_logger("payment")


class SettlePaymentService:
    """決済ユースケース

    予約に紐づく全ての支払いを COMPLETED にし、予約を CONFIRMED にする。
    支払いと予約の更新は同一トランザクションで行う。
    """

    def __init__(
        self,
        unit_of_work: UnitOfWork,
        booking_repository: BookingRepository,
        payment_repository: PaymentRepository,
        reopen_cancelled: bool = True,
    ) -> None:
        self._unit_of_work = unit_of_work
        self._booking_repository = booking_repository
        self._payment_repository = payment_repository
        self._reopen_cancelled = reopen_cancelled

    def settle(self, booking_id: BookingId, amount: Money) -> Booking:
        """決済を確定する

        Raises:
            ResourceNotFoundException: 予約が存在しない場合、または予約に支払いが存在しない場合
            BusinessRuleViolationException: キャンセル済み予約の再開が許可されていない場合
        """
        # 1. 予約と支払いを取得
        booking = self._booking_repository.find_by_id(booking_id)
        if booking is None:
            raise ResourceNotFoundException(f"Booking not found: {booking_id}")
        payments = self._payment_repository.find_by_booking_id(booking_id)
        if not payments:
            raise ResourceNotFoundException(
                f"Payment not found for booking: {booking_id}"
            )

        # 2. 予約を確定（再開ポリシーはここで判定される）
        previous_status = booking.status
        booking.confirm(reopen_cancelled=self._reopen_cancelled)

        # 3. 支払いと予約をまとめて更新
        with self._unit_of_work:
            for payment in payments:
                expected_status = payment.status
                payment.settle(amount)
                self._payment_repository.update(payment, expected_status=expected_status)
            self._booking_repository.update(booking, expected_status=previous_status)

        if previous_status == BookingStatus.CANCELLED:
            logger.warning(
                "Cancelled booking reopened by settlement",
                extra={"booking_id": booking_id.value},
            )
        logger.info(
            "Payment settled",
            extra={
                "booking_id": booking_id.value,
                "amount": str(amount),
                "payments": len(payments),
            },
        )
        return booking
