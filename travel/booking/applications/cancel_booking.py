from travel.booking.domain.entity import Booking
from travel.booking.domain.repository import BookingRepository
from travel.booking.domain.value_object import BookingId
from travel.payment.domain.enum import PaymentStatus
from travel.payment.domain.repository import PaymentRepository
from travel.shared.domain import UnitOfWork
from travel.shared.utils import get_logger

logger = get_logger("booking")


class CancelBookingService:
    """予約キャンセルユースケース

    予約を CANCELLED にし、未決済（PENDING）の支払いを FAILED にする。
    何度呼び出しても結果は同じ。
    """

    def __init__(
        self,
        unit_of_work: UnitOfWork,
        booking_repository: BookingRepository,
        payment_repository: PaymentRepository,
    ) -> None:
        self._unit_of_work = unit_of_work
        self._booking_repository = booking_repository
        self._payment_repository = payment_repository

    def cancel(self, booking_id: BookingId) -> Booking | None:
        """予約をキャンセルする

        Returns:
            Booking | None: キャンセル後の予約。予約が存在しない場合は None
        """
        booking = self._booking_repository.find_by_id(booking_id)
        if booking is None:
            logger.warning(
                "Booking not found, nothing to cancel",
                extra={"booking_id": booking_id.value},
            )
            return None

        previous_status = booking.status
        booking.cancel()
        pending_payments = [
            payment
            for payment in self._payment_repository.find_by_booking_id(booking_id)
            if payment.status == PaymentStatus.PENDING
        ]
        if booking.status == previous_status and not pending_payments:
            logger.info(
                "Booking already cancelled", extra={"booking_id": booking_id.value}
            )
            return booking

        with self._unit_of_work:
            if booking.status != previous_status:
                self._booking_repository.update(booking, expected_status=previous_status)
            for payment in pending_payments:
                payment.fail()
                self._payment_repository.update(
                    payment, expected_status=PaymentStatus.PENDING
                )

        logger.info(
            "Booking cancelled",
            extra={
                "booking_id": booking_id.value,
                "failed_payments": len(pending_payments),
            },
        )
        return booking
