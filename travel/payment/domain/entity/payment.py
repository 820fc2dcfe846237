from travel.booking.domain.value_object import BookingId
from travel.payment.domain.enum import PaymentStatus
from travel.payment.domain.value_object import PaymentId
from travel.shared.domain import Entity, IsoDateTime, Money
from travel.shared.domain.exception import BusinessRuleViolationException


class Payment(Entity[PaymentId]):
    """支払いエンティティ

    予約の作成時に金額 0・PENDING のプレースホルダとして生成され、
    決済（settle）で COMPLETED に、予約キャンセルで FAILED に遷移する。
    """

    def __init__(
        self,
        id: PaymentId,
        booking_id: BookingId,
        amount: Money,
        paid_at: IsoDateTime,
        status: PaymentStatus = PaymentStatus.PENDING,
    ) -> None:
        super().__init__(id)
        self._booking_id = booking_id
        self._amount = amount
        self._paid_at = paid_at
        self._status = status

    @property
    def booking_id(self) -> BookingId:
        return self._booking_id

    @property
    def amount(self) -> Money:
        return self._amount

    @property
    def paid_at(self) -> IsoDateTime:
        return self._paid_at

    @property
    def status(self) -> PaymentStatus:
        return self._status

    def settle(self, amount: Money) -> None:
        """金額を確定し、支払い日時を更新する

        再決済も許可する（どのステータスからでも COMPLETED になる）。
        """
        self._amount = amount
        self._paid_at = IsoDateTime.now()
        self._status = PaymentStatus.COMPLETED

    def fail(self) -> None:
        """未決済の支払いを失敗にする"""
        if self._status == PaymentStatus.FAILED:
            return
        if self._status != PaymentStatus.PENDING:
            raise BusinessRuleViolationException(
                f"Cannot fail payment in status: {self._status.value}"
            )
        self._status = PaymentStatus.FAILED
