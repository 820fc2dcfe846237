from decimal import Decimal

from travel.booking.domain.value_object import BookingId
from travel.payment.domain.entity import Payment
from travel.payment.domain.enum import PaymentStatus
from travel.payment.domain.repository import PaymentRepository
from travel.payment.domain.value_object import PaymentId
from travel.shared.domain import IsoDateTime, Money
from travel.shared.domain.exception import (
    DuplicateResourceException,
    OptimisticLockException,
)
from travel.shared.infrastructure import DynamoDBUnitOfWork, TravelTable, item_key


def payment_key(booking_id: BookingId, payment_id: PaymentId) -> dict:
    # 支払いは予約と同じパーティションに置く
    return item_key(f"BOOKING#{booking_id}", f"PAYMENT#{payment_id.value:010d}")


class DynamoDBPaymentRepository(PaymentRepository):
    """DynamoDBを使用したPaymentRepository の具象実装"""

    def __init__(self, table: TravelTable, unit_of_work: DynamoDBUnitOfWork) -> None:
        self._table = table
        self._unit_of_work = unit_of_work

    def add(self, payment: Payment) -> None:
        """支払いを登録する"""
        self._unit_of_work.put(
            item={
                **payment_key(payment.booking_id, payment.id),
                "entity_type": "PAYMENT",
                "payment_id": payment.id.value,
                "booking_id": payment.booking_id.value,
                "amount": str(payment.amount),
                "payment_date": str(payment.paid_at),
                "status": payment.status.value,
            },
            condition="attribute_not_exists(PK)",
            on_condition_failed=lambda: DuplicateResourceException(
                f"Payment already exists: {payment.id}"
            ),
        )

    def find_by_booking_id(self, booking_id: BookingId) -> list[Payment]:
        """予約IDで支払いを検索"""
        items = self._table.query_prefix(f"BOOKING#{booking_id}", "PAYMENT#")
        return [self._to_entity(item) for item in items]

    def update(self, payment: Payment, expected_status: PaymentStatus) -> None:
        """支払いを更新（楽観的ロック）"""
        self._unit_of_work.update(
            key=payment_key(payment.booking_id, payment.id),
            update_expression=(
                "SET #amount = :amount, payment_date = :paid_at, #status = :status"
            ),
            condition="attribute_exists(PK) AND #status = :expected",
            names={"#amount": "amount", "#status": "status"},
            values={
                ":amount": str(payment.amount),
                ":paid_at": str(payment.paid_at),
                ":status": payment.status.value,
                ":expected": expected_status.value,
            },
            on_condition_failed=lambda: OptimisticLockException(
                f"Payment status conflict: expected {expected_status.value}, "
                f"payment_id={payment.id}"
            ),
        )

    def remove(self, payment: Payment) -> None:
        self._unit_of_work.delete(key=payment_key(payment.booking_id, payment.id))

    def _to_entity(self, item: dict) -> Payment:
        """DynamoDB アイテムをドメインエンティティに変換する"""
        return Payment(
            id=PaymentId(int(item["payment_id"])),
            booking_id=BookingId(int(item["booking_id"])),
            amount=Money(Decimal(item["amount"])),
            paid_at=IsoDateTime.from_string(item["payment_date"]),
            status=PaymentStatus(item["status"]),
        )
