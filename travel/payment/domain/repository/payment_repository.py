from abc import abstractmethod

from travel.booking.domain.value_object import BookingId
from travel.payment.domain.entity import Payment
from travel.payment.domain.enum import PaymentStatus
from travel.payment.domain.value_object import PaymentId
from travel.shared.domain import Repository


class PaymentRepository(Repository[Payment, PaymentId]):
    """支払いリポジトリのインターフェース"""

    @abstractmethod
    def add(self, payment: Payment) -> None:
        raise NotImplementedError

    @abstractmethod
    def find_by_booking_id(self, booking_id: BookingId) -> list[Payment]:
        """予約に紐づく支払いを全件取得する（支払いID順）"""
        raise NotImplementedError

    @abstractmethod
    def update(self, payment: Payment, expected_status: PaymentStatus) -> None:
        """金額・ステータス・支払い日時を更新する（楽観的ロック）"""
        raise NotImplementedError

    @abstractmethod
    def remove(self, payment: Payment) -> None:
        raise NotImplementedError
