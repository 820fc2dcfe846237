from abc import abstractmethod

from travel.booking.domain.entity import Booking
from travel.booking.domain.enum import BookingStatus
from travel.booking.domain.value_object import BookingId
from travel.customer.domain.value_object import CustomerId
from travel.shared.domain import Repository


class BookingRepository(Repository[Booking, BookingId]):
    """予約リポジトリのインターフェース

    Domain 層で定義し、具象実装は Infrastructure 層で行う。
    """

    @abstractmethod
    def add(self, booking: Booking) -> None:
        """予約を登録する（所有者の顧客が存在しなければコミット時に失敗する）"""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, booking_id: BookingId) -> Booking | None:
        """予約IDで検索する"""
        raise NotImplementedError

    @abstractmethod
    def find_by_customer_id(self, customer_id: CustomerId) -> list[Booking]:
        """顧客の予約を全件取得する"""
        raise NotImplementedError

    @abstractmethod
    def count_by_customer_id(self, customer_id: CustomerId) -> int:
        """顧客の予約数（ステータス問わず）"""
        raise NotImplementedError

    @abstractmethod
    def update(self, booking: Booking, expected_status: BookingStatus) -> None:
        """予約ステータスを更新する（読み取り時のステータスを条件とする）"""
        raise NotImplementedError

    @abstractmethod
    def remove(self, booking: Booking) -> None:
        """予約を削除する"""
        raise NotImplementedError
