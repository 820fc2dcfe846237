from abc import abstractmethod

from travel.customer.domain.entity import Customer
from travel.customer.domain.value_object import CustomerId
from travel.shared.domain import Repository


class CustomerRepository(Repository[Customer, CustomerId]):
    """顧客リポジトリのインターフェース"""

    @abstractmethod
    def add(self, customer: Customer) -> None:
        """顧客を登録する（電話番号は一意）"""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, customer_id: CustomerId) -> Customer | None:
        """顧客IDで検索する"""
        raise NotImplementedError

    @abstractmethod
    def release_bookings(self, customer_id: CustomerId, count: int) -> None:
        """削除した予約の件数だけ顧客の予約数を減らす"""
        raise NotImplementedError

    @abstractmethod
    def remove(self, customer: Customer) -> None:
        """顧客を削除する

        予約・レビューが 1 件でも残っている場合（読み取り後に追加された場合を含む）は
        コミット時に OptimisticLockException となる。
        """
        raise NotImplementedError
