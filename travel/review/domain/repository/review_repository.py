from abc import abstractmethod

from travel.catalog.domain.value_object import HotelId
from travel.customer.domain.value_object import CustomerId
from travel.review.domain.entity import Review
from travel.review.domain.value_object import Rating, ReviewId
from travel.shared.domain import Repository


class ReviewRepository(Repository[Review, ReviewId]):
    """レビューリポジトリのインターフェース"""

    @abstractmethod
    def add(self, review: Review) -> None:
        """レビューを登録する（投稿者の顧客が存在しなければコミット時に失敗する）"""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, review_id: ReviewId) -> Review | None:
        raise NotImplementedError

    @abstractmethod
    def find_by_customer_id(self, customer_id: CustomerId) -> list[Review]:
        raise NotImplementedError

    @abstractmethod
    def find_ratings_by_hotel_id(self, hotel_id: HotelId) -> list[Rating]:
        """ホテルに付けられた評価を全件取得する"""
        raise NotImplementedError
