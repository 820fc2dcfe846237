from typing import TypedDict

from travel.catalog.domain.value_object import HotelId, PackageId
from travel.customer.domain.value_object import CustomerId
from travel.review.domain.entity import Review
from travel.review.domain.value_object import Rating, ReviewId
from travel.shared.domain import IdGenerator, IsoDateTime


class ReviewDetails(TypedDict):
    """レビューの入力データ"""

    customer_id: CustomerId
    rating: int
    package_id: PackageId | None
    hotel_id: HotelId | None
    review_text: str | None


class ReviewFactory:
    """レビューを生成するFactory"""

    def __init__(self, id_generator: IdGenerator) -> None:
        self._id_generator = id_generator

    def create(self, details: ReviewDetails) -> Review:
        # 評価の検証を採番より先に行う
        rating = Rating(details["rating"])

        return Review(
            id=ReviewId(self._id_generator.next_id("REVIEW")),
            customer_id=details["customer_id"],
            rating=rating,
            package_id=details["package_id"],
            hotel_id=details["hotel_id"],
            review_text=details["review_text"],
            reviewed_at=IsoDateTime.now(),
        )
