from decimal import ROUND_HALF_UP, Decimal

from travel.catalog.domain.value_object import HotelId
from travel.review.domain.repository import ReviewRepository

# DECIMAL(3,2) 相当
RATING_PRECISION = Decimal("0.01")


class HotelRatingService:
    """ホテルの平均評価を求める"""

    def __init__(self, review_repository: ReviewRepository) -> None:
        self._review_repository = review_repository

    def average(self, hotel_id: HotelId) -> Decimal:
        """平均評価を小数点以下 2 桁（四捨五入）で返す。レビューがなければ 0"""
        ratings = self._review_repository.find_ratings_by_hotel_id(hotel_id)
        if not ratings:
            return Decimal("0").quantize(RATING_PRECISION)
        total = sum(rating.value for rating in ratings)
        return (Decimal(total) / Decimal(len(ratings))).quantize(
            RATING_PRECISION, rounding=ROUND_HALF_UP
        )
