from decimal import Decimal
from unittest.mock import MagicMock

from travel.catalog.domain import HotelId
from travel.integrity.applications.customer_booking_count import (
    CustomerBookingCountService,
)
from travel.integrity.applications.hotel_rating import HotelRatingService
from travel.review.domain import Rating


class TestCustomerBookingCountService:
    def test_count(self, customer_id):
        repository = MagicMock()
        repository.count_by_customer_id.return_value = 3

        assert CustomerBookingCountService(repository).count(customer_id) == 3
        repository.count_by_customer_id.assert_called_once_with(customer_id)


class TestHotelRatingService:
    def test_average_is_rounded_half_up(self):
        repository = MagicMock()
        repository.find_ratings_by_hotel_id.return_value = [
            Rating(5),
            Rating(4),
            Rating(4),
        ]

        # 13 / 3 = 4.333...
        assert HotelRatingService(repository).average(HotelId(2)) == Decimal("4.33")

    def test_half_is_rounded_up(self):
        repository = MagicMock()
        repository.find_ratings_by_hotel_id.return_value = [
            Rating(5),
            Rating(4),
            Rating(4),
            Rating(4),
            Rating(4),
            Rating(4),
            Rating(4),
            Rating(4),
        ]

        # 33 / 8 = 4.125
        assert HotelRatingService(repository).average(HotelId(2)) == Decimal("4.13")

    def test_no_reviews_returns_zero(self):
        repository = MagicMock()
        repository.find_ratings_by_hotel_id.return_value = []

        average = HotelRatingService(repository).average(HotelId(2))

        assert average == Decimal("0")
        assert str(average) == "0.00"
