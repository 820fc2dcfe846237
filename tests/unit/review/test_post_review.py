from unittest.mock import MagicMock

import pytest

from travel.catalog.domain import HotelId
from travel.review.applications.post_review import PostReviewService
from travel.review.domain import Rating, ReviewFactory
from travel.shared.domain import ResourceNotFoundException, ValidationException


class TestPostReviewService:
    @pytest.fixture
    def review_repository(self):
        return MagicMock()

    @pytest.fixture
    def customer_repository(self):
        return MagicMock()

    @pytest.fixture
    def hotel_repository(self):
        return MagicMock()

    @pytest.fixture
    def service(
        self,
        mock_unit_of_work,
        review_repository,
        customer_repository,
        hotel_repository,
        id_generator,
    ):
        return PostReviewService(
            unit_of_work=mock_unit_of_work,
            review_repository=review_repository,
            customer_repository=customer_repository,
            package_repository=MagicMock(),
            hotel_repository=hotel_repository,
            factory=ReviewFactory(id_generator),
        )

    @pytest.fixture
    def create_details(self, customer_id):
        def _factory(rating: int = 4, hotel_id: HotelId | None = HotelId(2)):
            return {
                "customer_id": customer_id,
                "rating": rating,
                "package_id": None,
                "hotel_id": hotel_id,
                "review_text": "Great stay",
            }

        return _factory

    def test_post_adds_review(self, service, review_repository, create_details):
        review = service.post(create_details())

        assert review.rating == Rating(4)
        assert review.hotel_id == HotelId(2)
        review_repository.add.assert_called_once_with(review)

    def test_rating_out_of_range(self, service, review_repository, create_details):
        with pytest.raises(ValidationException):
            service.post(create_details(rating=6))

        review_repository.add.assert_not_called()

    def test_unknown_customer(
        self, service, customer_repository, review_repository, create_details
    ):
        customer_repository.find_by_id.return_value = None

        with pytest.raises(ResourceNotFoundException, match="Customer not found"):
            service.post(create_details())

        review_repository.add.assert_not_called()

    def test_unknown_hotel(self, service, hotel_repository, create_details):
        hotel_repository.find_by_id.return_value = None

        with pytest.raises(ResourceNotFoundException, match="Hotel not found"):
            service.post(create_details())
