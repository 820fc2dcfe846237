from travel.catalog.domain.repository import HotelRepository, TourPackageRepository
from travel.customer.domain.repository import CustomerRepository
from travel.review.domain.entity import Review
from travel.review.domain.factory import ReviewDetails, ReviewFactory
from travel.review.domain.repository import ReviewRepository
from travel.shared.domain import UnitOfWork
from travel.shared.domain.exception import ResourceNotFoundException
from travel.shared.utils import get_logger

logger = get_logger("review")


class PostReviewService:
    """レビュー投稿ユースケース"""

    def __init__(
        self,
        unit_of_work: UnitOfWork,
        review_repository: ReviewRepository,
        customer_repository: CustomerRepository,
        package_repository: TourPackageRepository,
        hotel_repository: HotelRepository,
        factory: ReviewFactory,
    ) -> None:
        self._unit_of_work = unit_of_work
        self._review_repository = review_repository
        self._customer_repository = customer_repository
        self._package_repository = package_repository
        self._hotel_repository = hotel_repository
        self._factory = factory

    def post(self, details: ReviewDetails) -> Review:
        """レビューを投稿する

        Raises:
            ResourceNotFoundException: 顧客・パッケージ・ホテルが存在しない場合
            ValidationException: 評価が範囲外の場合
        """
        customer_id = details["customer_id"]
        if self._customer_repository.find_by_id(customer_id) is None:
            raise ResourceNotFoundException(f"Customer not found: {customer_id}")
        package_id = details["package_id"]
        if (
            package_id is not None
            and self._package_repository.find_by_id(package_id) is None
        ):
            raise ResourceNotFoundException(f"Package not found: {package_id}")
        hotel_id = details["hotel_id"]
        if hotel_id is not None and self._hotel_repository.find_by_id(hotel_id) is None:
            raise ResourceNotFoundException(f"Hotel not found: {hotel_id}")

        review = self._factory.create(details)
        with self._unit_of_work:
            self._review_repository.add(review)

        logger.info(
            "Review posted",
            extra={
                "review_id": review.id.value,
                "customer_id": customer_id.value,
                "rating": review.rating.value,
            },
        )
        return review
