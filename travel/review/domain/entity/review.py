from travel.catalog.domain.value_object import HotelId, PackageId
from travel.customer.domain.value_object import CustomerId
from travel.review.domain.value_object import Rating, ReviewId
from travel.shared.domain import AggregateRoot, IsoDateTime


class Review(AggregateRoot[ReviewId]):
    """レビュー

    顧客が投稿し、ツアーパッケージ・ホテルを任意で参照する。
    """

    def __init__(
        self,
        id: ReviewId,
        customer_id: CustomerId,
        rating: Rating,
        package_id: PackageId | None = None,
        hotel_id: HotelId | None = None,
        review_text: str | None = None,
        reviewed_at: IsoDateTime | None = None,
    ) -> None:
        super().__init__(id)
        self._customer_id = customer_id
        self._rating = rating
        self._package_id = package_id
        self._hotel_id = hotel_id
        self._review_text = review_text
        self._reviewed_at = reviewed_at or IsoDateTime.now()

    @property
    def customer_id(self) -> CustomerId:
        return self._customer_id

    @property
    def rating(self) -> Rating:
        return self._rating

    @property
    def package_id(self) -> PackageId | None:
        return self._package_id

    @property
    def hotel_id(self) -> HotelId | None:
        return self._hotel_id

    @property
    def review_text(self) -> str | None:
        return self._review_text

    @property
    def reviewed_at(self) -> IsoDateTime:
        return self._reviewed_at
