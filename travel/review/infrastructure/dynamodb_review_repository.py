from travel.catalog.domain.value_object import HotelId, PackageId
from travel.customer.domain.value_object import CustomerId
from travel.customer.infrastructure import customer_key
from travel.review.domain.entity import Review
from travel.review.domain.repository import ReviewRepository
from travel.review.domain.value_object import Rating, ReviewId
from travel.shared.domain import IsoDateTime
from travel.shared.domain.exception import (
    DuplicateResourceException,
    ResourceNotFoundException,
)
from travel.shared.infrastructure import DynamoDBUnitOfWork, TravelTable, item_key


def review_key(review_id: ReviewId) -> dict:
    return item_key(f"REVIEW#{review_id}", "REVIEW")


def _link_keys(review: Review) -> list[dict]:
    """レビューを参照するリンクアイテム（顧客・パッケージ・ホテル）のキー"""
    sort_key = f"REVIEW#{review.id.value:010d}"
    keys = [item_key(f"CUSTOMER#{review.customer_id}", sort_key)]
    if review.package_id is not None:
        keys.append(item_key(f"PACKAGE#{review.package_id}", sort_key))
    if review.hotel_id is not None:
        keys.append(item_key(f"HOTEL#{review.hotel_id}", sort_key))
    return keys


class DynamoDBReviewRepository(ReviewRepository):
    """DynamoDBを使用したReviewRepository の具象実装

    リンクアイテムは評価を持つため、ホテルの平均評価はホテルのパーティションだけで求められる。
    """

    def __init__(self, table: TravelTable, unit_of_work: DynamoDBUnitOfWork) -> None:
        self._table = table
        self._unit_of_work = unit_of_work

    def add(self, review: Review) -> None:
        """レビューを登録する"""
        self._unit_of_work.put(
            item={
                **review_key(review.id),
                "entity_type": "REVIEW",
                "review_id": review.id.value,
                "customer_id": review.customer_id.value,
                "package_id": review.package_id.value if review.package_id else None,
                "hotel_id": review.hotel_id.value if review.hotel_id else None,
                "rating": review.rating.value,
                "review_text": review.review_text,
                "review_date": str(review.reviewed_at),
            },
            condition="attribute_not_exists(PK)",
            on_condition_failed=lambda: DuplicateResourceException(
                f"Review already exists: {review.id}"
            ),
        )
        for key in _link_keys(review):
            self._unit_of_work.put(
                item={
                    **key,
                    "entity_type": "REVIEW_LINK",
                    "review_id": review.id.value,
                    "rating": review.rating.value,
                }
            )
        self._unit_of_work.update(
            key=customer_key(review.customer_id),
            update_expression="ADD review_count :one",
            condition="attribute_exists(PK)",
            values={":one": 1},
            on_condition_failed=lambda: ResourceNotFoundException(
                f"Customer not found: {review.customer_id}"
            ),
        )

    def find_by_id(self, review_id: ReviewId) -> Review | None:
        item = self._table.get(review_key(review_id))
        if not item:
            return None
        return self._to_entity(item)

    def find_by_customer_id(self, customer_id: CustomerId) -> list[Review]:
        links = self._table.query_prefix(f"CUSTOMER#{customer_id}", "REVIEW#")
        reviews = []
        for link in links:
            review = self.find_by_id(ReviewId(int(link["review_id"])))
            if review is not None:
                reviews.append(review)
        return reviews

    def find_ratings_by_hotel_id(self, hotel_id: HotelId) -> list[Rating]:
        links = self._table.query_prefix(f"HOTEL#{hotel_id}", "REVIEW#")
        return [Rating(int(link["rating"])) for link in links]

    def _to_entity(self, item: dict) -> Review:
        """DynamoDB アイテムをドメインエンティティに変換する"""
        package_id = item.get("package_id")
        hotel_id = item.get("hotel_id")
        return Review(
            id=ReviewId(int(item["review_id"])),
            customer_id=CustomerId(int(item["customer_id"])),
            rating=Rating(int(item["rating"])),
            package_id=PackageId(int(package_id)) if package_id is not None else None,
            hotel_id=HotelId(int(hotel_id)) if hotel_id is not None else None,
            review_text=item.get("review_text"),
            reviewed_at=IsoDateTime.from_string(item["review_date"]),
        )
