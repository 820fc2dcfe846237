from decimal import Decimal

from travel.catalog.domain.entity import Hotel
from travel.catalog.domain.repository import HotelRepository
from travel.catalog.domain.value_object import HotelId, HotelName
from travel.shared.domain import Money
from travel.shared.domain.exception import DuplicateResourceException
from travel.shared.infrastructure import DynamoDBUnitOfWork, TravelTable, item_key


def hotel_key(hotel_id: HotelId) -> dict:
    return item_key(f"HOTEL#{hotel_id}", "PROFILE")


class DynamoDBHotelRepository(HotelRepository):
    """DynamoDBを使用したHotelRepository の具象実装"""

    def __init__(self, table: TravelTable, unit_of_work: DynamoDBUnitOfWork) -> None:
        self._table = table
        self._unit_of_work = unit_of_work

    def add(self, hotel: Hotel) -> None:
        """ホテルをDBに保存する"""
        self._unit_of_work.put(
            item={
                **hotel_key(hotel.id),
                "entity_type": "HOTEL",
                "hotel_id": hotel.id.value,
                "hotel_name": str(hotel.name),
                "location": hotel.location,
                "price_per_night": str(hotel.price_per_night.amount),
                "amenities": hotel.amenities,
            },
            condition="attribute_not_exists(PK)",
            on_condition_failed=lambda: DuplicateResourceException(
                f"Hotel already exists: {hotel.id}"
            ),
        )

    def find_by_id(self, hotel_id: HotelId) -> Hotel | None:
        """ホテルIDで検索"""
        item = self._table.get(hotel_key(hotel_id))
        if not item:
            return None
        return self._to_entity(item)

    def _to_entity(self, item: dict) -> Hotel:
        """DynamoDB アイテムをドメインエンティティに変換する"""
        return Hotel(
            id=HotelId(int(item["hotel_id"])),
            name=HotelName(item["hotel_name"]),
            location=item["location"],
            price_per_night=Money(amount=Decimal(item["price_per_night"])),
            amenities=item.get("amenities"),
        )
