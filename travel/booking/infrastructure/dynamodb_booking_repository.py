from travel.booking.domain.entity import Booking
from travel.booking.domain.enum import BookingStatus
from travel.booking.domain.repository import BookingRepository
from travel.booking.domain.value_object import BookingId
from travel.catalog.domain.value_object import HotelId, PackageId
from travel.customer.domain.value_object import CustomerId
from travel.customer.infrastructure import customer_key
from travel.shared.domain import IsoDateTime
from travel.shared.domain.exception import (
    DuplicateResourceException,
    OptimisticLockException,
    ResourceNotFoundException,
)
from travel.shared.infrastructure import DynamoDBUnitOfWork, TravelTable, item_key


def booking_key(booking_id: BookingId) -> dict:
    return item_key(f"BOOKING#{booking_id}", "BOOKING")


def _customer_link_key(customer_id: CustomerId, booking_id: BookingId) -> dict:
    # ソートキーをゼロ埋めして予約ID順に並べる
    return item_key(f"CUSTOMER#{customer_id}", f"BOOKING#{booking_id.value:010d}")


class DynamoDBBookingRepository(BookingRepository):
    """DynamoDBを使用したBookingRepository の具象実装

    予約アイテムに加えて、顧客パーティションに予約へのリンクを書き込み、
    顧客アイテムの booking_count を同じトランザクションで加算する。
    """

    def __init__(self, table: TravelTable, unit_of_work: DynamoDBUnitOfWork) -> None:
        self._table = table
        self._unit_of_work = unit_of_work

    def add(self, booking: Booking) -> None:
        """予約を登録する"""
        self._unit_of_work.put(
            item={
                **booking_key(booking.id),
                "entity_type": "BOOKING",
                "booking_id": booking.id.value,
                "customer_id": booking.customer_id.value,
                "package_id": booking.package_id.value if booking.package_id else None,
                "hotel_id": booking.hotel_id.value if booking.hotel_id else None,
                "booking_date": str(booking.booked_at),
                "status": booking.status.value,
            },
            condition="attribute_not_exists(PK)",
            on_condition_failed=lambda: DuplicateResourceException(
                f"Booking already exists: {booking.id}"
            ),
        )
        self._unit_of_work.put(
            item={
                **_customer_link_key(booking.customer_id, booking.id),
                "entity_type": "CUSTOMER_BOOKING",
                "booking_id": booking.id.value,
            }
        )
        # 顧客が同時に削除された場合に予約が孤立しないよう、存在を条件とする
        self._unit_of_work.update(
            key=customer_key(booking.customer_id),
            update_expression="ADD booking_count :one",
            condition="attribute_exists(PK)",
            values={":one": 1},
            on_condition_failed=lambda: ResourceNotFoundException(
                f"Customer not found: {booking.customer_id}"
            ),
        )

    def find_by_id(self, booking_id: BookingId) -> Booking | None:
        """予約IDで検索"""
        item = self._table.get(booking_key(booking_id))
        if not item:
            return None
        return self._to_entity(item)

    def find_by_customer_id(self, customer_id: CustomerId) -> list[Booking]:
        """顧客パーティションのリンクから予約を取得する"""
        links = self._table.query_prefix(f"CUSTOMER#{customer_id}", "BOOKING#")
        bookings = []
        for link in links:
            booking = self.find_by_id(BookingId(int(link["booking_id"])))
            if booking is not None:
                bookings.append(booking)
        return bookings

    def count_by_customer_id(self, customer_id: CustomerId) -> int:
        """顧客アイテムの booking_count を返す（顧客が存在しなければ 0）"""
        item = self._table.get(customer_key(customer_id))
        if not item:
            return 0
        return int(item.get("booking_count", 0))

    def update(self, booking: Booking, expected_status: BookingStatus) -> None:
        """予約ステータスを更新（楽観的ロック）"""
        self._unit_of_work.update(
            key=booking_key(booking.id),
            update_expression="SET #status = :status",
            condition="attribute_exists(PK) AND #status = :expected",
            names={"#status": "status"},
            values={
                ":status": booking.status.value,
                ":expected": expected_status.value,
            },
            on_condition_failed=lambda: OptimisticLockException(
                f"Booking status conflict: expected {expected_status.value}, "
                f"booking_id={booking.id}"
            ),
        )

    def remove(self, booking: Booking) -> None:
        """予約と顧客リンクを削除する（読み取り時のステータスを条件とする）"""
        self._unit_of_work.delete(
            key=booking_key(booking.id),
            condition="#status = :expected",
            names={"#status": "status"},
            values={":expected": booking.status.value},
            on_condition_failed=lambda: OptimisticLockException(
                f"Booking changed concurrently: booking_id={booking.id}"
            ),
        )
        self._unit_of_work.delete(
            key=_customer_link_key(booking.customer_id, booking.id)
        )

    def _to_entity(self, item: dict) -> Booking:
        """DynamoDB アイテムをドメインエンティティに変換する"""
        package_id = item.get("package_id")
        hotel_id = item.get("hotel_id")
        return Booking(
            id=BookingId(int(item["booking_id"])),
            customer_id=CustomerId(int(item["customer_id"])),
            package_id=PackageId(int(package_id)) if package_id is not None else None,
            hotel_id=HotelId(int(hotel_id)) if hotel_id is not None else None,
            booked_at=IsoDateTime.from_string(item["booking_date"]),
            status=BookingStatus(item["status"]),
        )
