from travel.booking.domain.entity import Booking
from travel.booking.domain.enum import BookingStatus
from travel.booking.domain.value_object import BookingId
from travel.catalog.domain.value_object import HotelId, PackageId
from travel.customer.domain.value_object import CustomerId
from travel.shared.domain import IdGenerator, IsoDateTime


class BookingFactory:
    """予約エンティティのファクトリ

    - ID の採番
    - 初期状態（PENDING・予約日時）の設定
    """

    def __init__(self, id_generator: IdGenerator) -> None:
        self._id_generator = id_generator

    def create(
        self,
        customer_id: CustomerId,
        package_id: PackageId | None = None,
        hotel_id: HotelId | None = None,
    ) -> Booking:
        """新規予約エンティティを生成する

        Returns:
            Booking: 生成された予約エンティティ（PENDING状態）
        """
        return Booking(
            id=BookingId(self._id_generator.next_id("BOOKING")),
            customer_id=customer_id,
            package_id=package_id,
            hotel_id=hotel_id,
            booked_at=IsoDateTime.now(),
            status=BookingStatus.PENDING,
        )
