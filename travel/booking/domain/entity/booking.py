from travel.booking.domain.enum import BookingStatus
from travel.booking.domain.value_object import BookingId
from travel.catalog.domain.value_object import HotelId, PackageId
from travel.customer.domain.value_object import CustomerId
from travel.shared.domain import AggregateRoot, IsoDateTime
from travel.shared.domain.exception import BusinessRuleViolationException


class Booking(AggregateRoot[BookingId]):
    """予約エンティティ

    顧客が所有し、ツアーパッケージ・ホテルを任意で参照する。
    ステータスは決済の確定（confirm）とキャンセル（cancel）でのみ遷移する。
    """

    def __init__(
        self,
        id: BookingId,
        customer_id: CustomerId,
        package_id: PackageId | None = None,
        hotel_id: HotelId | None = None,
        booked_at: IsoDateTime | None = None,
        status: BookingStatus = BookingStatus.PENDING,
    ) -> None:
        super().__init__(id)
        self._customer_id = customer_id
        self._package_id = package_id
        self._hotel_id = hotel_id
        self._booked_at = booked_at or IsoDateTime.now()
        self._status = status

    @property
    def customer_id(self) -> CustomerId:
        return self._customer_id

    @property
    def package_id(self) -> PackageId | None:
        return self._package_id

    @property
    def hotel_id(self) -> HotelId | None:
        return self._hotel_id

    @property
    def booked_at(self) -> IsoDateTime:
        return self._booked_at

    @property
    def status(self) -> BookingStatus:
        return self._status

    @property
    def is_confirmed(self) -> bool:
        return self._status == BookingStatus.CONFIRMED

    def confirm(self, reopen_cancelled: bool = True) -> None:
        """予約を確定する（決済完了に連動）

        reopen_cancelled が True の場合、キャンセル済みの予約も確定に戻す。
        """
        if self._status == BookingStatus.CANCELLED and not reopen_cancelled:
            raise BusinessRuleViolationException("Cannot confirm a cancelled booking")
        self._status = BookingStatus.CONFIRMED

    def cancel(self) -> None:
        """予約をキャンセルする（キャンセル済みなら何もしない）"""
        if self._status == BookingStatus.CANCELLED:
            return
        self._status = BookingStatus.CANCELLED
