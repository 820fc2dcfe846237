from travel.booking.domain.entity import Booking
from travel.booking.domain.factory import BookingFactory
from travel.booking.domain.repository import BookingRepository
from travel.catalog.domain.repository import HotelRepository, TourPackageRepository
from travel.catalog.domain.value_object import HotelId, PackageId
from travel.customer.domain.repository import CustomerRepository
from travel.customer.domain.value_object import CustomerId
from travel.payment.domain.factory import PaymentFactory
from travel.payment.domain.repository import PaymentRepository
from travel.shared.domain import UnitOfWork
from travel.shared.domain.exception import ResourceNotFoundException
from travel.shared.utils import get_logger

logger = get_logger("booking")


class CreateBookingService:
    """予約作成ユースケース

    予約（PENDING）と金額 0 の支払いプレースホルダを同一トランザクションで登録する。
    """

    def __init__(
        self,
        unit_of_work: UnitOfWork,
        booking_repository: BookingRepository,
        payment_repository: PaymentRepository,
        customer_repository: CustomerRepository,
        package_repository: TourPackageRepository,
        hotel_repository: HotelRepository,
        booking_factory: BookingFactory,
        payment_factory: PaymentFactory,
    ) -> None:
        self._unit_of_work = unit_of_work
        self._booking_repository = booking_repository
        self._payment_repository = payment_repository
        self._customer_repository = customer_repository
        self._package_repository = package_repository
        self._hotel_repository = hotel_repository
        self._booking_factory = booking_factory
        self._payment_factory = payment_factory

    def create(
        self,
        customer_id: CustomerId,
        package_id: PackageId | None = None,
        hotel_id: HotelId | None = None,
    ) -> Booking:
        """予約を作成する

        Raises:
            ResourceNotFoundException: 顧客・パッケージ・ホテルが存在しない場合
        """
        # 1. 参照先の存在確認
        if self._customer_repository.find_by_id(customer_id) is None:
            raise ResourceNotFoundException(f"Customer not found: {customer_id}")
        if (
            package_id is not None
            and self._package_repository.find_by_id(package_id) is None
        ):
            raise ResourceNotFoundException(f"Package not found: {package_id}")
        if hotel_id is not None and self._hotel_repository.find_by_id(hotel_id) is None:
            raise ResourceNotFoundException(f"Hotel not found: {hotel_id}")

        # 2. Factory でエンティティを生成
        booking = self._booking_factory.create(customer_id, package_id, hotel_id)
        payment = self._payment_factory.create_placeholder(booking.id)

        # 3. 予約と支払いをまとめて永続化
        with self._unit_of_work:
            self._booking_repository.add(booking)
            self._payment_repository.add(payment)

        logger.info(
            "Booking created",
            extra={
                "booking_id": booking.id.value,
                "customer_id": customer_id.value,
                "payment_id": payment.id.value,
            },
        )
        return booking
