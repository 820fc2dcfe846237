from __future__ import annotations

from decimal import Decimal
from typing import Any

from travel.booking.applications.cancel_booking import CancelBookingService
from travel.booking.applications.create_booking import CreateBookingService
from travel.booking.applications.request_models import (
    BookingIdRequest,
    CreateBookingRequest,
)
from travel.booking.domain import Booking, BookingFactory, BookingId
from travel.booking.infrastructure import DynamoDBBookingRepository
from travel.catalog.applications.register_hotel import RegisterHotelService
from travel.catalog.applications.register_package import RegisterPackageService
from travel.catalog.applications.request_models import (
    HotelIdRequest,
    PackageIdRequest,
    RegisterHotelRequest,
    RegisterPackageRequest,
)
from travel.catalog.domain import CatalogFactory, Hotel, HotelId, PackageId, TourPackage
from travel.catalog.infrastructure import (
    DynamoDBHotelRepository,
    DynamoDBTourPackageRepository,
)
from travel.customer.applications.register_customer import RegisterCustomerService
from travel.customer.applications.request_models import (
    CustomerIdRequest,
    RegisterCustomerRequest,
)
from travel.customer.domain import Customer, CustomerFactory, CustomerId
from travel.customer.infrastructure import (
    DynamoDBAccountRepository,
    DynamoDBCustomerRepository,
)
from travel.integrity.applications.customer_booking_count import (
    CustomerBookingCountService,
)
from travel.integrity.applications.delete_customer import DeleteCustomerService
from travel.integrity.applications.hotel_rating import HotelRatingService
from travel.payment.applications.request_models import SettlePaymentRequest
from travel.payment.applications.settle_payment import SettlePaymentService
from travel.payment.applications.total_payment import TotalPaymentService
from travel.payment.domain import Payment, PaymentFactory
from travel.payment.infrastructure import DynamoDBPaymentRepository
from travel.review.applications.post_review import PostReviewService
from travel.review.applications.request_models import PostReviewRequest
from travel.review.domain import ReviewFactory
from travel.review.infrastructure import DynamoDBReviewRepository
from travel.shared.config import Settings
from travel.shared.domain import Money
from travel.shared.infrastructure import (
    DynamoDBIdGenerator,
    DynamoDBUnitOfWork,
    TravelTable,
)
from travel.shared.utils import parse_request


class TravelAgency:
    """旅行予約システムの操作窓口

    プリミティブ型の入力をリクエストモデルで検証し、各ユースケースに委譲する。
    全てのリポジトリは同じ UnitOfWork を共有するため、
    1 つの操作の書き込みは 1 トランザクションにまとまる。
    """

    def __init__(self, settings: Settings) -> None:
        self._settings = settings
        table = TravelTable(
            table_name=settings.table_name,
            endpoint_url=settings.endpoint_url,
            region_name=settings.region_name,
        )
        unit_of_work = DynamoDBUnitOfWork(table)
        id_generator = DynamoDBIdGenerator(table)

        self._accounts = DynamoDBAccountRepository(table, unit_of_work)
        self._customers = DynamoDBCustomerRepository(table, unit_of_work)
        self._packages = DynamoDBTourPackageRepository(table, unit_of_work)
        self._hotels = DynamoDBHotelRepository(table, unit_of_work)
        self._bookings = DynamoDBBookingRepository(table, unit_of_work)
        self._payments = DynamoDBPaymentRepository(table, unit_of_work)
        self._reviews = DynamoDBReviewRepository(table, unit_of_work)

        catalog_factory = CatalogFactory(id_generator)
        self._register_customer = RegisterCustomerService(
            unit_of_work=unit_of_work,
            account_repository=self._accounts,
            customer_repository=self._customers,
            factory=CustomerFactory(id_generator),
        )
        self._register_package = RegisterPackageService(
            unit_of_work=unit_of_work,
            repository=self._packages,
            factory=catalog_factory,
        )
        self._register_hotel = RegisterHotelService(
            unit_of_work=unit_of_work,
            repository=self._hotels,
            factory=catalog_factory,
        )
        self._create_booking = CreateBookingService(
            unit_of_work=unit_of_work,
            booking_repository=self._bookings,
            payment_repository=self._payments,
            customer_repository=self._customers,
            package_repository=self._packages,
            hotel_repository=self._hotels,
            booking_factory=BookingFactory(id_generator),
            payment_factory=PaymentFactory(id_generator),
        )
        self._cancel_booking = CancelBookingService(
            unit_of_work=unit_of_work,
            booking_repository=self._bookings,
            payment_repository=self._payments,
        )
        self._settle_payment = SettlePaymentService(
            unit_of_work=unit_of_work,
            booking_repository=self._bookings,
            payment_repository=self._payments,
            reopen_cancelled=settings.reopen_cancelled_on_settlement,
        )
        self._total_payment = TotalPaymentService(self._payments)
        self._post_review = PostReviewService(
            unit_of_work=unit_of_work,
            review_repository=self._reviews,
            customer_repository=self._customers,
            package_repository=self._packages,
            hotel_repository=self._hotels,
            factory=ReviewFactory(id_generator),
        )
        self._delete_customer = DeleteCustomerService(
            unit_of_work=unit_of_work,
            customer_repository=self._customers,
            account_repository=self._accounts,
            booking_repository=self._bookings,
            payment_repository=self._payments,
            review_repository=self._reviews,
        )
        self._booking_count = CustomerBookingCountService(self._bookings)
        self._hotel_rating = HotelRatingService(self._reviews)

    @classmethod
    def from_env(cls) -> TravelAgency:
        return cls(Settings.from_env())

    # --- Booking Lifecycle ---

    def create_customer(
        self,
        username: str,
        password_hash: str,
        email: str,
        name: str,
        phone: str,
        address: str | None = None,
    ) -> int:
        """アカウント（Customer ロール）と顧客を登録し、顧客IDを返す"""
        request = parse_request(
            RegisterCustomerRequest,
            username=username,
            password_hash=password_hash,
            email=email,
            name=name,
            phone=phone,
            address=address,
        )
        customer = self._register_customer.register(
            {
                "username": request.username,
                "password_hash": request.password_hash,
                "email": request.email,
                "name": request.name,
                "phone": request.phone,
                "address": request.address,
            }
        )
        return customer.id.value

    def create_booking(
        self,
        customer_id: int,
        package_id: int | None = None,
        hotel_id: int | None = None,
    ) -> int:
        """予約と支払いプレースホルダを作成し、予約IDを返す"""
        request = parse_request(
            CreateBookingRequest,
            customer_id=customer_id,
            package_id=package_id,
            hotel_id=hotel_id,
        )
        booking = self._create_booking.create(
            CustomerId(request.customer_id),
            PackageId(request.package_id) if request.package_id else None,
            HotelId(request.hotel_id) if request.hotel_id else None,
        )
        return booking.id.value

    def cancel_booking(self, booking_id: int) -> None:
        request = parse_request(BookingIdRequest, booking_id=booking_id)
        self._cancel_booking.cancel(BookingId(request.booking_id))

    # --- Payment Settlement ---

    def settle_payment(self, booking_id: int, amount: Any) -> None:
        """予約の支払いを確定し、予約を CONFIRMED にする"""
        request = parse_request(
            SettlePaymentRequest, booking_id=booking_id, amount=amount
        )
        self._settle_payment.settle(
            BookingId(request.booking_id), Money(amount=request.amount)
        )

    def get_total_payment(self, booking_id: int) -> Decimal:
        request = parse_request(BookingIdRequest, booking_id=booking_id)
        return self._total_payment.total(BookingId(request.booking_id))

    # --- Integrity Guard ---

    def delete_customer(self, customer_id: int) -> None:
        request = parse_request(CustomerIdRequest, customer_id=customer_id)
        self._delete_customer.delete(CustomerId(request.customer_id))

    def get_customer_booking_count(self, customer_id: int) -> int:
        request = parse_request(CustomerIdRequest, customer_id=customer_id)
        return self._booking_count.count(CustomerId(request.customer_id))

    def get_avg_hotel_rating(self, hotel_id: int) -> Decimal:
        request = parse_request(HotelIdRequest, hotel_id=hotel_id)
        return self._hotel_rating.average(HotelId(request.hotel_id))

    # --- Catalog / Reviews ---

    def register_package(
        self,
        name: str,
        destination: str,
        price: Any,
        duration: int,
        details: str | None = None,
    ) -> int:
        request = parse_request(
            RegisterPackageRequest,
            package_name=name,
            destination=destination,
            price=price,
            duration=duration,
            details=details,
        )
        package = self._register_package.register(
            {
                "package_name": request.package_name,
                "destination": request.destination,
                "price": request.price,
                "duration": request.duration,
                "details": request.details,
            }
        )
        return package.id.value

    def register_hotel(
        self,
        name: str,
        location: str,
        price_per_night: Any,
        amenities: str | None = None,
    ) -> int:
        request = parse_request(
            RegisterHotelRequest,
            hotel_name=name,
            location=location,
            price_per_night=price_per_night,
            amenities=amenities,
        )
        hotel = self._register_hotel.register(
            {
                "hotel_name": request.hotel_name,
                "location": request.location,
                "price_per_night": request.price_per_night,
                "amenities": request.amenities,
            }
        )
        return hotel.id.value

    def post_review(
        self,
        customer_id: int,
        rating: int,
        package_id: int | None = None,
        hotel_id: int | None = None,
        review_text: str | None = None,
    ) -> int:
        """レビューを投稿し、レビューIDを返す（評価は 1〜5）"""
        request = parse_request(
            PostReviewRequest,
            customer_id=customer_id,
            rating=rating,
            package_id=package_id,
            hotel_id=hotel_id,
            review_text=review_text,
        )
        review = self._post_review.post(
            {
                "customer_id": CustomerId(request.customer_id),
                "rating": request.rating,
                "package_id": (
                    PackageId(request.package_id) if request.package_id else None
                ),
                "hotel_id": HotelId(request.hotel_id) if request.hotel_id else None,
                "review_text": request.review_text,
            }
        )
        return review.id.value

    # --- Read accessors ---

    def get_customer(self, customer_id: int) -> Customer | None:
        request = parse_request(CustomerIdRequest, customer_id=customer_id)
        return self._customers.find_by_id(CustomerId(request.customer_id))

    def get_booking(self, booking_id: int) -> Booking | None:
        request = parse_request(BookingIdRequest, booking_id=booking_id)
        return self._bookings.find_by_id(BookingId(request.booking_id))

    def get_payments(self, booking_id: int) -> list[Payment]:
        request = parse_request(BookingIdRequest, booking_id=booking_id)
        return self._payments.find_by_booking_id(BookingId(request.booking_id))

    def get_package(self, package_id: int) -> TourPackage | None:
        request = parse_request(PackageIdRequest, package_id=package_id)
        return self._packages.find_by_id(PackageId(request.package_id))

    def get_hotel(self, hotel_id: int) -> Hotel | None:
        request = parse_request(HotelIdRequest, hotel_id=hotel_id)
        return self._hotels.find_by_id(HotelId(request.hotel_id))
