from travel.booking.domain.entity import Booking
from travel.booking.domain.repository import BookingRepository
from travel.customer.domain.entity import Customer
from travel.customer.domain.repository import AccountRepository, CustomerRepository
from travel.customer.domain.value_object import CustomerId
from travel.payment.domain.repository import PaymentRepository
from travel.review.domain.repository import ReviewRepository
from travel.shared.domain import UnitOfWork
from travel.shared.domain.exception import (
    BusinessRuleViolationException,
    ResourceNotFoundException,
)
from travel.shared.utils import get_logger

logger = get_logger("integrity")

# 1 予約あたり 予約・顧客リンク・支払いの 3 件 + 顧客の予約数更新 1 件
BOOKINGS_PER_TRANSACTION = 25


class DeleteCustomerService:
    """顧客削除ユースケース

    確定済み（CONFIRMED）の予約、またはレビューを持つ顧客は削除できない。
    削除できる場合は、予約と支払いを一定件数ずつのトランザクションで削除し
    （顧客の予約数も同じトランザクションで減らす）、
    最後に顧客とアカウントを 1 トランザクションで削除する。
    顧客の削除は予約数・レビュー数が 0 であることを条件とするため、
    途中で予約やレビューが追加された場合は OptimisticLockException となり顧客は残る。
    """

    def __init__(
        self,
        unit_of_work: UnitOfWork,
        customer_repository: CustomerRepository,
        account_repository: AccountRepository,
        booking_repository: BookingRepository,
        payment_repository: PaymentRepository,
        review_repository: ReviewRepository,
    ) -> None:
        self._unit_of_work = unit_of_work
        self._customers = customer_repository
        self._accounts = account_repository
        self._bookings = booking_repository
        self._payments = payment_repository
        self._reviews = review_repository

    def delete(self, customer_id: CustomerId) -> None:
        """顧客を削除する

        Raises:
            ResourceNotFoundException: 顧客が存在しない場合
            BusinessRuleViolationException: 確定済みの予約またはレビューがある場合
        """
        # 1. 削除できるか確認する（ここまでは何も書き込まない）
        customer = self._customers.find_by_id(customer_id)
        if customer is None:
            raise ResourceNotFoundException(f"Customer not found: {customer_id}")

        bookings = self._bookings.find_by_customer_id(customer_id)
        if any(booking.is_confirmed for booking in bookings):
            logger.warning(
                "Customer deletion rejected",
                extra={"customer_id": customer_id.value, "reason": "confirmed"},
            )
            raise BusinessRuleViolationException(
                "Cannot delete customer with active bookings"
            )
        if self._reviews.find_by_customer_id(customer_id):
            logger.warning(
                "Customer deletion rejected",
                extra={"customer_id": customer_id.value, "reason": "reviews"},
            )
            raise BusinessRuleViolationException(
                "Cannot delete customer with reviews"
            )

        # 2. 予約と支払いを分割して削除
        payment_count = 0
        for start in range(0, len(bookings), BOOKINGS_PER_TRANSACTION):
            chunk = bookings[start : start + BOOKINGS_PER_TRANSACTION]
            payment_count += self._delete_bookings(customer, chunk)

        # 3. 顧客とアカウントを削除
        account = (
            self._accounts.find_by_id(customer.account_id)
            if customer.account_id is not None
            else None
        )
        with self._unit_of_work:
            self._customers.remove(customer)
            if account is not None:
                self._accounts.remove(account)

        logger.info(
            "Customer deleted",
            extra={
                "customer_id": customer_id.value,
                "bookings": len(bookings),
                "payments": payment_count,
            },
        )

    def _delete_bookings(self, customer: Customer, bookings: list[Booking]) -> int:
        """予約とその支払いを 1 トランザクションで削除し、削除した支払い件数を返す"""
        payments = [
            payment
            for booking in bookings
            for payment in self._payments.find_by_booking_id(booking.id)
        ]
        with self._unit_of_work:
            for payment in payments:
                self._payments.remove(payment)
            for booking in bookings:
                self._bookings.remove(booking)
            self._customers.release_bookings(customer.id, len(bookings))
        return len(payments)
