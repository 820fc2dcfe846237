from decimal import Decimal

import pytest

from travel.booking.domain import BookingStatus
from travel.payment.domain import PaymentStatus
from travel.shared.domain import (
    BusinessRuleViolationException,
    DuplicateResourceException,
    ResourceNotFoundException,
    ValidationException,
)


class TestCreateCustomer:
    def test_ids_start_at_one(self, agency, seed):
        assert seed["customer_id"] == 1
        assert seed["package_ids"] == [1, 2]
        assert seed["hotel_ids"] == [1, 2]

    def test_customer_is_linked_to_account(self, agency, seed):
        customer = agency.get_customer(seed["customer_id"])

        assert customer.name == "Alice"
        assert str(customer.phone) == "090-0000-0001"
        assert customer.account_id is not None

    @pytest.mark.parametrize(
        "overrides, message",
        [
            ({"username": "ALICE"}, "Username already exists"),
            ({"email": "Alice@Example.com"}, "Email already exists"),
            ({"phone": "090-0000-0001"}, "Phone already exists"),
        ],
    )
    def test_duplicate_key(self, agency, seed, scan_items, overrides, message):
        details = {
            "username": "bob",
            "password_hash": "hash",
            "email": "bob@example.com",
            "name": "Bob",
            "phone": "090-0000-0002",
            "address": None,
        }
        details.update(overrides)
        before = [item for item in scan_items() if item["PK"] != "SEQUENCE"]

        with pytest.raises(DuplicateResourceException, match=message):
            agency.create_customer(**details)

        after = [item for item in scan_items() if item["PK"] != "SEQUENCE"]
        assert after == before

    def test_invalid_input_is_validation_error(self, agency):
        with pytest.raises(ValidationException):
            agency.create_customer(
                username="carol",
                password_hash="hash",
                email="not-an-email",
                name="Carol",
                phone="090",
            )


class TestCreateBooking:
    def test_booking_has_pending_zero_payment(self, agency, seed):
        booking_id = agency.create_booking(seed["customer_id"], 2, 2)

        booking = agency.get_booking(booking_id)
        payments = agency.get_payments(booking_id)

        assert booking.status == BookingStatus.PENDING
        assert len(payments) == 1
        assert payments[0].status == PaymentStatus.PENDING
        assert payments[0].amount.amount == Decimal("0.00")

    def test_package_and_hotel_are_optional(self, agency, seed):
        booking_id = agency.create_booking(seed["customer_id"])

        booking = agency.get_booking(booking_id)

        assert booking.package_id is None
        assert booking.hotel_id is None

    @pytest.mark.parametrize(
        "args, message",
        [
            ((99, None, None), "Customer not found"),
            ((1, 99, None), "Package not found"),
            ((1, None, 99), "Hotel not found"),
        ],
    )
    def test_unknown_reference(self, agency, seed, args, message):
        with pytest.raises(ResourceNotFoundException, match=message):
            agency.create_booking(*args)

        assert agency.get_customer_booking_count(seed["customer_id"]) == 0

    def test_invalid_id_is_validation_error(self, agency, seed):
        with pytest.raises(ValidationException):
            agency.create_booking(0)


class TestCancelBooking:
    def test_cancel_fails_pending_payment(self, agency, seed):
        booking_id = agency.create_booking(seed["customer_id"], 2, 2)

        agency.cancel_booking(booking_id)

        assert agency.get_booking(booking_id).status == BookingStatus.CANCELLED
        payments = agency.get_payments(booking_id)
        assert [p.status for p in payments] == [PaymentStatus.FAILED]

    def test_cancel_twice(self, agency, seed):
        booking_id = agency.create_booking(seed["customer_id"], 1, 1)

        agency.cancel_booking(booking_id)
        agency.cancel_booking(booking_id)

        assert agency.get_booking(booking_id).status == BookingStatus.CANCELLED

    def test_cancel_unknown_booking_is_noop(self, agency, seed, scan_items):
        before = scan_items()

        assert agency.cancel_booking(99) is None

        assert scan_items() == before

    def test_cancel_confirmed_booking_keeps_completed_payment(self, agency, seed):
        booking_id = agency.create_booking(seed["customer_id"], 1)
        agency.settle_payment(booking_id, "1000")

        agency.cancel_booking(booking_id)

        assert agency.get_booking(booking_id).status == BookingStatus.CANCELLED
        assert [p.status for p in agency.get_payments(booking_id)] == [
            PaymentStatus.COMPLETED
        ]


class TestSettlePayment:
    def test_alice_scenario(self, agency, seed):
        customer_id = seed["customer_id"]
        booking_id = agency.create_booking(customer_id, 1, 1)
        assert agency.get_customer_booking_count(customer_id) == 1

        agency.settle_payment(booking_id, 50000)

        assert agency.get_booking(booking_id).status == BookingStatus.CONFIRMED
        assert agency.get_total_payment(booking_id) == Decimal("50000")
        payment = agency.get_payments(booking_id)[0]
        assert payment.status == PaymentStatus.COMPLETED

    def test_resettle_keeps_confirmed(self, agency, seed):
        booking_id = agency.create_booking(seed["customer_id"], 1)
        agency.settle_payment(booking_id, "100.00")

        agency.settle_payment(booking_id, "250.50")

        assert agency.get_booking(booking_id).status == BookingStatus.CONFIRMED
        assert agency.get_total_payment(booking_id) == Decimal("250.50")

    def test_settle_without_payment(self, agency, seed):
        with pytest.raises(ResourceNotFoundException):
            agency.settle_payment(99, 100)

    def test_negative_amount_is_validation_error(self, agency, seed):
        booking_id = agency.create_booking(seed["customer_id"])

        with pytest.raises(ValidationException):
            agency.settle_payment(booking_id, "-1")

    def test_settle_cancelled_booking_reopens(self, agency, seed):
        booking_id = agency.create_booking(seed["customer_id"], 2, 2)
        agency.cancel_booking(booking_id)

        agency.settle_payment(booking_id, 500)

        assert agency.get_booking(booking_id).status == BookingStatus.CONFIRMED
        assert [p.status for p in agency.get_payments(booking_id)] == [
            PaymentStatus.COMPLETED
        ]

    def test_settle_cancelled_booking_rejected_when_reopen_disabled(
        self, create_agency, seed, scan_items
    ):
        strict_agency = create_agency(reopen_cancelled=False)
        booking_id = strict_agency.create_booking(seed["customer_id"], 2, 2)
        strict_agency.cancel_booking(booking_id)
        before = scan_items()

        with pytest.raises(BusinessRuleViolationException):
            strict_agency.settle_payment(booking_id, 500)

        assert scan_items() == before

    def test_total_payment_without_payments_is_zero(self, agency):
        assert agency.get_total_payment(12345) == Decimal("0")
