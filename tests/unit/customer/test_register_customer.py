from unittest.mock import MagicMock

import pytest

from travel.customer.applications.register_customer import RegisterCustomerService
from travel.customer.domain import Customer, CustomerFactory
from travel.shared.domain import DuplicateResourceException


class TestRegisterCustomerService:
    @pytest.fixture
    def account_repository(self):
        return MagicMock()

    @pytest.fixture
    def customer_repository(self):
        return MagicMock()

    @pytest.fixture
    def service(
        self, mock_unit_of_work, account_repository, customer_repository, id_generator
    ):
        return RegisterCustomerService(
            unit_of_work=mock_unit_of_work,
            account_repository=account_repository,
            customer_repository=customer_repository,
            factory=CustomerFactory(id_generator),
        )

    def test_register_adds_account_and_customer_in_one_unit_of_work(
        self,
        service,
        mock_unit_of_work,
        account_repository,
        customer_repository,
        create_customer_details,
    ):
        customer = service.register(create_customer_details())

        assert isinstance(customer, Customer)
        mock_unit_of_work.__enter__.assert_called_once()
        mock_unit_of_work.__exit__.assert_called_once()
        account_repository.add.assert_called_once()
        customer_repository.add.assert_called_once_with(customer)
        account = account_repository.add.call_args[0][0]
        assert customer.account_id == account.id

    def test_duplicate_is_propagated(
        self, service, mock_unit_of_work, create_customer_details
    ):
        mock_unit_of_work.__exit__.side_effect = DuplicateResourceException(
            "Username already exists: alice"
        )

        with pytest.raises(DuplicateResourceException):
            service.register(create_customer_details())
