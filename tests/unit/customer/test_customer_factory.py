import pytest

from travel.customer.domain import AccountId, AccountRole, CustomerFactory, CustomerId


class TestCustomerFactory:
    def test_create_links_customer_to_account(
        self, id_generator, create_customer_details
    ):
        factory = CustomerFactory(id_generator)

        account, customer = factory.create(create_customer_details())

        assert account.id == AccountId(1)
        assert account.role == AccountRole.CUSTOMER
        assert customer.id == CustomerId(1)
        assert customer.account_id == account.id
        assert customer.name == "Alice"
        assert customer.address == "Tokyo"

    def test_invalid_value_does_not_consume_ids(
        self, id_generator, create_customer_details
    ):
        factory = CustomerFactory(id_generator)

        with pytest.raises(ValueError):
            factory.create(create_customer_details(email="not-an-email"))

        id_generator.next_id.assert_not_called()
