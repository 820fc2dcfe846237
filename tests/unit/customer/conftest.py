import pytest

from travel.customer.domain.factory import CustomerDetails


@pytest.fixture
def create_customer_details():
    """CustomerDetails を生成する Factory fixture（Factories as fixtures パターン）"""

    def _factory(**overrides) -> CustomerDetails:
        details: CustomerDetails = {
            "username": "alice",
            "password_hash": "hashed-password",
            "email": "alice@example.com",
            "name": "Alice",
            "phone": "+81-90-1234",
            "address": "Tokyo",
        }
        details.update(overrides)
        return details

    return _factory
