from travel.customer.domain.value_object import AccountId, CustomerId, PhoneNumber
from travel.shared.domain import AggregateRoot


class Customer(AggregateRoot[CustomerId]):
    """顧客エンティティ

    予約・レビューの所有者。アカウントとの紐付けは任意。
    """

    def __init__(
        self,
        id: CustomerId,
        name: str,
        phone: PhoneNumber,
        account_id: AccountId | None = None,
        address: str | None = None,
    ) -> None:
        super().__init__(id)
        if not name or len(name.strip()) == 0:
            raise ValueError("Customer name cannot be empty")
        if len(name) > 100:
            raise ValueError("Customer name is too long (max 100 characters)")
        self._name = name
        self._phone = phone
        self._account_id = account_id
        self._address = address

    @property
    def name(self) -> str:
        return self._name

    @property
    def phone(self) -> PhoneNumber:
        return self._phone

    @property
    def account_id(self) -> AccountId | None:
        return self._account_id

    @property
    def address(self) -> str | None:
        return self._address
