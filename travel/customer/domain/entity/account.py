from travel.customer.domain.enum import AccountRole
from travel.customer.domain.value_object import AccountId, EmailAddress, Username
from travel.shared.domain import AggregateRoot


class Account(AggregateRoot[AccountId]):
    """ログインアカウント

    パスワードはハッシュ済みの値のみを保持する。
    """

    def __init__(
        self,
        id: AccountId,
        username: Username,
        password_hash: str,
        email: EmailAddress,
        role: AccountRole = AccountRole.CUSTOMER,
    ) -> None:
        super().__init__(id)
        if not password_hash:
            raise ValueError("Password hash cannot be empty")
        self._username = username
        self._password_hash = password_hash
        self._email = email
        self._role = role

    @property
    def username(self) -> Username:
        return self._username

    @property
    def password_hash(self) -> str:
        return self._password_hash

    @property
    def email(self) -> EmailAddress:
        return self._email

    @property
    def role(self) -> AccountRole:
        return self._role

    @property
    def is_admin(self) -> bool:
        return self._role == AccountRole.ADMIN
