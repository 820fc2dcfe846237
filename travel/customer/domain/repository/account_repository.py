from abc import abstractmethod

from travel.customer.domain.entity import Account
from travel.customer.domain.value_object import AccountId
from travel.shared.domain import Repository


class AccountRepository(Repository[Account, AccountId]):
    """アカウントリポジトリのインターフェース"""

    @abstractmethod
    def add(self, account: Account) -> None:
        """アカウントを登録する（ユーザー名・メールアドレスは一意）"""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, account_id: AccountId) -> Account | None:
        """アカウントIDで検索する"""
        raise NotImplementedError

    @abstractmethod
    def remove(self, account: Account) -> None:
        """アカウントを削除する"""
        raise NotImplementedError
