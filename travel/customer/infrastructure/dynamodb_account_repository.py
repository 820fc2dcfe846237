from travel.customer.domain.entity import Account
from travel.customer.domain.enum import AccountRole
from travel.customer.domain.repository import AccountRepository
from travel.customer.domain.value_object import AccountId, EmailAddress, Username
from travel.shared.domain.exception import DuplicateResourceException
from travel.shared.infrastructure import (
    DynamoDBUnitOfWork,
    TravelTable,
    item_key,
    unique_key,
)


def _account_key(account_id: AccountId) -> dict:
    return item_key(f"ACCOUNT#{account_id}", "PROFILE")


class DynamoDBAccountRepository(AccountRepository):
    """DynamoDBを使用したAccountRepository の具象実装

    ユーザー名・メールアドレスの一意性は UNIQUE# 予約アイテムの
    条件付き Put で担保する。
    """

    def __init__(self, table: TravelTable, unit_of_work: DynamoDBUnitOfWork) -> None:
        self._table = table
        self._unit_of_work = unit_of_work

    def add(self, account: Account) -> None:
        """アカウントを登録する"""
        self._unit_of_work.put(
            item={
                **_account_key(account.id),
                "entity_type": "ACCOUNT",
                "account_id": account.id.value,
                "username": str(account.username),
                "email": str(account.email),
                "password_hash": account.password_hash,
                "role": account.role.value,
            },
            condition="attribute_not_exists(PK)",
            on_condition_failed=lambda: DuplicateResourceException(
                f"Account already exists: {account.id}"
            ),
        )
        self._reserve(
            "USERNAME",
            account.username.normalized,
            account.id,
            f"Username already exists: {account.username}",
        )
        self._reserve(
            "EMAIL",
            account.email.normalized,
            account.id,
            f"Email already exists: {account.email}",
        )

    def find_by_id(self, account_id: AccountId) -> Account | None:
        """アカウントIDで検索"""
        item = self._table.get(_account_key(account_id))
        if not item:
            return None
        return self._to_entity(item)

    def remove(self, account: Account) -> None:
        """アカウントと一意制約の予約を削除する"""
        self._unit_of_work.delete(key=_account_key(account.id))
        self._unit_of_work.delete(key=unique_key("USERNAME", account.username.normalized))
        self._unit_of_work.delete(key=unique_key("EMAIL", account.email.normalized))

    def _reserve(self, kind: str, value: str, owner: AccountId, message: str) -> None:
        self._unit_of_work.put(
            item={
                **unique_key(kind, value),
                "entity_type": "UNIQUE",
                "owner": f"ACCOUNT#{owner}",
            },
            condition="attribute_not_exists(PK)",
            on_condition_failed=lambda: DuplicateResourceException(message),
        )

    def _to_entity(self, item: dict) -> Account:
        """DynamoDB アイテムをドメインエンティティに変換する"""
        return Account(
            id=AccountId(int(item["account_id"])),
            username=Username(item["username"]),
            password_hash=item["password_hash"],
            email=EmailAddress(item["email"]),
            role=AccountRole(item["role"]),
        )
