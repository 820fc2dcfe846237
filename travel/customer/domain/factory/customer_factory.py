from typing import TypedDict

from travel.customer.domain.entity import Account, Customer
from travel.customer.domain.enum import AccountRole
from travel.customer.domain.value_object import (
    AccountId,
    CustomerId,
    EmailAddress,
    PhoneNumber,
    Username,
)
from travel.shared.domain import IdGenerator


class CustomerDetails(TypedDict):
    """顧客登録の入力データ構造"""

    username: str
    password_hash: str
    email: str
    name: str
    phone: str
    address: str | None


class CustomerFactory:
    """アカウントと顧客をまとめて生成するファクトリ

    - プリミティブ型から Value Object への変換
    - ID の採番（値の検証が通ってから行う）
    """

    def __init__(self, id_generator: IdGenerator) -> None:
        self._id_generator = id_generator

    def create(self, details: CustomerDetails) -> tuple[Account, Customer]:
        """顧客ロールのアカウントと、それに紐づく顧客を生成する"""
        username = Username(details["username"])
        email = EmailAddress(details["email"])
        phone = PhoneNumber(details["phone"])

        account = Account(
            id=AccountId(self._id_generator.next_id("ACCOUNT")),
            username=username,
            password_hash=details["password_hash"],
            email=email,
            role=AccountRole.CUSTOMER,
        )
        customer = Customer(
            id=CustomerId(self._id_generator.next_id("CUSTOMER")),
            name=details["name"],
            phone=phone,
            account_id=account.id,
            address=details["address"],
        )
        return account, customer
