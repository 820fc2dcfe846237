from travel.customer.domain.entity import Customer
from travel.customer.domain.repository import CustomerRepository
from travel.customer.domain.value_object import AccountId, CustomerId, PhoneNumber
from travel.shared.domain.exception import (
    DuplicateResourceException,
    OptimisticLockException,
)
from travel.shared.infrastructure import (
    DynamoDBUnitOfWork,
    TravelTable,
    item_key,
    unique_key,
)


def customer_key(customer_id: CustomerId) -> dict:
    return item_key(f"CUSTOMER#{customer_id}", "PROFILE")


class DynamoDBCustomerRepository(CustomerRepository):
    """DynamoDBを使用したCustomerRepository の具象実装

    顧客アイテムは予約数（booking_count）とレビュー数（review_count）を持ち、
    予約・レビューの登録時に同じトランザクション内で加算される。
    """

    def __init__(self, table: TravelTable, unit_of_work: DynamoDBUnitOfWork) -> None:
        self._table = table
        self._unit_of_work = unit_of_work

    def add(self, customer: Customer) -> None:
        """顧客を登録する"""
        self._unit_of_work.put(
            item={
                **customer_key(customer.id),
                "entity_type": "CUSTOMER",
                "customer_id": customer.id.value,
                "account_id": customer.account_id.value if customer.account_id else None,
                "name": customer.name,
                "phone": str(customer.phone),
                "address": customer.address,
                "booking_count": 0,
                "review_count": 0,
            },
            condition="attribute_not_exists(PK)",
            on_condition_failed=lambda: DuplicateResourceException(
                f"Customer already exists: {customer.id}"
            ),
        )
        self._unit_of_work.put(
            item={
                **unique_key("PHONE", str(customer.phone)),
                "entity_type": "UNIQUE",
                "owner": f"CUSTOMER#{customer.id}",
            },
            condition="attribute_not_exists(PK)",
            on_condition_failed=lambda: DuplicateResourceException(
                f"Phone already exists: {customer.phone}"
            ),
        )

    def find_by_id(self, customer_id: CustomerId) -> Customer | None:
        """顧客IDで検索"""
        item = self._table.get(customer_key(customer_id))
        if not item:
            return None
        return self._to_entity(item)

    def release_bookings(self, customer_id: CustomerId, count: int) -> None:
        """予約数を減らす"""
        self._unit_of_work.update(
            key=customer_key(customer_id),
            update_expression="ADD booking_count :delta",
            condition="attribute_exists(PK) AND booking_count >= :count",
            values={":delta": -count, ":count": count},
            on_condition_failed=lambda: OptimisticLockException(
                f"Customer records changed concurrently: customer_id={customer_id}"
            ),
        )

    def remove(self, customer: Customer) -> None:
        """顧客と電話番号の予約を削除する（予約・レビューが残っていないことが条件）"""
        self._unit_of_work.delete(
            key=customer_key(customer.id),
            condition="booking_count = :zero AND review_count = :zero",
            values={":zero": 0},
            on_condition_failed=lambda: OptimisticLockException(
                f"Customer records changed concurrently: customer_id={customer.id}"
            ),
        )
        self._unit_of_work.delete(key=unique_key("PHONE", str(customer.phone)))

    def _to_entity(self, item: dict) -> Customer:
        """DynamoDB アイテムをドメインエンティティに変換する"""
        account_id = item.get("account_id")
        return Customer(
            id=CustomerId(int(item["customer_id"])),
            name=item["name"],
            phone=PhoneNumber(item["phone"]),
            account_id=AccountId(int(account_id)) if account_id is not None else None,
            address=item.get("address"),
        )
