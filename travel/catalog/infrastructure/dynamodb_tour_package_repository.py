from decimal import Decimal

from travel.catalog.domain.entity import TourPackage
from travel.catalog.domain.repository import TourPackageRepository
from travel.catalog.domain.value_object import PackageId, PackageName
from travel.shared.domain import Money
from travel.shared.domain.exception import DuplicateResourceException
from travel.shared.infrastructure import DynamoDBUnitOfWork, TravelTable, item_key


def package_key(package_id: PackageId) -> dict:
    return item_key(f"PACKAGE#{package_id}", "PROFILE")


class DynamoDBTourPackageRepository(TourPackageRepository):
    """DynamoDBを使用したTourPackageRepository の具象実装"""

    def __init__(self, table: TravelTable, unit_of_work: DynamoDBUnitOfWork) -> None:
        self._table = table
        self._unit_of_work = unit_of_work

    def add(self, package: TourPackage) -> None:
        """ツアーパッケージをDBに保存する"""
        self._unit_of_work.put(
            item={
                **package_key(package.id),
                "entity_type": "PACKAGE",
                "package_id": package.id.value,
                "package_name": str(package.name),
                "destination": package.destination,
                "price": str(package.price.amount),
                "duration": package.duration_days,
                "details": package.details,
            },
            condition="attribute_not_exists(PK)",
            on_condition_failed=lambda: DuplicateResourceException(
                f"Package already exists: {package.id}"
            ),
        )

    def find_by_id(self, package_id: PackageId) -> TourPackage | None:
        """ツアーパッケージIDで検索"""
        item = self._table.get(package_key(package_id))
        if not item:
            return None
        return self._to_entity(item)

    def _to_entity(self, item: dict) -> TourPackage:
        """DynamoDB アイテムをドメインエンティティに変換する"""
        return TourPackage(
            id=PackageId(int(item["package_id"])),
            name=PackageName(item["package_name"]),
            destination=item["destination"],
            price=Money(amount=Decimal(item["price"])),
            duration_days=int(item["duration"]),
            details=item.get("details"),
        )
