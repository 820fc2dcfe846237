from travel.catalog.domain.value_object import PackageId, PackageName
from travel.shared.domain import AggregateRoot, Money


class TourPackage(AggregateRoot[PackageId]):
    """ツアーパッケージ"""

    def __init__(
        self,
        id: PackageId,
        name: PackageName,
        destination: str,
        price: Money,
        duration_days: int,
        details: str | None = None,
    ) -> None:
        super().__init__(id)
        if not destination or len(destination.strip()) == 0:
            raise ValueError("Destination cannot be empty")
        if len(destination) > 100:
            raise ValueError("Destination is too long (max 100 characters)")
        if duration_days <= 0:
            raise ValueError("Duration must be at least 1 day")
        self._name = name
        self._destination = destination
        self._price = price
        self._duration_days = duration_days
        self._details = details

    @property
    def name(self) -> PackageName:
        return self._name

    @property
    def destination(self) -> str:
        return self._destination

    @property
    def price(self) -> Money:
        return self._price

    @property
    def duration_days(self) -> int:
        return self._duration_days

    @property
    def details(self) -> str | None:
        return self._details
