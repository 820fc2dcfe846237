from decimal import Decimal
from typing import TypedDict

from travel.catalog.domain.entity import Hotel, TourPackage
from travel.catalog.domain.value_object import HotelId, HotelName, PackageId, PackageName
from travel.shared.domain import IdGenerator, Money


class PackageDetails(TypedDict):
    """ツアーパッケージの入力データ"""

    package_name: str
    destination: str
    price: Decimal
    duration: int
    details: str | None


class HotelDetails(TypedDict):
    """ホテルの入力データ"""

    hotel_name: str
    location: str
    price_per_night: Decimal
    amenities: str | None


class CatalogFactory:
    """カタログ（ツアーパッケージ・ホテル）を生成するFactory"""

    def __init__(self, id_generator: IdGenerator) -> None:
        self._id_generator = id_generator

    def create_package(self, details: PackageDetails) -> TourPackage:
        """新規ツアーパッケージを生成する"""
        name = PackageName(details["package_name"])
        price = Money(amount=details["price"])

        return TourPackage(
            id=PackageId(self._id_generator.next_id("PACKAGE")),
            name=name,
            destination=details["destination"],
            price=price,
            duration_days=details["duration"],
            details=details["details"],
        )

    def create_hotel(self, details: HotelDetails) -> Hotel:
        """新規ホテルを生成する"""
        name = HotelName(details["hotel_name"])
        price_per_night = Money(amount=details["price_per_night"])

        return Hotel(
            id=HotelId(self._id_generator.next_id("HOTEL")),
            name=name,
            location=details["location"],
            price_per_night=price_per_night,
            amenities=details["amenities"],
        )
