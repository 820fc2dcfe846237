from travel.catalog.domain.value_object import HotelId, HotelName
from travel.shared.domain import AggregateRoot, Money


class Hotel(AggregateRoot[HotelId]):
    """ホテル"""

    def __init__(
        self,
        id: HotelId,
        name: HotelName,
        location: str,
        price_per_night: Money,
        amenities: str | None = None,
    ) -> None:
        super().__init__(id)
        if not location or len(location.strip()) == 0:
            raise ValueError("Location cannot be empty")
        if len(location) > 100:
            raise ValueError("Location is too long (max 100 characters)")
        self._name = name
        self._location = location
        self._price_per_night = price_per_night
        self._amenities = amenities

    @property
    def name(self) -> HotelName:
        return self._name

    @property
    def location(self) -> str:
        return self._location

    @property
    def price_per_night(self) -> Money:
        return self._price_per_night

    @property
    def amenities(self) -> str | None:
        return self._amenities
