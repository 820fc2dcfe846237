from travel.catalog.domain.entity import Hotel
from travel.catalog.domain.factory import CatalogFactory, HotelDetails
from travel.catalog.domain.repository import HotelRepository
from travel.shared.domain import UnitOfWork
from travel.shared.utils import get_logger

logger = get_logger("catalog")


class RegisterHotelService:
    """ホテル登録ユースケース"""

    def __init__(
        self,
        unit_of_work: UnitOfWork,
        repository: HotelRepository,
        factory: CatalogFactory,
    ) -> None:
        self._unit_of_work = unit_of_work
        self._repository = repository
        self._factory = factory

    def register(self, details: HotelDetails) -> Hotel:
        """ホテルを登録する"""
        hotel = self._factory.create_hotel(details)
        with self._unit_of_work:
            self._repository.add(hotel)
        logger.info("Hotel registered", extra={"hotel_id": hotel.id.value})
        return hotel
