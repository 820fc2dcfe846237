from abc import abstractmethod

from travel.catalog.domain.entity import Hotel
from travel.catalog.domain.value_object import HotelId
from travel.shared.domain import Repository


class HotelRepository(Repository[Hotel, HotelId]):
    """ホテルレポジトリのインターフェース"""

    @abstractmethod
    def add(self, hotel: Hotel) -> None:
        """ホテルを登録する"""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, hotel_id: HotelId) -> Hotel | None:
        """ホテルIDで検索する"""
        raise NotImplementedError
