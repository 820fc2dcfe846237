from .hotel_repository import HotelRepository
from .tour_package_repository import TourPackageRepository

__all__ = ["HotelRepository", "TourPackageRepository"]
