from .entity import Hotel, TourPackage
from .factory import CatalogFactory, HotelDetails, PackageDetails
from .repository import HotelRepository, TourPackageRepository
from .value_object import HotelId, HotelName, PackageId, PackageName

__all__ = [
    "CatalogFactory",
    "Hotel",
    "HotelDetails",
    "HotelId",
    "HotelName",
    "HotelRepository",
    "PackageDetails",
    "PackageId",
    "PackageName",
    "TourPackage",
    "TourPackageRepository",
]
