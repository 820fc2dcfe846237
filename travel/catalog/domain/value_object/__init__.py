from .catalog_name import HotelName, PackageName
from .hotel_id import HotelId
from .package_id import PackageId

__all__ = ["HotelId", "HotelName", "PackageId", "PackageName"]
