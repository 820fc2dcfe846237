from .catalog_factory import CatalogFactory, HotelDetails, PackageDetails

__all__ = ["CatalogFactory", "HotelDetails", "PackageDetails"]
