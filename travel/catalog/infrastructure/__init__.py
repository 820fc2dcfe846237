from .dynamodb_hotel_repository import DynamoDBHotelRepository, hotel_key
from .dynamodb_tour_package_repository import (
    DynamoDBTourPackageRepository,
    package_key,
)

__all__ = [
    "DynamoDBHotelRepository",
    "DynamoDBTourPackageRepository",
    "hotel_key",
    "package_key",
]
