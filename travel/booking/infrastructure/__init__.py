from .dynamodb_booking_repository import DynamoDBBookingRepository, booking_key

__all__ = ["DynamoDBBookingRepository", "booking_key"]
