from .dynamodb_payment_repository import DynamoDBPaymentRepository, payment_key

__all__ = ["DynamoDBPaymentRepository", "payment_key"]
