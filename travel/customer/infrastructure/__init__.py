from .dynamodb_account_repository import DynamoDBAccountRepository
from .dynamodb_customer_repository import DynamoDBCustomerRepository, customer_key

__all__ = ["DynamoDBAccountRepository", "DynamoDBCustomerRepository", "customer_key"]
