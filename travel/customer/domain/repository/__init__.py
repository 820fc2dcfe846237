from .account_repository import AccountRepository
from .customer_repository import CustomerRepository

__all__ = ["AccountRepository", "CustomerRepository"]
