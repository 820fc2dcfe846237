from .entity import Account, Customer
from .enum import AccountRole
from .factory import CustomerDetails, CustomerFactory
from .repository import AccountRepository, CustomerRepository
from .value_object import AccountId, CustomerId, EmailAddress, PhoneNumber, Username

__all__ = [
    "Account",
    "AccountId",
    "AccountRepository",
    "AccountRole",
    "Customer",
    "CustomerDetails",
    "CustomerFactory",
    "CustomerId",
    "CustomerRepository",
    "EmailAddress",
    "PhoneNumber",
    "Username",
]
