from .account import Account
from .customer import Customer

__all__ = ["Account", "Customer"]
