from .account_id import AccountId
from .customer_id import CustomerId
from .email_address import EmailAddress
from .phone_number import PhoneNumber
from .username import Username

__all__ = ["AccountId", "CustomerId", "EmailAddress", "PhoneNumber", "Username"]
