from enum import Enum


class AccountRole(str, Enum):
    """アカウント権限"""

    ADMIN = "Admin"
    CUSTOMER = "Customer"
