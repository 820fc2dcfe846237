from enum import Enum


class PaymentStatus(str, Enum):
    """支払いステータス"""

    PENDING = "Pending"
    FAILED = "Failed"
    COMPLETED = "Completed"
