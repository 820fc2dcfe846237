from .entity import Payment
from .enum import PaymentStatus
from .factory import PaymentFactory
from .repository import PaymentRepository
from .value_object import PaymentId

__all__ = [
    "Payment",
    "PaymentFactory",
    "PaymentId",
    "PaymentRepository",
    "PaymentStatus",
]
