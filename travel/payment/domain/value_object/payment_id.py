from dataclasses import dataclass

from travel.shared.domain import SequentialId


@dataclass(frozen=True)
class PaymentId(SequentialId):
    """支払いID（Value Object）"""
