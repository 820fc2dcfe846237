from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import ClassVar


@dataclass(frozen=True)
class Money:
    """金額（DECIMAL(10,2) 相当）

    小数点以下 2 桁に丸めて保持する。
    """

    CENT: ClassVar[Decimal] = Decimal("0.01")
    MAX_AMOUNT: ClassVar[Decimal] = Decimal("99999999.99")

    amount: Decimal

    def __post_init__(self) -> None:
        amount = self.amount
        if not isinstance(amount, Decimal):
            amount = Decimal(str(amount))
        if amount < 0:
            raise ValueError("Amount cannot be negative")
        amount = amount.quantize(self.CENT, rounding=ROUND_HALF_UP)
        if amount > self.MAX_AMOUNT:
            raise ValueError(f"Amount is too large (max {self.MAX_AMOUNT})")
        object.__setattr__(self, "amount", amount)

    def __str__(self) -> str:
        return str(self.amount)

    def add(self, other: Money) -> Money:
        """金額を加算する"""
        return Money(amount=self.amount + other.amount)

    @classmethod
    def zero(cls) -> Money:
        return cls(Decimal("0"))
