from decimal import Decimal

from pydantic import BaseModel, Field, field_validator

from travel.shared.utils import to_decimal


class SettlePaymentRequest(BaseModel):
    """決済リクエスト"""

    booking_id: int = Field(..., gt=0)
    amount: Decimal = Field(..., ge=0, max_digits=10, decimal_places=2)

    @field_validator("amount", mode="before")
    @classmethod
    def convert_amount_to_decimal(cls, v: object) -> Decimal:
        return to_decimal(v)
