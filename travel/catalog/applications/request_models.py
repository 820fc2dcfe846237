from decimal import Decimal

from pydantic import BaseModel, Field, field_validator

from travel.shared.utils import to_decimal


class RegisterPackageRequest(BaseModel):
    """ツアーパッケージ登録リクエストモデル"""

    package_name: str = Field(..., min_length=1, max_length=100)
    destination: str = Field(..., min_length=1, max_length=100)
    price: Decimal = Field(
        ...,
        ge=0,
        max_digits=10,
        decimal_places=2,
        description="料金",
    )
    duration: int = Field(..., gt=0, description="日数")
    details: str | None = None

    @field_validator("price", mode="before")
    @classmethod
    def convert_price_to_decimal(cls, v: object) -> Decimal:
        return to_decimal(v)


class RegisterHotelRequest(BaseModel):
    """ホテル登録リクエストモデル"""

    hotel_name: str = Field(..., min_length=1, max_length=100)
    location: str = Field(..., min_length=1, max_length=100)
    price_per_night: Decimal = Field(
        ...,
        ge=0,
        max_digits=10,
        decimal_places=2,
        description="1泊あたりの料金",
    )
    amenities: str | None = None

    @field_validator("price_per_night", mode="before")
    @classmethod
    def convert_price_to_decimal(cls, v: object) -> Decimal:
        return to_decimal(v)


class PackageIdRequest(BaseModel):
    package_id: int = Field(..., gt=0)


class HotelIdRequest(BaseModel):
    hotel_id: int = Field(..., gt=0)
