from pydantic import BaseModel, Field


class CreateBookingRequest(BaseModel):
    """予約作成リクエスト"""

    customer_id: int = Field(..., gt=0)
    package_id: int | None = Field(default=None, gt=0)
    hotel_id: int | None = Field(default=None, gt=0)


class BookingIdRequest(BaseModel):
    """予約IDのみを受け取るリクエスト（キャンセル・合計金額照会）"""

    booking_id: int = Field(..., gt=0)
