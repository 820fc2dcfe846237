from pydantic import BaseModel, Field


class PostReviewRequest(BaseModel):
    """レビュー投稿リクエストモデル"""

    customer_id: int = Field(..., gt=0)
    rating: int = Field(..., ge=1, le=5, description="評価（1〜5）")
    package_id: int | None = Field(default=None, gt=0)
    hotel_id: int | None = Field(default=None, gt=0)
    review_text: str | None = None
