from pydantic import BaseModel, Field


class RegisterCustomerRequest(BaseModel):
    """顧客登録リクエストモデル"""

    username: str = Field(..., min_length=1, max_length=50)
    password_hash: str = Field(
        ...,
        min_length=1,
        max_length=255,
        description="ハッシュ化済みパスワード",
    )
    email: str = Field(
        ...,
        max_length=100,
        pattern=r"^[\w\.+-]+@[\w\.-]+\.\w+$",
        description="メールアドレス",
    )
    name: str = Field(..., min_length=1, max_length=100)
    phone: str = Field(..., min_length=1, max_length=15, description="電話番号")
    address: str | None = None


class CustomerIdRequest(BaseModel):
    """顧客IDのみを受け取るリクエスト"""

    customer_id: int = Field(..., gt=0)
