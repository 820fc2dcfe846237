from decimal import Decimal, InvalidOperation
from typing import Any, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from travel.shared.domain.exception import ValidationException

RequestT = TypeVar("RequestT", bound=BaseModel)


def to_decimal(v: object) -> Decimal:
    """任意の値を Decimal に変換する

    Pydantic の field_validator (mode="before") から呼び出すことを想定。
    すでに Decimal の場合はそのまま返し、それ以外は str 経由で変換する。
    float を直接 Decimal にすると 2 進誤差が残るため str を経由する。
    """
    if isinstance(v, Decimal):
        return v
    try:
        return Decimal(str(v))
    except InvalidOperation as e:
        raise ValueError(f"Invalid decimal value: {v!r}") from e


def parse_request(model: type[RequestT], **data: Any) -> RequestT:
    """リクエストモデルで入力を検証する

    Pydantic の ValidationError を ValidationException に変換し、
    違反したフィールド名をメッセージに含める。
    """
    try:
        return model.model_validate(data)
    except PydanticValidationError as e:
        violations = "; ".join(
            f"{'.'.join(str(loc) for loc in error['loc'])}: {error['msg']}"
            for error in e.errors()
        )
        raise ValidationException(f"Invalid {model.__name__}: {violations}") from e
