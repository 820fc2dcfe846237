from dataclasses import dataclass
from typing import ClassVar

from travel.shared.domain.exception import ValidationException


@dataclass(frozen=True)
class Rating:
    """評価（1〜5 の整数）"""

    MIN: ClassVar[int] = 1
    MAX: ClassVar[int] = 5

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValidationException(f"Rating must be an integer: {self.value!r}")
        if not self.MIN <= self.value <= self.MAX:
            raise ValidationException(
                f"Rating must be between {self.MIN} and {self.MAX}: {self.value}"
            )

    def __int__(self) -> int:
        return self.value
