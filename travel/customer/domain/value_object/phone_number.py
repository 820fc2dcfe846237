import re
from dataclasses import dataclass

_PHONE_PATTERN = re.compile(r"^\+?[0-9][0-9 \-]*$")


@dataclass(frozen=True)
class PhoneNumber:
    """電話番号（最大 15 文字）"""

    value: str

    def __post_init__(self) -> None:
        value = self.value.strip()
        if not value:
            raise ValueError("Phone number cannot be empty")
        if len(value) > 15:
            raise ValueError("Phone number is too long (max 15 characters)")
        if not _PHONE_PATTERN.match(value):
            raise ValueError(f"Invalid phone number: {self.value}")
        object.__setattr__(self, "value", value)

    def __str__(self) -> str:
        return self.value
