import re
from dataclasses import dataclass

_EMAIL_PATTERN = re.compile(r"^[\w\.+-]+@[\w\.-]+\.\w+$")


@dataclass(frozen=True)
class EmailAddress:
    """メールアドレス"""

    value: str

    def __post_init__(self) -> None:
        value = self.value.strip()
        if len(value) > 100:
            raise ValueError("Email address is too long (max 100 characters)")
        if not _EMAIL_PATTERN.match(value):
            raise ValueError(f"Invalid email address: {self.value}")
        object.__setattr__(self, "value", value)

    def __str__(self) -> str:
        return self.value

    @property
    def normalized(self) -> str:
        return self.value.casefold()
