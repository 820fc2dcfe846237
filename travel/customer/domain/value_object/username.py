from dataclasses import dataclass


@dataclass(frozen=True)
class Username:
    """ログインユーザー名

    一意性は大文字・小文字を区別せずに判定する。
    """

    value: str

    def __post_init__(self) -> None:
        if not self.value or len(self.value.strip()) == 0:
            raise ValueError("Username cannot be empty")
        if len(self.value) > 50:
            raise ValueError("Username is too long (max 50 characters)")
        object.__setattr__(self, "value", self.value.strip())

    def __str__(self) -> str:
        return self.value

    @property
    def normalized(self) -> str:
        return self.value.casefold()
