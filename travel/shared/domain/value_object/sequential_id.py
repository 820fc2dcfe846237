from dataclasses import dataclass


@dataclass(frozen=True)
class SequentialId:
    """連番 ID（Value Object の基底）

    エンティティ種別ごとに 1 から払い出される正の整数。
    サブクラス同士は値が同じでも別の ID として扱う。
    """

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValueError(f"{type(self).__name__} must be an integer: {self.value!r}")
        if self.value <= 0:
            raise ValueError(f"{type(self).__name__} must be positive: {self.value}")

    def __str__(self) -> str:
        return str(self.value)

    def __int__(self) -> int:
        return self.value
