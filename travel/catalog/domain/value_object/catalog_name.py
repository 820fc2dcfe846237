from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True)
class CatalogName:
    """カタログ上の名称（空文字不可・最大 100 文字）"""

    LABEL: ClassVar[str] = "Name"

    value: str

    def __post_init__(self) -> None:
        if not self.value or len(self.value.strip()) == 0:
            raise ValueError(f"{self.LABEL} cannot be empty")
        if len(self.value) > 100:
            raise ValueError(f"{self.LABEL} is too long (max 100 characters)")

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class HotelName(CatalogName):
    """ホテル名"""

    LABEL: ClassVar[str] = "Hotel name"


@dataclass(frozen=True)
class PackageName(CatalogName):
    """ツアーパッケージ名"""

    LABEL: ClassVar[str] = "Package name"
