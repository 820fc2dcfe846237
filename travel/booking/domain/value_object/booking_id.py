from dataclasses import dataclass

from travel.shared.domain import SequentialId


@dataclass(frozen=True)
class BookingId(SequentialId):
    """予約ID（Value Object）

    不変で、値が同じなら同一とみなされる。
    """
