from .iso_date_time import IsoDateTime
from .money import Money
from .sequential_id import SequentialId

__all__ = ["SequentialId", "Money", "IsoDateTime"]
