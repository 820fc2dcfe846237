from dataclasses import dataclass

from travel.shared.domain import SequentialId


@dataclass(frozen=True)
class AccountId(SequentialId):
    """アカウントID"""
