from abc import ABC, abstractmethod


class IdGenerator(ABC):
    """エンティティ種別ごとの連番を払い出すインターフェース"""

    @abstractmethod
    def next_id(self, sequence: str) -> int:
        """次の ID を払い出す（1 始まり、欠番は許容）"""
        raise NotImplementedError
