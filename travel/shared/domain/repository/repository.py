from abc import ABC, abstractmethod
from typing import Generic, TypeVar

T = TypeVar("T")
ID = TypeVar("ID")


class Repository(ABC, Generic[T, ID]):
    """Repository 基底クラス

    - 集約の永続化を抽象化する
    - 書き込みは UnitOfWork に登録され、コミット時にまとめて反映される
    - 検索メソッドは集約ごとのキー設計に合わせて各インターフェースで定義する
    """

    @abstractmethod
    def add(self, aggregate: T) -> None:
        """集約を新規登録する"""
        raise NotImplementedError
