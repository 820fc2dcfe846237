from abc import ABC, abstractmethod


class UnitOfWork(ABC):
    """UnitOfWork 基底クラス

    with ブロック内で登録された書き込みを、正常終了時に 1 トランザクションで
    コミットする。例外が発生した場合は何も書き込まずに破棄する。
    """

    def __enter__(self) -> "UnitOfWork":
        self.begin()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        if exc_type is None:
            self.commit()
        else:
            self.rollback()

    @abstractmethod
    def begin(self) -> None:
        raise NotImplementedError

    @abstractmethod
    def commit(self) -> None:
        raise NotImplementedError

    @abstractmethod
    def rollback(self) -> None:
        raise NotImplementedError
