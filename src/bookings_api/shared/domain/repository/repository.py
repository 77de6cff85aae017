from abc import ABC, abstractmethod
from typing import Generic, TypeVar

T = TypeVar("T")
ID = TypeVar("ID")


class Repository(ABC, Generic[T, ID]):
    """Repository 基底クラス

    - 集約の永続化を抽象化する
    - 書き込みはすべて条件付き（存在・バージョン）で行う
    """

    @abstractmethod
    def save(self, aggregate: T) -> None:
        """新規の集約を永続化する"""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, id: ID) -> T | None:
        """IDで集約を検索する"""
        raise NotImplementedError

    @abstractmethod
    def delete(self, aggregate: T) -> None:
        """集約を削除する"""
        raise NotImplementedError
