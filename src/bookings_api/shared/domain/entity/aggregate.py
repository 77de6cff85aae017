from typing import TypeVar

from .entity import Entity

ID = TypeVar("ID")


class AggregateRoot(Entity[ID]):
    """AggregateRoot 基底クラス

    - トランザクション境界 = 集約境界
    - version は条件付き書き込み（楽観ロック）の比較対象
    """

    def __init__(self, id: ID, version: int = 1) -> None:
        super().__init__(id)
        self._version = version

    @property
    def version(self) -> int:
        return self._version

    def increment_version(self) -> None:
        """集約が変更されたことを記録する"""
        self._version += 1
