from dataclasses import dataclass

from .resource_id import ResourceId
from .start_time_epoch import StartTimeEpoch


@dataclass(frozen=True)
class Slot:
    """リソース × 開始時刻の組（予約の一意性キー）

    期間の概念はないため、同一開始時刻のみを重複とみなす。
    """

    resource_id: ResourceId
    start_time: StartTimeEpoch

    def __str__(self) -> str:
        return f"{self.resource_id}@{self.start_time}"
