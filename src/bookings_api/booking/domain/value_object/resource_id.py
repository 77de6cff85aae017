from dataclasses import dataclass

from bookings_api.shared.domain import ValidationException


@dataclass(frozen=True)
class ResourceId:
    """予約対象リソースID

    ロケーションはリソースカタログ側で解決されるため保持しない。
    """

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not self.value:
            raise ValidationException("ResourceId cannot be empty")

    def __str__(self) -> str:
        return self.value
