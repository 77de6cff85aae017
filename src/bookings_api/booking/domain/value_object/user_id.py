from dataclasses import dataclass

from bookings_api.shared.domain import ValidationException


@dataclass(frozen=True)
class UserId:
    """予約の所有ユーザーID"""

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not self.value:
            raise ValidationException("UserId cannot be empty")

    def __str__(self) -> str:
        return self.value
