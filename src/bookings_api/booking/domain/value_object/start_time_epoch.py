from dataclasses import dataclass

from bookings_api.shared.domain import ValidationException

# 9999-12-31T23:59:59Z
MAX_START_TIME_EPOCH = 253402300799


@dataclass(frozen=True)
class StartTimeEpoch:
    """開始時刻（エポック秒）

    0 以上 MAX_START_TIME_EPOCH 以下の整数のみ受け付ける。
    """

    value: int

    def __post_init__(self) -> None:
        # bool は int のサブクラスなので明示的に弾く
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValidationException(
                f"Invalid start time: {self.value!r}. Expected integer epoch seconds"
            )
        if self.value < 0:
            raise ValidationException("Start time cannot be negative")
        if self.value > MAX_START_TIME_EPOCH:
            raise ValidationException(
                f"Start time is out of range: {self.value}. "
                f"Must be at most {MAX_START_TIME_EPOCH}"
            )

    def __str__(self) -> str:
        return str(self.value)

    def __int__(self) -> int:
        return self.value
