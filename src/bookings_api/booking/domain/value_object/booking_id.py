from __future__ import annotations

import uuid
from dataclasses import dataclass

from bookings_api.shared.domain import ValidationException


@dataclass(frozen=True)
class BookingId:
    """予約ID

    作成時にサービスが採番する（UUID4 の文字列表現）。
    例: "3f1c9a0e-5b7d-4e8a-9c2f-1d6b8e4a7c30"
    """

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not self.value:
            raise ValidationException("BookingId cannot be empty")

    def __str__(self) -> str:
        return self.value

    @classmethod
    def generate(cls) -> BookingId:
        """衝突耐性のある新しい BookingId を生成"""
        return cls(value=str(uuid.uuid4()))
