from typing import TypedDict

from bookings_api.booking.domain.entity import Booking
from bookings_api.booking.domain.value_object import (
    BookingId,
    ResourceId,
    StartTimeEpoch,
    UserId,
)


class BookingDetails(TypedDict):
    """予約の入力データ構造"""

    user_id: str
    resource_id: str
    start_time_epoch: int


class BookingFactory:
    """予約エンティティのファクトリ

    - BookingId の採番
    - プリミティブ型から Value Object への変換
    """

    def create(self, booking_details: BookingDetails) -> Booking:
        """新規予約エンティティを生成する

        Args:
            booking_details: ユーザー・リソース・開始時刻

        Returns:
            Booking: 生成された予約エンティティ（version=1）
        """
        # 入力検証を採番より先に行う
        user_id = UserId(booking_details["user_id"])
        resource_id = ResourceId(booking_details["resource_id"])
        start_time = StartTimeEpoch(booking_details["start_time_epoch"])

        return Booking(
            id=BookingId.generate(),
            user_id=user_id,
            resource_id=resource_id,
            start_time=start_time,
        )
