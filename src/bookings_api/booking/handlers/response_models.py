from __future__ import annotations

from pydantic import BaseModel, Field

from bookings_api.booking.domain.entity import Booking


class BookingData(BaseModel):
    """予約データのレスポンスモデル"""

    booking_id: str = Field(serialization_alias="bookingID")
    user_id: str = Field(serialization_alias="userID")
    resource_id: str = Field(serialization_alias="resourceID")
    start_time_epoch: int = Field(serialization_alias="startTimeEpoch")


def to_response(booking: Booking) -> dict:
    """Booking エンティティをレスポンス辞書に変換する"""
    return BookingData(
        booking_id=str(booking.id),
        user_id=str(booking.user_id),
        resource_id=str(booking.resource_id),
        start_time_epoch=int(booking.start_time),
    ).model_dump(by_alias=True)
