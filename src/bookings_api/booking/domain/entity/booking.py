from bookings_api.booking.domain.value_object import (
    BookingId,
    ResourceId,
    Slot,
    StartTimeEpoch,
    UserId,
)
from bookings_api.shared.domain import AggregateRoot, BusinessRuleViolationException


class Booking(AggregateRoot[BookingId]):
    """リソース予約"""

    def __init__(
        self,
        id: BookingId,
        user_id: UserId,
        resource_id: ResourceId,
        start_time: StartTimeEpoch,
        version: int = 1,
    ) -> None:
        super().__init__(id, version)

        self._user_id = user_id
        self._resource_id = resource_id
        self._start_time = start_time

    @property
    def user_id(self) -> UserId:
        return self._user_id

    @property
    def resource_id(self) -> ResourceId:
        return self._resource_id

    @property
    def start_time(self) -> StartTimeEpoch:
        return self._start_time

    @property
    def slot(self) -> Slot:
        return Slot(resource_id=self._resource_id, start_time=self._start_time)

    def reschedule(
        self,
        user_id: UserId,
        resource_id: ResourceId,
        start_time: StartTimeEpoch,
    ) -> None:
        """予約内容を全置換する

        所有ユーザーは作成後に変更できない。
        """
        if user_id != self._user_id:
            raise BusinessRuleViolationException(
                f"Booking owner cannot be changed: booking_id={self.id}"
            )

        self._resource_id = resource_id
        self._start_time = start_time
        self.increment_version()

    def conflicts_with(self, other: "Booking") -> bool:
        """別の予約と同じ枠を占有しているか"""
        return self.id != other.id and self.slot == other.slot
