import threading

from bookings_api.booking.domain.entity import Booking
from bookings_api.booking.domain.repository import BookingRepository
from bookings_api.booking.domain.value_object import (
    BookingId,
    ResourceId,
    Slot,
    StartTimeEpoch,
    UserId,
)
from bookings_api.shared.domain.exception import (
    ConflictException,
    DuplicateResourceException,
    OptimisticLockException,
    ResourceNotFoundException,
)


class InMemoryBookingRepository(BookingRepository):
    """プロセス内メモリを使用した BookingRepository の実装

    サービス層のテストで DynamoDB 実装の代わりに使うテストダブル。
    条件付き書き込みの意味論は DynamoDB 実装と同じ。
    """

    def __init__(self) -> None:
        self._items: dict[str, dict] = {}
        self._slots: dict[tuple[str, int], str] = {}
        self._lock = threading.Lock()

    def save(self, booking: Booking) -> None:
        """予約を保存する"""
        slot_key = self._slot_key(booking.slot)
        with self._lock:
            if str(booking.id) in self._items:
                raise DuplicateResourceException(f"Booking already exists: {booking.id}")
            if slot_key in self._slots:
                raise ConflictException(f"Resource already booked: slot={booking.slot}")
            self._items[str(booking.id)] = self._to_item(booking)
            self._slots[slot_key] = str(booking.id)

    def update(
        self, booking: Booking, expected_version: int, previous_slot: Slot
    ) -> None:
        """予約を置き換える"""
        booking_id = str(booking.id)
        new_key = self._slot_key(booking.slot)
        old_key = self._slot_key(previous_slot)
        with self._lock:
            current = self._items.get(booking_id)
            if current is None:
                raise ResourceNotFoundException(f"Booking not found: {booking_id}")
            if current["version"] != expected_version:
                raise OptimisticLockException(
                    f"Booking version conflict: "
                    f"expected {expected_version}, "
                    f"booking_id={booking_id}"
                )
            owner = self._slots.get(new_key)
            if owner is not None and owner != booking_id:
                raise ConflictException(f"Resource already booked: slot={booking.slot}")

            if self._slots.get(old_key) == booking_id:
                del self._slots[old_key]
            self._slots[new_key] = booking_id
            self._items[booking_id] = self._to_item(booking)

    def delete(self, booking: Booking) -> None:
        """予約を削除する"""
        booking_id = str(booking.id)
        with self._lock:
            current = self._items.get(booking_id)
            if current is None:
                raise ResourceNotFoundException(f"Booking not found: {booking_id}")
            if current["version"] != booking.version:
                raise OptimisticLockException(
                    f"Booking version conflict: "
                    f"expected {booking.version}, "
                    f"booking_id={booking_id}"
                )
            del self._items[booking_id]
            self._slots.pop((current["resource_id"], current["start_time_epoch"]), None)

    def find_by_id(self, booking_id: BookingId) -> Booking | None:
        item = self._items.get(str(booking_id))
        if item is None:
            return None
        return self._to_entity(item)

    def find_by_user_id(self, user_id: UserId) -> list[Booking]:
        items = [i for i in list(self._items.values()) if i["user_id"] == str(user_id)]
        return [self._to_entity(item) for item in items]

    def find_by_resource_id(self, resource_id: ResourceId) -> list[Booking]:
        items = [
            i for i in list(self._items.values()) if i["resource_id"] == str(resource_id)
        ]
        items.sort(key=lambda i: i["start_time_epoch"])
        return [self._to_entity(item) for item in items]

    def find_by_slot(self, slot: Slot) -> Booking | None:
        booking_id = self._slots.get(self._slot_key(slot))
        if booking_id is None:
            return None
        return self.find_by_id(BookingId(booking_id))

    @staticmethod
    def _slot_key(slot: Slot) -> tuple[str, int]:
        return str(slot.resource_id), int(slot.start_time)

    @staticmethod
    def _to_item(booking: Booking) -> dict:
        return {
            "booking_id": str(booking.id),
            "user_id": str(booking.user_id),
            "resource_id": str(booking.resource_id),
            "start_time_epoch": int(booking.start_time),
            "version": booking.version,
        }

    @staticmethod
    def _to_entity(item: dict) -> Booking:
        return Booking(
            id=BookingId(value=item["booking_id"]),
            user_id=UserId(value=item["user_id"]),
            resource_id=ResourceId(value=item["resource_id"]),
            start_time=StartTimeEpoch(value=item["start_time_epoch"]),
            version=item["version"],
        )
