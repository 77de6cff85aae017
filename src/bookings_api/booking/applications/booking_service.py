from bookings_api.booking.domain.entity import Booking
from bookings_api.booking.domain.factory import BookingDetails, BookingFactory
from bookings_api.booking.domain.repository import BookingRepository
from bookings_api.booking.domain.value_object import (
    BookingId,
    ResourceId,
    StartTimeEpoch,
    UserId,
)
from bookings_api.shared.domain import (
    ConflictException,
    ResourceNotFoundException,
)


class BookingService:
    """予約のユースケース

    作成・更新・取得・削除をまとめて扱う。
    状態は持たず、同一予約への同時更新はストアの条件付き書き込みで直列化する。
    """

    def __init__(self, repository: BookingRepository, factory: BookingFactory) -> None:
        self._repository = repository
        self._factory = factory

    def get_booking(self, booking_id: str) -> Booking:
        """予約を1件取得する"""
        booking = self._repository.find_by_id(BookingId(booking_id))
        if booking is None:
            raise ResourceNotFoundException(f"Booking not found: {booking_id}")
        return booking

    def get_bookings_by_user(self, user_id: str) -> list[Booking]:
        """ユーザーの予約を一覧する（存在しなければ空リスト）"""
        return self._repository.find_by_user_id(UserId(user_id))

    def get_bookings_by_resource(self, resource_id: str) -> list[Booking]:
        """リソースの予約を一覧する（存在しなければ空リスト）"""
        return self._repository.find_by_resource_id(ResourceId(resource_id))

    def upsert_booking(
        self,
        booking_id: str | None,
        user_id: str,
        resource_id: str,
        start_time_epoch: int,
    ) -> Booking:
        """予約を作成または更新する

        booking_id が空なら新規作成、指定があれば既存予約の全置換。
        """
        if not booking_id:
            return self._create(user_id, resource_id, start_time_epoch)
        return self._replace(booking_id, user_id, resource_id, start_time_epoch)

    def delete_booking(self, booking_id: str) -> None:
        """予約を削除する

        既に削除済みの場合も ResourceNotFoundException となる。
        """
        booking = self.get_booking(booking_id)
        self._repository.delete(booking)

    def _create(self, user_id: str, resource_id: str, start_time_epoch: int) -> Booking:
        booking_details: BookingDetails = {
            "user_id": user_id,
            "resource_id": resource_id,
            "start_time_epoch": start_time_epoch,
        }
        booking = self._factory.create(booking_details)
        self._ensure_slot_available(booking)
        self._repository.save(booking)
        return booking

    def _replace(
        self,
        booking_id: str,
        user_id: str,
        resource_id: str,
        start_time_epoch: int,
    ) -> Booking:
        # 検索前に入力を検証する
        new_user_id = UserId(user_id)
        new_resource_id = ResourceId(resource_id)
        new_start_time = StartTimeEpoch(start_time_epoch)

        booking = self.get_booking(booking_id)
        expected_version = booking.version
        previous_slot = booking.slot

        booking.reschedule(new_user_id, new_resource_id, new_start_time)
        self._ensure_slot_available(booking)
        self._repository.update(
            booking,
            expected_version=expected_version,
            previous_slot=previous_slot,
        )
        return booking

    def _ensure_slot_available(self, booking: Booking) -> None:
        """同じ枠を別の予約が占有していないことを確認する

        事前チェックであり、最終的な一意性はストアの条件付き書き込みで保証する。
        """
        existing = self._repository.find_by_slot(booking.slot)
        if existing is not None and booking.conflicts_with(existing):
            raise ConflictException(
                f"Resource already booked: slot={booking.slot}, "
                f"booking_id={existing.id}"
            )
