from abc import abstractmethod
from typing import Optional

from bookings_api.booking.domain.entity import Booking
from bookings_api.booking.domain.value_object import (
    BookingId,
    ResourceId,
    Slot,
    UserId,
)
from bookings_api.shared.domain import Repository


class BookingRepository(Repository[Booking, BookingId]):
    """予約レポジトリ"""

    @abstractmethod
    def save(self, booking: Booking) -> None:
        """新規予約を永続化する

        ID または枠が既に存在する場合は ConflictException を送出する。
        """
        raise NotImplementedError

    @abstractmethod
    def update(
        self, booking: Booking, expected_version: int, previous_slot: Slot
    ) -> None:
        """既存予約を置き換える

        保存済みのバージョンが expected_version と異なる場合は
        OptimisticLockException、新しい枠が他の予約に占有されている場合は
        ConflictException を送出する。
        """
        raise NotImplementedError

    @abstractmethod
    def delete(self, booking: Booking) -> None:
        """予約を削除する

        既に存在しない場合は ResourceNotFoundException を送出する。
        """
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, booking_id: BookingId) -> Optional[Booking]:
        """予約IDで検索"""
        raise NotImplementedError

    @abstractmethod
    def find_by_user_id(self, user_id: UserId) -> list[Booking]:
        """ユーザーの予約を一覧する"""
        raise NotImplementedError

    @abstractmethod
    def find_by_resource_id(self, resource_id: ResourceId) -> list[Booking]:
        """リソースの予約を一覧する"""
        raise NotImplementedError

    @abstractmethod
    def find_by_slot(self, slot: Slot) -> Optional[Booking]:
        """枠を占有している予約を検索"""
        raise NotImplementedError
