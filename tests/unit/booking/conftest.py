from unittest.mock import MagicMock

import pytest

from bookings_api.booking.applications import BookingService
from bookings_api.booking.domain.entity import Booking
from bookings_api.booking.domain.factory import BookingFactory
from bookings_api.booking.domain.value_object import (
    BookingId,
    ResourceId,
    StartTimeEpoch,
    UserId,
)
from bookings_api.booking.infrastructure.in_memory_booking_repository import (
    InMemoryBookingRepository,
)


@pytest.fixture
def create_booking():
    """Booking を生成する Factory fixture（Factories as fixtures パターン）"""

    def _factory(
        booking_id: str = "booking-1",
        user_id: str = "u1",
        resource_id: str = "r1",
        start_time_epoch: int = 1000,
        version: int = 1,
    ) -> Booking:
        return Booking(
            id=BookingId(value=booking_id),
            user_id=UserId(value=user_id),
            resource_id=ResourceId(value=resource_id),
            start_time=StartTimeEpoch(value=start_time_epoch),
            version=version,
        )

    return _factory


@pytest.fixture
def mock_repository():
    """リポジトリのモックフィクスチャ"""
    repository = MagicMock()
    repository.find_by_slot.return_value = None
    return repository


@pytest.fixture
def repository():
    """インメモリリポジトリ"""
    return InMemoryBookingRepository()


@pytest.fixture
def service(repository):
    """インメモリリポジトリを使った BookingService"""
    return BookingService(repository=repository, factory=BookingFactory())
