import pytest

from bookings_api.booking.domain.value_object import BookingId, ResourceId, UserId
from bookings_api.shared.domain import ErrorKind, ValidationException


class TestBookingId:
    """BookingId のテスト"""

    def test_generate_returns_non_empty_unique_ids(self):
        """生成される ID は空でなく重複しない"""
        ids = {BookingId.generate() for _ in range(1000)}
        assert len(ids) == 1000
        assert all(str(booking_id) for booking_id in ids)

    def test_empty_raises_error(self):
        """空文字は例外"""
        with pytest.raises(ValidationException) as exc_info:
            BookingId("")
        assert exc_info.value.kind == ErrorKind.VALIDATION


class TestIdentifiers:
    """UserId / ResourceId のテスト"""

    def test_same_value_is_equal(self):
        assert UserId("u1") == UserId("u1")
        assert ResourceId("r1") != ResourceId("r2")

    @pytest.mark.parametrize("cls", [UserId, ResourceId])
    def test_empty_raises_error(self, cls):
        with pytest.raises(ValidationException, match="cannot be empty"):
            cls("")

    @pytest.mark.parametrize("cls", [UserId, ResourceId])
    def test_non_string_raises_error(self, cls):
        with pytest.raises(ValidationException):
            cls(None)
