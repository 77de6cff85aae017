import pytest

from bookings_api.booking.domain.value_object import (
    MAX_START_TIME_EPOCH,
    StartTimeEpoch,
)
from bookings_api.shared.domain import ValidationException


class TestStartTimeEpoch:
    """StartTimeEpoch のテスト"""

    def test_valid_start_time(self):
        """エポック秒を生成できる"""
        start_time = StartTimeEpoch(1735689600)
        assert start_time.value == 1735689600
        assert int(start_time) == 1735689600

    def test_zero_is_allowed(self):
        """0 は有効な時刻"""
        assert StartTimeEpoch(0).value == 0

    def test_negative_raises_error(self):
        """負の値は例外"""
        with pytest.raises(ValidationException, match="cannot be negative"):
            StartTimeEpoch(-1)

    def test_max_value_is_allowed(self):
        """上限値（9999-12-31T23:59:59Z）は有効"""
        assert StartTimeEpoch(MAX_START_TIME_EPOCH).value == 253402300799

    @pytest.mark.parametrize("value", [MAX_START_TIME_EPOCH + 1, 10**40])
    def test_above_max_raises_error(self, value):
        """上限を超える値は例外"""
        with pytest.raises(ValidationException, match="out of range"):
            StartTimeEpoch(value)

    @pytest.mark.parametrize("value", ["1000", 1000.5, True, None])
    def test_non_integer_raises_error(self, value):
        """整数以外は例外（bool を含む）"""
        with pytest.raises(ValidationException, match="Invalid start time"):
            StartTimeEpoch(value)

    def test_validation_error_is_value_error(self):
        """ValidationException は ValueError としても捕捉できる"""
        with pytest.raises(ValueError):
            StartTimeEpoch(-10)
