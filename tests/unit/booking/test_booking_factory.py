import pytest

from bookings_api.booking.domain.entity import Booking
from bookings_api.booking.domain.factory import BookingDetails, BookingFactory
from bookings_api.booking.domain.value_object import (
    ResourceId,
    StartTimeEpoch,
    UserId,
)
from bookings_api.shared.domain import ValidationException


class TestBookingFactory:
    def test_create_booking(self):
        factory = BookingFactory()
        booking_details: BookingDetails = {
            "user_id": "u1",
            "resource_id": "r1",
            "start_time_epoch": 1000,
        }

        booking = factory.create(booking_details)

        assert isinstance(booking, Booking)
        assert str(booking.id)
        assert booking.user_id == UserId("u1")
        assert booking.resource_id == ResourceId("r1")
        assert booking.start_time == StartTimeEpoch(1000)
        assert booking.version == 1

    def test_each_booking_gets_a_new_id(self):
        factory = BookingFactory()
        booking_details: BookingDetails = {
            "user_id": "u1",
            "resource_id": "r1",
            "start_time_epoch": 1000,
        }

        first = factory.create(booking_details)
        second = factory.create(booking_details)

        assert first.id != second.id

    def test_invalid_details_raise_error(self):
        factory = BookingFactory()
        with pytest.raises(ValidationException):
            factory.create(
                {"user_id": "u1", "resource_id": "", "start_time_epoch": 1000}
            )
