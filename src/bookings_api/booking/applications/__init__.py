from .booking_service import BookingService as BookingService
