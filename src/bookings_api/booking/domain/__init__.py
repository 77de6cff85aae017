from .entity import Booking as Booking
from .factory import BookingDetails as BookingDetails
from .factory import BookingFactory as BookingFactory
from .repository import BookingRepository as BookingRepository
from .value_object import BookingId as BookingId
from .value_object import ResourceId as ResourceId
from .value_object import Slot as Slot
from .value_object import StartTimeEpoch as StartTimeEpoch
from .value_object import UserId as UserId
