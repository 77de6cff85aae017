from .booking_id import BookingId as BookingId
from .resource_id import ResourceId as ResourceId
from .slot import Slot as Slot
from .start_time_epoch import MAX_START_TIME_EPOCH as MAX_START_TIME_EPOCH
from .start_time_epoch import StartTimeEpoch as StartTimeEpoch
from .user_id import UserId as UserId
