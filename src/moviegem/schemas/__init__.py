"""Pydantic schemas for booking, theater and showtime data."""

from moviegem.schemas.booking import BOOKING_COLUMNS, BookingRecord
from moviegem.schemas.showtime import (
    DiscountType,
    MovieShowtime,
    PriceDiscount,
    ShowtimePrice,
    ShowtimeStatus,
)
from moviegem.schemas.theater import SeatType, Theater, TheaterStatus, TheaterType

__all__ = [
    "BOOKING_COLUMNS",
    "BookingRecord",
    "DiscountType",
    "MovieShowtime",
    "PriceDiscount",
    "ShowtimePrice",
    "ShowtimeStatus",
    "SeatType",
    "Theater",
    "TheaterStatus",
    "TheaterType",
]
