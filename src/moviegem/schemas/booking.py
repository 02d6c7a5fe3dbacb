"""Pydantic schema for booking rows stored in the spreadsheet."""

import re
from datetime import datetime
from decimal import Decimal
from zoneinfo import ZoneInfo

from pydantic import BaseModel, ConfigDict, Field

from moviegem.utils.dates import parse_show_datetime

# Column headers used by the booking sheet, in sheet order
BOOKING_DATE = "訂票日期"
MOVIE_NAME = "電影名稱"
SHOW_DATE = "場次日期"
SHOW_TIME = "場次時間"
NUMBER_OF_TICKETS = "人數"
TICKET_TYPE = "票種"
SEATS = "座位"
TOTAL_AMOUNT = "總金額"

BOOKING_COLUMNS = (
    BOOKING_DATE,
    MOVIE_NAME,
    SHOW_DATE,
    SHOW_TIME,
    NUMBER_OF_TICKETS,
    TICKET_TYPE,
    SEATS,
    TOTAL_AMOUNT,
)

_SEAT_SEPARATOR = re.compile(r"[,\s]+")


class BookingRecord(BaseModel):
    """
    One reserved-ticket row of the booking sheet.

    Dates, times, seats and ticket type are kept exactly as written in the
    sheet. Ticket count and total amount arrive as text and are parsed here,
    so a malformed number fails validation instead of leaking downstream.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    booking_date: str = Field(alias=BOOKING_DATE)
    movie_name: str = Field(alias=MOVIE_NAME)
    show_date: str = Field(alias=SHOW_DATE)
    show_time: str = Field(alias=SHOW_TIME)
    number_of_tickets: int = Field(alias=NUMBER_OF_TICKETS, ge=0)
    ticket_type: str = Field(alias=TICKET_TYPE)  # 全票 / 學生票 / 敬老票 / 兒童票
    seats: str = Field(alias=SEATS)  # e.g. "A1,A2" or "A1, A2"
    total_amount: Decimal = Field(alias=TOTAL_AMOUNT, ge=0)

    @property
    def key(self) -> tuple[str, str]:
        """Identify a booking the way the admin screens do: date plus movie."""
        return self.booking_date, self.movie_name

    @property
    def seat_codes(self) -> list[str]:
        """Seat codes split out of the seats column."""
        return [code for code in _SEAT_SEPARATOR.split(self.seats.strip()) if code]

    @property
    def unit_price(self) -> Decimal:
        """Price per ticket; zero when the row carries no tickets."""
        if self.number_of_tickets == 0:
            return Decimal("0")
        return self.total_amount / self.number_of_tickets

    def show_datetime(self, tz: ZoneInfo) -> datetime | None:
        """Start of the show as an aware datetime, or None if unparseable."""
        return parse_show_datetime(self.show_date, self.show_time, tz)
