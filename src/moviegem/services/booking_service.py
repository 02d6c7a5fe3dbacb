"""Booking data services used by the view-models."""

import logging
from abc import ABC, abstractmethod
from datetime import date

from moviegem.config import settings
from moviegem.exceptions import OperationNotSupportedError, RecordNotFoundError
from moviegem.schemas.booking import BOOKING_COLUMNS, BookingRecord
from moviegem.services.record_codec import decode_bookings, encode_booking
from moviegem.services.sheetdb_client import SheetDBClient
from moviegem.utils.dates import format_query_date, today

logger = logging.getLogger(__name__)


def check_date_column(column: str) -> str:
    """Return column if it is one of the booking sheet headers, else raise ValueError."""
    if column not in BOOKING_COLUMNS:
        raise ValueError(
            f"Unknown date filter column '{column}'; expected one of {', '.join(BOOKING_COLUMNS)}"
        )
    return column


class BookingDataService(ABC):
    """
    Abstract facade over wherever booking rows live.

    Implementations hold no state between calls that callers may rely on,
    and never retry: a failed call raises straight to the caller.
    """

    @abstractmethod
    async def fetch_bookings(self, on: date | None = None) -> list[BookingRecord]:
        """
        Fetch the bookings for one day.

        Args:
            on: Day to filter on (today when omitted)

        Returns:
            Bookings for that day, possibly empty
        """

    @abstractmethod
    async def add_booking(self, record: BookingRecord) -> None:
        """Store a new booking."""

    @abstractmethod
    async def update_booking(self, record: BookingRecord) -> None:
        """Replace the booking with the same booking date and movie name."""

    @abstractmethod
    async def delete_booking(self, booking_date: str, movie_name: str) -> None:
        """Remove the booking with the given booking date and movie name."""


class SheetDBBookingService(BookingDataService):
    """Booking service backed by the SheetDB booking spreadsheet."""

    def __init__(
        self,
        client: SheetDBClient | None = None,
        date_column: str | None = None,
        date_format: str | None = None,
    ) -> None:
        self.client = client or SheetDBClient()
        self.date_column = check_date_column(date_column or settings.date_filter_column)
        self.date_format = date_format or settings.query_date_format

    async def fetch_bookings(self, on: date | None = None) -> list[BookingRecord]:
        day = on or today()
        query_date = format_query_date(day, self.date_format)
        logger.info(f"Fetching bookings where {self.date_column} = {query_date}")

        body = await self.client.search({self.date_column: query_date})
        records = decode_bookings(body)

        logger.info(f"Fetched {len(records)} booking(s) for {query_date}")
        return records

    async def add_booking(self, record: BookingRecord) -> None:
        await self.client.append([encode_booking(record)])
        logger.info(f"Added booking for '{record.movie_name}' on {record.booking_date}")

    async def update_booking(self, record: BookingRecord) -> None:
        # Sheet rows carry no unique key, so a PATCH by column would hit
        # every booking sharing the value.
        raise OperationNotSupportedError(
            "Updating bookings is not supported by the spreadsheet store"
        )

    async def delete_booking(self, booking_date: str, movie_name: str) -> None:
        raise OperationNotSupportedError(
            "Deleting bookings is not supported by the spreadsheet store"
        )


class InMemoryBookingService(BookingDataService):
    """
    Booking service that keeps rows in process memory.

    Bookings are keyed by (booking date, movie name). Used by tests and for
    running the view-models without a spreadsheet.
    """

    def __init__(
        self,
        records: list[BookingRecord] | None = None,
        date_column: str | None = None,
        date_format: str | None = None,
    ) -> None:
        self.date_column = check_date_column(date_column or settings.date_filter_column)
        self.date_format = date_format or settings.query_date_format
        self._records: list[BookingRecord] = list(records or [])

    async def fetch_bookings(self, on: date | None = None) -> list[BookingRecord]:
        query_date = format_query_date(on or today(), self.date_format)
        return [r for r in self._records if encode_booking(r)[self.date_column] == query_date]

    async def add_booking(self, record: BookingRecord) -> None:
        self._records.append(record)

    async def update_booking(self, record: BookingRecord) -> None:
        index = self._index_of(*record.key)
        self._records[index] = record

    async def delete_booking(self, booking_date: str, movie_name: str) -> None:
        index = self._index_of(booking_date, movie_name)
        del self._records[index]

    def _index_of(self, booking_date: str, movie_name: str) -> int:
        for i, record in enumerate(self._records):
            if record.key == (booking_date, movie_name):
                return i
        raise RecordNotFoundError(f"No booking for '{movie_name}' on {booking_date}")
