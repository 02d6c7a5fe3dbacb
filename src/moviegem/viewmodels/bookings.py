"""View-model for the admin booking list."""

import logging
from datetime import date
from decimal import Decimal

from moviegem.schemas.booking import BookingRecord
from moviegem.services.booking_service import BookingDataService, SheetDBBookingService
from moviegem.utils.dates import today
from moviegem.viewmodels.base import ListViewModel

logger = logging.getLogger(__name__)


class BookingListViewModel(ListViewModel[BookingRecord]):
    """Bookings for one selected day, plus add/update/delete."""

    def __init__(
        self,
        service: BookingDataService | None = None,
        selected_date: date | None = None,
    ) -> None:
        super().__init__()
        self.service = service or SheetDBBookingService()
        self.selected_date = selected_date or today()

    @property
    def bookings(self) -> list[BookingRecord]:
        return self.items

    @property
    def total_tickets(self) -> int:
        return sum(r.number_of_tickets for r in self.items)

    @property
    def total_revenue(self) -> Decimal:
        return sum((r.total_amount for r in self.items), Decimal("0"))

    async def _fetch(self) -> list[BookingRecord]:
        return await self.service.fetch_bookings(self.selected_date)

    async def select_date(self, day: date) -> bool:
        """
        Switch to another day and load its bookings.

        Ignored, leaving the selected date as it was, while a load is in flight.
        """
        if self.is_loading:
            logger.debug(f"Load in flight, not switching to {day}")
            return False
        self.selected_date = day
        return await self.load()

    async def add_booking(self, record: BookingRecord) -> None:
        await self._mutate(self.service.add_booking(record))
        self.items.append(record)
        self.notify()

    async def update_booking(self, index: int, record: BookingRecord) -> None:
        """Replace the booking at index (raises IndexError for a bad index)."""
        current = self.items[index]
        logger.info(f"Updating booking for '{current.movie_name}' on {current.booking_date}")
        await self._mutate(self.service.update_booking(record))
        self.items[index] = record
        self.notify()

    async def delete_booking(self, index: int) -> None:
        record = self.items[index]
        await self._mutate(self.service.delete_booking(record.booking_date, record.movie_name))
        del self.items[index]
        self.notify()
