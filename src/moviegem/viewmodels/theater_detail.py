"""View-model for one theater's bookings."""

import logging
from datetime import date
from typing import TypedDict

from moviegem.schemas.booking import BookingRecord
from moviegem.schemas.theater import Theater
from moviegem.services.booking_service import BookingDataService
from moviegem.viewmodels.bookings import BookingListViewModel

logger = logging.getLogger(__name__)


class TheaterInfo(TypedDict):
    name: str
    capacity: int
    type: str
    status: str
    booked_tickets: int


class TheaterDetailViewModel(BookingListViewModel):
    """
    Bookings of the selected day that belong to one theater.

    The booking sheet has no theater column; a booking belongs to the
    theater whose name appears in its seats column.
    """

    def __init__(
        self,
        theater: Theater,
        service: BookingDataService | None = None,
        selected_date: date | None = None,
    ) -> None:
        super().__init__(service, selected_date)
        self.theater = theater

    def belongs_to_theater(self, record: BookingRecord) -> bool:
        return self.theater.name in record.seats

    async def _fetch(self) -> list[BookingRecord]:
        records = await super()._fetch()
        matching = [r for r in records if self.belongs_to_theater(r)]
        logger.debug(
            f"{len(matching)} of {len(records)} booking(s) on {self.selected_date} "
            f"are in '{self.theater.name}'"
        )
        return matching

    @property
    def theater_info(self) -> TheaterInfo:
        return {
            "name": self.theater.name,
            "capacity": self.theater.capacity,
            "type": self.theater.type.value,
            "status": self.theater.status.value,
            "booked_tickets": self.total_tickets,
        }
