"""View-model for the showtime management screen."""

import asyncio
import logging
import uuid
from datetime import date, timedelta
from zoneinfo import ZoneInfo

from moviegem.exceptions import RecordNotFoundError
from moviegem.repositories import InMemoryRepository, Repository
from moviegem.schemas.booking import BookingRecord
from moviegem.schemas.showtime import MovieShowtime, ShowtimePrice, ShowtimeStatus
from moviegem.schemas.theater import Theater
from moviegem.seed import theater_repository
from moviegem.services.booking_service import BookingDataService, SheetDBBookingService
from moviegem.utils.dates import is_same_day, local_tz, today
from moviegem.viewmodels.base import ListViewModel

logger = logging.getLogger(__name__)

DEFAULT_SHOW_LENGTH = timedelta(hours=2)
DEFAULT_THEATER_ID = "default"
UNKNOWN_THEATER_NAME = "未知"


def booking_to_showtime(record: BookingRecord, tz: ZoneInfo) -> MovieShowtime | None:
    """
    Derive a showtime from a booking row.

    Booking rows carry no theater, length or seat count, so the showtime
    runs two hours in the default theater, is on sale, and is priced at the
    booking's per-ticket amount.

    Returns:
        The showtime, or None if the row's show date/time does not parse
    """
    start = record.show_datetime(tz)
    if start is None:
        return None

    return MovieShowtime(
        id=uuid.uuid4().hex,
        movie_id=record.movie_name,
        theater_id=DEFAULT_THEATER_ID,
        start_time=start,
        end_time=start + DEFAULT_SHOW_LENGTH,
        price=ShowtimePrice(base_price=float(record.unit_price)),
        status=ShowtimeStatus.ON_SALE,
        available_seats=0,
    )


class ShowtimeManagementViewModel(ListViewModel[MovieShowtime]):
    """
    Showtimes for a selected day, filtered by status.

    filtered_showtimes is recomputed whenever the selected date, the
    selected status or the showtime list changes. A selected status of
    None means "any status".
    """

    def __init__(
        self,
        booking_service: BookingDataService | None = None,
        theaters: Repository[Theater] | None = None,
        showtimes: Repository[MovieShowtime] | None = None,
        selected_date: date | None = None,
        tz: ZoneInfo | None = None,
    ) -> None:
        super().__init__()
        self.booking_service = booking_service or SheetDBBookingService()
        self.theater_repository = theaters if theaters is not None else theater_repository()
        self.showtime_repository = showtimes if showtimes is not None else InMemoryRepository()
        self.tz = tz or local_tz()

        self.theaters: list[Theater] = []
        self.filtered_showtimes: list[MovieShowtime] = []
        self.selected_date = selected_date or today(self.tz)
        self.selected_status: ShowtimeStatus | None = None

    @property
    def showtimes(self) -> list[MovieShowtime]:
        return self.items

    async def load_data(self) -> bool:
        """
        Load theaters and scheduled showtimes from the repositories.

        Shares the loading guard with load(): ignored while either is in flight.
        """
        return await self._guarded_load(self._fetch_scheduled, self._apply_scheduled)

    async def load_booking_records(self, day: date | None = None) -> bool:
        """Rebuild the showtime list from the bookings of a day (the selected one by default)."""
        if day is not None:
            return await self.select_date(day)
        return await self.load()

    async def _fetch_scheduled(self) -> tuple[list[Theater], list[MovieShowtime]]:
        theaters, showtimes = await asyncio.gather(
            self.theater_repository.fetch_all(),
            self.showtime_repository.fetch_all(),
        )
        return theaters, showtimes

    def _apply_scheduled(self, result: tuple[list[Theater], list[MovieShowtime]]) -> None:
        theaters, showtimes = result
        self.theaters = list(theaters)
        self._apply(showtimes)

    async def _fetch(self) -> list[MovieShowtime]:
        records = await self.booking_service.fetch_bookings(self.selected_date)
        showtimes = []
        for record in records:
            showtime = booking_to_showtime(record, self.tz)
            if showtime is None:
                logger.warning(
                    f"Skipping booking for '{record.movie_name}' with unreadable show "
                    f"date/time '{record.show_date} {record.show_time}'"
                )
                continue
            showtimes.append(showtime)

        if not showtimes:
            logger.info(f"No showtimes found for {self.selected_date}")
        return showtimes

    def _apply(self, result: list[MovieShowtime]) -> None:
        super()._apply(result)
        self._refilter()

    async def select_date(self, day: date) -> bool:
        """
        Switch to another day and fetch its showtimes.

        Ignored, leaving the selected date as it was, while a load is in
        flight. The filtered list is recomputed once the fetch completes.
        """
        if self.is_loading:
            logger.debug(f"Load in flight, not switching to {day}")
            return False
        self.selected_date = day
        return await self.load()

    def select_status(self, status: ShowtimeStatus | None) -> None:
        self.selected_status = status
        self._refilter()
        self.notify()

    def update_showtime_status(self, showtime_id: str, new_status: ShowtimeStatus) -> None:
        """
        Change the status of one held showtime.

        Raises:
            RecordNotFoundError: No showtime with that id is held
        """
        for i, showtime in enumerate(self.items):
            if showtime.id == showtime_id:
                self.items[i] = showtime.model_copy(update={"status": new_status})
                break
        else:
            raise RecordNotFoundError(f"No showtime with id '{showtime_id}'")

        self._refilter()
        self.notify()

    def theater_name(self, theater_id: str) -> str:
        for theater in self.theaters:
            if theater.id == theater_id:
                return theater.name
        return UNKNOWN_THEATER_NAME

    def filter_showtimes(self, day: date, status: ShowtimeStatus | None) -> list[MovieShowtime]:
        """Showtimes starting on day with the given status (None matches any)."""
        return [
            s
            for s in self.items
            if is_same_day(s.start_time, day, self.tz) and (status is None or s.status == status)
        ]

    def _refilter(self) -> None:
        self.filtered_showtimes = self.filter_showtimes(self.selected_date, self.selected_status)
        logger.debug(
            f"Filtered {len(self.items)} showtimes for {self.selected_date} "
            f"status={self.selected_status}: {len(self.filtered_showtimes)} left"
        )
