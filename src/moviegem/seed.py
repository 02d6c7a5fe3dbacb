"""Starter theaters, prices and discounts for a fresh in-memory setup."""

from datetime import datetime, timedelta

from moviegem.repositories import InMemoryRepository
from moviegem.schemas.showtime import DiscountType, PriceDiscount, ShowtimePrice
from moviegem.schemas.theater import SeatType, Theater, TheaterStatus, TheaterType
from moviegem.utils.dates import local_tz


def seat_grid(rows: int, columns: int, seat: SeatType = SeatType.NORMAL) -> list[list[SeatType]]:
    """Build a rectangular seat layout filled with one seat type."""
    return [[seat] * columns for _ in range(rows)]


def default_theaters() -> list[Theater]:
    return [
        Theater(
            id="1",
            name="第一影廳",
            capacity=120,
            type=TheaterType.STANDARD,
            status=TheaterStatus.ACTIVE,
            seat_layout=seat_grid(10, 12),
        ),
        Theater(
            id="2",
            name="IMAX影廳",
            capacity=180,
            type=TheaterType.IMAX,
            status=TheaterStatus.ACTIVE,
            seat_layout=seat_grid(12, 15),
        ),
        Theater(
            id="3",
            name="VIP影廳",
            capacity=64,
            type=TheaterType.VIP,
            status=TheaterStatus.MAINTENANCE,
            seat_layout=seat_grid(8, 8, SeatType.VIP),
        ),
    ]


def default_prices() -> list[ShowtimePrice]:
    return [
        ShowtimePrice(
            id="standard",
            base_price=280,
            weekend_price=320,
            holiday_price=320,
            student_price=240,
            senior_price=200,
            child_price=200,
            vip_price=400,
        )
    ]


def default_discounts(now: datetime | None = None) -> list[PriceDiscount]:
    now = now or datetime.now(local_tz())
    return [
        PriceDiscount(
            id="1",
            name="早鳥優惠",
            type=DiscountType.PERCENTAGE,
            value=0.8,
            start_date=now,
            end_date=now + timedelta(days=30),
            description="早場次享8折優惠",
        ),
        PriceDiscount(
            id="2",
            name="學生證優惠",
            type=DiscountType.FIXED_AMOUNT,
            value=40,
            start_date=now,
            end_date=now + timedelta(days=90),
            description="憑學生證現省40元",
        ),
    ]


def theater_repository() -> InMemoryRepository[Theater]:
    return InMemoryRepository(default_theaters())
