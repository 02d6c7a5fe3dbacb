"""Pydantic schemas for showtimes, prices and discounts."""

import uuid
from datetime import datetime, timedelta
from enum import Enum

from pydantic import BaseModel, Field, model_validator


class ShowtimeStatus(str, Enum):
    SCHEDULED = "預定"
    ON_SALE = "售票中"
    ALMOST_FULL = "即將額滿"
    SOLD_OUT = "已售完"
    CANCELED = "已取消"


class DiscountType(str, Enum):
    PERCENTAGE = "折扣百分比"
    FIXED_AMOUNT = "固定金額"


class PriceDiscount(BaseModel):
    """
    A named price adjustment with a validity window.

    For percentage discounts, value is the fraction of the price that is
    paid: 0.8 means "8折", i.e. 80% of the base price.
    """

    id: str
    name: str
    type: DiscountType
    value: float = Field(ge=0)
    start_date: datetime
    end_date: datetime
    description: str = ""

    @model_validator(mode="after")
    def check_value_and_window(self) -> "PriceDiscount":
        if self.type == DiscountType.PERCENTAGE and self.value > 1:
            raise ValueError("percentage discount value must be between 0 and 1")
        if self.end_date < self.start_date:
            raise ValueError("end_date must not be before start_date")
        return self

    def is_active(self, at: datetime) -> bool:
        """Whether the discount applies at the given moment."""
        return self.start_date <= at <= self.end_date

    def apply(self, amount: float) -> float:
        """Return amount after this discount, never below zero."""
        if self.type == DiscountType.PERCENTAGE:
            return amount * self.value
        return max(0.0, amount - self.value)


class ShowtimePrice(BaseModel):
    """Base price of a showtime plus optional tiered prices."""

    id: str = Field(default_factory=lambda: uuid.uuid4().hex)
    base_price: float = Field(ge=0)
    weekend_price: float | None = None
    holiday_price: float | None = None
    student_price: float | None = None
    senior_price: float | None = None
    child_price: float | None = None
    vip_price: float | None = None
    discounts: list[PriceDiscount] = Field(default_factory=list)


class MovieShowtime(BaseModel):
    """A scheduled screening of a movie in a theater."""

    id: str
    movie_id: str
    theater_id: str
    start_time: datetime
    end_time: datetime
    price: ShowtimePrice
    status: ShowtimeStatus
    # Tracked on its own, not derived from bookings
    available_seats: int = Field(ge=0)

    @model_validator(mode="after")
    def check_times(self) -> "MovieShowtime":
        if self.start_time.tzinfo is None or self.end_time.tzinfo is None:
            raise ValueError("start_time and end_time must be timezone-aware")
        if self.end_time <= self.start_time:
            raise ValueError("end_time must be after start_time")
        return self

    @property
    def duration(self) -> timedelta:
        return self.end_time - self.start_time

    @property
    def is_on_sale(self) -> bool:
        return self.status == ShowtimeStatus.ON_SALE

    def discounted_price(self, discount: PriceDiscount) -> float:
        """Base price of this showtime after applying a discount."""
        return discount.apply(self.price.base_price)
