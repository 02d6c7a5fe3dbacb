"""Pydantic schemas for theater data."""

from enum import Enum

from pydantic import BaseModel, Field


class TheaterType(str, Enum):
    STANDARD = "標準廳"
    IMAX = "IMAX"
    VIP = "VIP廳"
    FOUR_DX = "4DX"


class TheaterStatus(str, Enum):
    ACTIVE = "營業中"
    MAINTENANCE = "維護中"
    CLOSED = "暫停使用"


class SeatType(str, Enum):
    NORMAL = "一般座位"
    VIP = "VIP座位"
    HANDICAPPED = "無障礙座位"
    EMPTY = "空位"


class Theater(BaseModel):
    """A screening room with its seat grid."""

    id: str
    name: str
    capacity: int = Field(ge=0)
    type: TheaterType
    status: TheaterStatus
    seat_layout: list[list[SeatType]] = Field(default_factory=list)

    @property
    def empty_seat_count(self) -> int:
        """Number of grid cells marked as empty."""
        return sum(row.count(SeatType.EMPTY) for row in self.seat_layout)

    @property
    def is_available(self) -> bool:
        return self.status == TheaterStatus.ACTIVE
