"""Shared test fixtures."""

from zoneinfo import ZoneInfo

import pytest

from moviegem.schemas.booking import BookingRecord
from tests.factories import TAIPEI, make_record


@pytest.fixture
def tz() -> ZoneInfo:
    return TAIPEI


@pytest.fixture
def demo_record() -> BookingRecord:
    return make_record()
