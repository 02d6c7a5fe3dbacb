"""Date helpers shared by the service layer and the view-models."""

from datetime import date, datetime, time, timedelta
from zoneinfo import ZoneInfo

from moviegem.config import settings

# The spreadsheet has been filled in with both separators over time
SHOW_DATE_FORMATS = ("%Y/%m/%d", "%Y-%m-%d")
SHOW_TIME_FORMAT = "%H:%M"


def local_tz(name: str | None = None) -> ZoneInfo:
    """Return the configured timezone (or the named one)."""
    return ZoneInfo(name or settings.timezone)


def today(tz: ZoneInfo | None = None) -> date:
    """Today's date in the configured timezone."""
    return datetime.now(tz or local_tz()).date()


def format_query_date(day: date, fmt: str | None = None) -> str:
    """Format a date the way the data store's date column expects it."""
    return day.strftime(fmt or settings.query_date_format)


def parse_show_datetime(show_date: str, show_time: str, tz: ZoneInfo) -> datetime | None:
    """
    Combine a show date and show time string into an aware datetime.

    Args:
        show_date: Date as written in the sheet, e.g. "2025/01/20"
        show_time: Time as written in the sheet, e.g. "14:30"
        tz: Timezone the sheet's times are expressed in

    Returns:
        Timezone-aware datetime, or None when either string does not parse
    """
    try:
        parsed_time = datetime.strptime(show_time.strip(), SHOW_TIME_FORMAT).time()
    except ValueError:
        return None

    for fmt in SHOW_DATE_FORMATS:
        try:
            parsed_date = datetime.strptime(show_date.strip(), fmt).date()
        except ValueError:
            continue
        return datetime.combine(parsed_date, parsed_time, tzinfo=tz)

    return None


def day_bounds(day: date, tz: ZoneInfo) -> tuple[datetime, datetime]:
    """Return [start, end) of a calendar day in the given timezone."""
    start = datetime.combine(day, time.min, tzinfo=tz)
    return start, start + timedelta(days=1)


def is_same_day(moment: datetime, day: date, tz: ZoneInfo) -> bool:
    """Whether an aware datetime falls on the given calendar day in tz."""
    start, end = day_bounds(day, tz)
    return start <= moment < end
