"""Unit tests for date helpers."""

from datetime import date, datetime
from zoneinfo import ZoneInfo

from moviegem.utils.dates import day_bounds, format_query_date, is_same_day, parse_show_datetime

TAIPEI = ZoneInfo("Asia/Taipei")


class TestFormatQueryDate:
    def test_slash_format(self) -> None:
        assert format_query_date(date(2025, 1, 5), "%Y/%m/%d") == "2025/01/05"

    def test_dash_format(self) -> None:
        assert format_query_date(date(2025, 1, 5), "%Y-%m-%d") == "2025-01-05"


class TestParseShowDatetime:
    def test_parses_slash_date(self) -> None:
        assert parse_show_datetime("2025/01/20", "14:30", TAIPEI) == datetime(
            2025, 1, 20, 14, 30, tzinfo=TAIPEI
        )

    def test_parses_dash_date(self) -> None:
        assert parse_show_datetime("2025-01-20", "09:05", TAIPEI) == datetime(
            2025, 1, 20, 9, 5, tzinfo=TAIPEI
        )

    def test_strips_whitespace(self) -> None:
        assert parse_show_datetime(" 2025/01/20 ", " 14:30", TAIPEI) is not None

    def test_returns_none_for_bad_date(self) -> None:
        assert parse_show_datetime("20/01/2025", "14:30", TAIPEI) is None

    def test_returns_none_for_bad_time(self) -> None:
        assert parse_show_datetime("2025/01/20", "2pm", TAIPEI) is None


class TestDayBounds:
    def test_bounds_span_one_day(self) -> None:
        start, end = day_bounds(date(2025, 1, 20), TAIPEI)
        assert start == datetime(2025, 1, 20, tzinfo=TAIPEI)
        assert end == datetime(2025, 1, 21, tzinfo=TAIPEI)

    def test_is_same_day_includes_midnight_start(self) -> None:
        assert is_same_day(datetime(2025, 1, 20, tzinfo=TAIPEI), date(2025, 1, 20), TAIPEI)

    def test_is_same_day_excludes_next_midnight(self) -> None:
        assert not is_same_day(datetime(2025, 1, 21, tzinfo=TAIPEI), date(2025, 1, 20), TAIPEI)

    def test_is_same_day_compares_in_given_timezone(self) -> None:
        # 17:00 UTC on the 20th is 01:00 on the 21st in Taipei
        moment = datetime(2025, 1, 20, 17, 0, tzinfo=ZoneInfo("UTC"))
        assert is_same_day(moment, date(2025, 1, 21), TAIPEI)
