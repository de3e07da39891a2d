from datetime import date, datetime, timedelta, timezone

import pytest

from src.api.dates import due_day, is_overdue, parse_due_date, today_in

TODAY = date(2025, 6, 15)
YESTERDAY = (TODAY - timedelta(days=1)).isoformat()
TOMORROW = (TODAY + timedelta(days=1)).isoformat()


class TestEdgeCasesReturnFalse:
    def test_none_due_date(self):
        assert is_overdue(None, False, today=TODAY) is False

    def test_empty_due_date(self):
        assert is_overdue("", False, today=TODAY) is False

    def test_completed_regardless_of_due_date(self):
        assert is_overdue("2020-01-01", True, today=TODAY) is False
        assert is_overdue("1990-01-01", True, today=TODAY) is False
        assert is_overdue(YESTERDAY + "T23:59:59Z", True, today=TODAY) is False

    def test_completed_short_circuits_before_parsing(self):
        assert is_overdue("invalid-date", True, today=TODAY) is False

    @pytest.mark.parametrize("value", ["invalid-date", "2025-13-45", "not-a-date", "   ", "2025-02-30"])
    def test_invalid_date_strings(self, value):
        assert is_overdue(value, False, today=TODAY) is False

    def test_unsupported_type(self):
        assert is_overdue(20200101, False, today=TODAY) is False


class TestDateComparisons:
    def test_due_today_is_not_overdue(self):
        assert is_overdue(TODAY.isoformat(), False, today=TODAY) is False

    def test_future_is_not_overdue(self):
        assert is_overdue(TOMORROW, False, today=TODAY) is False
        assert is_overdue("2099-12-31", False, today=TODAY) is False

    def test_past_and_not_completed_is_overdue(self):
        assert is_overdue(YESTERDAY, False, today=TODAY) is True
        assert is_overdue("2020-01-01", False, today=TODAY) is True

    def test_accepts_date_and_datetime_objects(self):
        assert is_overdue(date(2025, 6, 14), False, today=TODAY) is True
        assert is_overdue(datetime(2025, 6, 15, 23, 59), False, today=TODAY) is False

    def test_repeated_calls_agree(self):
        results = {is_overdue(YESTERDAY, False, today=TODAY) for _ in range(5)}
        assert results == {True}


class TestDateOnlyComparison:
    def test_ignores_time_component_today(self):
        day = TODAY.isoformat()
        assert is_overdue(day + "T00:00:00Z", False, today=TODAY) is False
        assert is_overdue(day + "T12:30:45Z", False, today=TODAY) is False
        assert is_overdue(day + "T23:59:59Z", False, today=TODAY) is False

    def test_overdue_from_midnight_the_next_day(self):
        assert is_overdue(YESTERDAY + "T00:00:00Z", False, today=TODAY) is True
        assert is_overdue(YESTERDAY + "T23:59:59Z", False, today=TODAY) is True

    def test_offsets_and_naive_times_use_the_written_day(self):
        assert is_overdue(TODAY.isoformat() + "T01:00:00+05:00", False, today=TODAY) is False
        assert is_overdue(YESTERDAY + "T23:00:00-08:00", False, today=TODAY) is True
        assert is_overdue(YESTERDAY + "T08:15:00", False, today=TODAY) is True


class TestDefaultClock:
    def test_today_and_yesterday_against_system_date(self):
        today = date.today()
        yesterday = (today - timedelta(days=1)).isoformat()
        assert is_overdue(today.isoformat(), False) is False
        assert is_overdue(yesterday, False) is True
        assert is_overdue("2099-12-31", False) is False
        assert is_overdue("2020-01-01", False) is True

    def test_today_in_timezone(self):
        east = today_in(timezone(timedelta(hours=14)))
        west = today_in(timezone(timedelta(hours=-12)))
        assert east > west


class TestParseDueDate:
    def test_date_only_is_promoted_to_midnight(self):
        assert parse_due_date("2025-01-31") == datetime(2025, 1, 31, 0, 0, 0)

    def test_utc_marker(self):
        parsed = parse_due_date("2025-01-31T13:45:00Z")
        assert parsed == datetime(2025, 1, 31, 13, 45, 0, tzinfo=timezone.utc)

    def test_surrounding_whitespace(self):
        assert parse_due_date("  2025-01-31 ") == datetime(2025, 1, 31)

    def test_rejects_garbage(self):
        assert parse_due_date("not-a-date") is None
        assert parse_due_date("2025-13-45") is None
        assert parse_due_date(None) is None

    def test_due_day(self):
        assert due_day("2025-01-31T23:59:59Z") == date(2025, 1, 31)
        assert due_day("invalid-date") is None
