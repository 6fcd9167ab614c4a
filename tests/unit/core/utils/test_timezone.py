"""
core/utils/timezone.py 테스트
"""

from datetime import date, datetime, timezone

from core.utils.timezone import current_month, now_iso, now_utc, parse_iso_date


class TestNow:
    """UTC 시간 테스트"""

    def test_now_utc_is_aware(self) -> None:
        """타임존이 명시된 UTC 시간"""
        assert now_utc().tzinfo == timezone.utc

    def test_now_iso_parsable(self) -> None:
        parsed = datetime.fromisoformat(now_iso())
        assert parsed.tzinfo is not None


class TestCurrentMonth:
    """current_month 테스트"""

    def test_fixed_date(self) -> None:
        assert current_month(date(2026, 3, 15)) == "2026-03"

    def test_zero_padded(self) -> None:
        assert current_month(date(2026, 11, 1)) == "2026-11"

    def test_default_today(self) -> None:
        assert current_month() == date.today().strftime("%Y-%m")


class TestParseIsoDate:
    """parse_iso_date 테스트"""

    def test_valid(self) -> None:
        assert parse_iso_date("2024-02-29") == date(2024, 2, 29)

    def test_impossible_date(self) -> None:
        """존재하지 않는 날짜는 None"""
        assert parse_iso_date("2023-02-30") is None
        assert parse_iso_date("2026-13-01") is None
