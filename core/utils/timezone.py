"""
날짜/시간 유틸리티

내부 타임스탬프: UTC | 날짜 비교(마감일, 월 필터): 프로세스 로컬 날짜
"""

from datetime import date, datetime, timezone


def now_utc() -> datetime:
    """현재 UTC 시간 반환 (타임존 명시)

    datetime.now(timezone.utc)의 축약형.
    """
    return datetime.now(timezone.utc)


def now_iso() -> str:
    """created_at/updated_at 저장용 ISO-8601 UTC 문자열"""
    return now_utc().isoformat()


def today_local() -> date:
    """프로세스 로컬 기준 오늘 날짜"""
    return date.today()


def current_month(today: date | None = None) -> str:
    """YYYY-MM 형식의 현재 월

    Example:
        >>> current_month(date(2026, 3, 15))
        '2026-03'
    """
    if today is None:
        today = today_local()
    return today.strftime("%Y-%m")


def parse_iso_date(value: str) -> date | None:
    """YYYY-MM-DD 문자열을 date로 변환 (존재하지 않는 날짜면 None)"""
    try:
        return date.fromisoformat(value)
    except ValueError:
        return None
