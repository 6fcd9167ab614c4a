"""
공통 유틸리티

- numbers: Decimal 변환, 반올림, JSON 숫자 직렬화
- timezone: UTC 타임스탬프, 로컬 날짜, 월 문자열
"""

from core.utils.numbers import round_cents, to_decimal, to_json_number
from core.utils.timezone import current_month, now_iso, now_utc, today_local

__all__ = [
    "round_cents",
    "to_decimal",
    "to_json_number",
    "current_month",
    "now_iso",
    "now_utc",
    "today_local",
]
