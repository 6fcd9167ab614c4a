"""
숫자 변환 유틸리티

저장: Decimal TEXT | 응답: JSON number
"""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, localcontext
from typing import Any

CENT = Decimal("0.01")


def to_decimal(value: Any) -> Decimal:
    """int/float/str/Decimal을 Decimal로 변환

    float는 repr 문자열을 거쳐 변환하여 이진 오차를 끌어오지 않는다.

    Raises:
        ValueError: 숫자로 해석할 수 없는 값
    """
    if isinstance(value, Decimal):
        return value
    if isinstance(value, bool):
        raise ValueError(f"not a number: {value!r}")
    if isinstance(value, (int, float)):
        return Decimal(str(value))
    try:
        return Decimal(str(value))
    except InvalidOperation as e:
        raise ValueError(f"not a number: {value!r}") from e


def round_cents(value: Decimal) -> Decimal:
    """소수점 둘째 자리 반올림 (0.5는 0에서 멀어지는 방향)

    quantize 결과 자릿수가 컨텍스트 정밀도(기본 28자리)를 넘으면
    InvalidOperation이 나므로, 정수부 자릿수 + 2만큼 정밀도를 확보한다.
    """
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, value.adjusted() + 3)
        return value.quantize(CENT, rounding=ROUND_HALF_UP)


def to_json_number(value: Decimal | None) -> int | float | None:
    """Decimal을 JSON 직렬화 가능한 숫자로 변환

    정수 값은 int, 그 외는 float.

    Example:
        >>> to_json_number(Decimal("65000.00"))
        65000
        >>> to_json_number(Decimal("35.50"))
        35.5
    """
    if value is None:
        return None
    if value == value.to_integral_value():
        return int(value)
    return float(value)
