"""
Validation Rule Set

저장 전에 Transaction / Goal / Category 후보 레코드를 검증.

처리 순서:
1. 형태 검사: payload가 객체가 아니면 즉시 실패 (단락)
2. 갱신이면 기존 레코드와 병합 (생략된 필드는 저장된 값 상속)
3. 필드별 기본 검사: 서로 독립적이므로 모든 위반을 한 번에 수집
4. 교차 필드 규칙: 전제 필드가 3단계를 통과한 경우에만 평가

검증 통과 시 정규화된 Draft(불변)를 반환하고, 실패 시 ValidationError를 던진다.
카테고리 존재 확인만 외부 조회(find_category)를 사용한다.
"""

import math
import re
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Any, Awaitable, Callable, Mapping

from core.constants import Defaults, Limits
from core.errors import ValidationError, Violation
from core.types import Category, Goal, Kind, Transaction
from core.utils.numbers import to_decimal
from core.utils.timezone import parse_iso_date, today_local

DATE_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")
MONTH_PATTERN = re.compile(r"[0-9]{4}-(0[1-9]|1[0-2])")
COLOR_PATTERN = re.compile(r"#[0-9a-fA-F]{6}")

TRANSACTION_FIELDS = ("amount", "type", "category_id", "description", "date")
GOAL_FIELDS = ("name", "target_amount", "current_amount", "deadline")
CATEGORY_FIELDS = ("name", "type", "color", "icon")

CategoryLookup = Callable[[int], Awaitable[Category | None]]


# =========================================================================
# Draft (검증 통과 레코드)
# =========================================================================


@dataclass(frozen=True)
class TransactionDraft:
    """검증된 거래 필드"""

    amount: Decimal
    type: str
    category_id: int
    date: str
    description: str | None = None


@dataclass(frozen=True)
class GoalDraft:
    """검증된 목표 필드"""

    name: str
    target_amount: Decimal
    current_amount: Decimal
    deadline: str | None = None


@dataclass(frozen=True)
class CategoryDraft:
    """검증된 카테고리 필드"""

    name: str
    type: str
    color: str
    icon: str


@dataclass(frozen=True)
class Refinement:
    """교차 필드 규칙

    requires의 모든 필드가 기본 검사를 통과했을 때만 predicate 평가.
    """

    field_path: str
    requires: tuple[str, ...]
    predicate: Callable[[dict[str, Any], date], bool]
    message: str


# =========================================================================
# 기본 필드 검사
#
# 각 검사는 (정규화된 값, 에러 메시지 | None)을 반환
# =========================================================================


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float, Decimal)) and not isinstance(value, bool)


def _check_amount(
    value: Any,
    label: str,
    *,
    allow_zero: bool = False,
) -> tuple[Decimal | None, str | None]:
    """금액 검사: 숫자, 유한값, 양수(또는 0 이상), 상한 미만"""
    if value is None:
        return None, f"{label} is required"
    if not _is_number(value):
        return None, f"{label} must be a number"

    amount = to_decimal(value)
    if not amount.is_finite():
        return None, f"{label} must be a valid number"
    if allow_zero and amount < 0:
        return None, f"{label} cannot be negative"
    if not allow_zero and amount <= 0:
        return None, f"{label} must be greater than 0"
    if amount >= Limits.AMOUNT_MAX:
        return None, f"{label} must be less than {Limits.AMOUNT_MAX:,}"
    return amount, None


def _check_kind(value: Any, label: str) -> tuple[str | None, str | None]:
    if value is None or value == "":
        return None, f"{label} type is required"
    if value not in Kind.values():
        return None, "Type must be either income or expense"
    return str(value), None


def _check_category_id(value: Any) -> tuple[int | None, str | None]:
    if value is None:
        return None, "Category is required"
    if not _is_number(value):
        return None, "Category must be selected"
    if isinstance(value, (float, Decimal)):
        if not math.isfinite(value) or value != int(value):
            return None, "Category must be a valid ID"
    category_id = int(value)
    if category_id <= 0:
        return None, "Category must be selected"
    if category_id > Limits.ID_MAX:
        # 저장될 수 없는 ID
        return None, "Category not found"
    return category_id, None


def _check_date(
    value: Any,
    label: str,
    *,
    required: bool,
) -> tuple[str | None, str | None]:
    """YYYY-MM-DD 정확히 일치 + 실제 달력 날짜"""
    if value is None or value == "":
        if required:
            return None, f"{label} is required"
        return None, None
    if not isinstance(value, str) or not DATE_PATTERN.fullmatch(value):
        return None, f"{label} must be in YYYY-MM-DD format"
    if parse_iso_date(value) is None:
        return None, f"{label} must be a valid calendar date"
    return value, None


def _check_text(
    value: Any,
    label: str,
    max_length: int,
    *,
    required: bool,
    trim: bool = True,
) -> tuple[str | None, str | None]:
    """문자열 검사 (trim 후 길이)"""
    if value is None:
        if required:
            return None, f"{label} is required"
        return None, None
    if not isinstance(value, str):
        return None, f"{label} must be a string"

    text = value.strip() if trim else value
    if not text:
        if required:
            return None, f"{label} is required"
        return None, None
    if len(text) > max_length:
        return None, f"{label} must be less than {max_length} characters"
    return text, None


# =========================================================================
# 공통 처리
# =========================================================================


def _require_mapping(payload: Any) -> Mapping[str, Any]:
    """형태 검사 (실패 시 단락)"""
    if not isinstance(payload, Mapping):
        raise ValidationError.single("body", "Request body must be a JSON object")
    return payload


def merge_with_existing(
    payload: Mapping[str, Any],
    existing: Mapping[str, Any] | None,
    fields: tuple[str, ...],
) -> dict[str, Any]:
    """부분 갱신 병합

    payload에 없거나 null인 필드는 기존 값을 상속.
    빈 문자열은 명시적 값으로 취급 (description/deadline 초기화).

    Args:
        payload: 요청 필드
        existing: 저장된 레코드 필드 (생성이면 None)
        fields: 대상 필드 목록

    Returns:
        병합된 필드 dict
    """
    merged: dict[str, Any] = dict(existing) if existing else {}
    for name in fields:
        value = payload.get(name)
        if value is not None:
            merged[name] = value
        else:
            merged.setdefault(name, None)
    return merged


def _raise_if_any(violations: list[Violation], order: tuple[str, ...]) -> None:
    if violations:
        rank = {name: i for i, name in enumerate(order)}
        violations.sort(key=lambda v: rank.get(v.field_path, len(order)))
        raise ValidationError(violations)


def _run_refinements(
    refinements: list[Refinement],
    values: dict[str, Any],
    failed: set[str],
    today: date,
) -> list[Violation]:
    violations = []
    for rule in refinements:
        if any(name in failed or values.get(name) is None for name in rule.requires):
            continue
        if not rule.predicate(values, today):
            violations.append(Violation(rule.field_path, rule.message))
    return violations


# =========================================================================
# Transaction
# =========================================================================


def transaction_fields(tx: Transaction) -> dict[str, Any]:
    """저장된 거래를 병합용 필드 dict로 변환"""
    return {
        "amount": tx.amount,
        "type": tx.type,
        "category_id": tx.category_id,
        "description": tx.description,
        "date": tx.date,
    }


async def validate_transaction(
    payload: Any,
    find_category: CategoryLookup,
    existing: Transaction | None = None,
) -> TransactionDraft:
    """거래 후보 검증

    금액/구분/카테고리/설명/날짜는 독립 검사이므로 위반을 모두 모은다.
    카테고리 존재 확인은 category_id 기본 검사가 통과한 경우에만 수행.

    Args:
        payload: 요청 본문
        find_category: 카테고리 조회 함수 (없으면 None 반환)
        existing: 갱신 대상 레코드 (생성이면 None)

    Returns:
        TransactionDraft

    Raises:
        ValidationError: 하나 이상의 규칙 위반
    """
    body = _require_mapping(payload)
    merged = merge_with_existing(
        body,
        transaction_fields(existing) if existing else None,
        TRANSACTION_FIELDS,
    )

    violations: list[Violation] = []

    def check(field: str, result: tuple[Any, str | None]) -> Any:
        value, message = result
        if message:
            violations.append(Violation(field, message))
        return value

    amount = check("amount", _check_amount(merged["amount"], "Amount"))
    kind = check("type", _check_kind(merged["type"], "Transaction"))
    category_id = check("category_id", _check_category_id(merged["category_id"]))
    description = check(
        "description",
        _check_text(
            merged["description"],
            "Description",
            Limits.DESCRIPTION_MAX,
            required=False,
            trim=False,
        ),
    )
    tx_date = check("date", _check_date(merged["date"], "Date", required=True))

    if category_id is not None and await find_category(category_id) is None:
        violations.append(Violation("category_id", "Category not found"))

    _raise_if_any(violations, TRANSACTION_FIELDS)

    return TransactionDraft(
        amount=amount,
        type=kind,
        category_id=category_id,
        date=tx_date,
        description=description,
    )


# =========================================================================
# Goal
# =========================================================================


def _deadline_not_past(values: dict[str, Any], today: date) -> bool:
    deadline = parse_iso_date(values["deadline"])
    return deadline is not None and deadline >= today


GOAL_REFINEMENTS: list[Refinement] = [
    Refinement(
        field_path="current_amount",
        requires=("target_amount", "current_amount"),
        predicate=lambda v, _today: v["current_amount"] <= v["target_amount"],
        message="Current amount cannot exceed target amount",
    ),
    Refinement(
        field_path="deadline",
        requires=("deadline",),
        predicate=_deadline_not_past,
        message="Deadline must be in the future",
    ),
]


def goal_fields(goal: Goal) -> dict[str, Any]:
    """저장된 목표를 병합용 필드 dict로 변환"""
    return {
        "name": goal.name,
        "target_amount": goal.target_amount,
        "current_amount": goal.current_amount,
        "deadline": goal.deadline,
    }


def validate_goal(
    payload: Any,
    existing: Goal | None = None,
    today: date | None = None,
) -> GoalDraft:
    """목표 후보 검증

    current_amount 생략 시 생성이면 0, 갱신이면 기존 값.
    마감일은 오늘(로컬 날짜, 일 단위) 이후여야 한다.

    Args:
        payload: 요청 본문
        existing: 갱신 대상 레코드 (생성이면 None)
        today: 기준 날짜 (None이면 로컬 오늘)

    Returns:
        GoalDraft

    Raises:
        ValidationError: 하나 이상의 규칙 위반
    """
    if today is None:
        today = today_local()

    body = _require_mapping(payload)
    merged = merge_with_existing(
        body,
        goal_fields(existing) if existing else None,
        GOAL_FIELDS,
    )
    if merged["current_amount"] is None:
        merged["current_amount"] = Decimal("0")

    violations: list[Violation] = []
    values: dict[str, Any] = {}

    checks = {
        "name": _check_text(merged["name"], "Goal name", Limits.GOAL_NAME_MAX, required=True),
        "target_amount": _check_amount(merged["target_amount"], "Target amount"),
        "current_amount": _check_amount(
            merged["current_amount"], "Current amount", allow_zero=True
        ),
        "deadline": _check_date(merged["deadline"], "Deadline", required=False),
    }
    for field, (value, message) in checks.items():
        if message:
            violations.append(Violation(field, message))
        values[field] = value

    failed = {v.field_path for v in violations}
    violations.extend(_run_refinements(GOAL_REFINEMENTS, values, failed, today))

    _raise_if_any(violations, GOAL_FIELDS)

    return GoalDraft(
        name=values["name"],
        target_amount=values["target_amount"],
        current_amount=values["current_amount"],
        deadline=values["deadline"],
    )


# =========================================================================
# Category
# =========================================================================


def category_fields(category: Category) -> dict[str, Any]:
    """저장된 카테고리를 병합용 필드 dict로 변환"""
    return {
        "name": category.name,
        "type": category.type,
        "color": category.color,
        "icon": category.icon,
    }


def _check_color(value: Any) -> tuple[str | None, str | None]:
    if value is None or value == "":
        return Defaults.CATEGORY_COLOR, None
    if not isinstance(value, str) or not COLOR_PATTERN.fullmatch(value):
        return None, "Color must be a hex color like #3b82f6"
    return value, None


def validate_category(
    payload: Any,
    existing: Category | None = None,
) -> CategoryDraft:
    """카테고리 후보 검증

    color/icon 생략 시 기본값 사용.

    Raises:
        ValidationError: 하나 이상의 규칙 위반
    """
    body = _require_mapping(payload)
    merged = merge_with_existing(
        body,
        category_fields(existing) if existing else None,
        CATEGORY_FIELDS,
    )

    violations: list[Violation] = []
    checks = {
        "name": _check_text(
            merged["name"], "Category name", Limits.CATEGORY_NAME_MAX, required=True
        ),
        "type": _check_kind(merged["type"], "Category"),
        "color": _check_color(merged["color"]),
        "icon": _check_text(
            merged["icon"], "Icon", Limits.CATEGORY_ICON_MAX, required=False
        ),
    }
    values: dict[str, Any] = {}
    for field, (value, message) in checks.items():
        if message:
            violations.append(Violation(field, message))
        values[field] = value

    _raise_if_any(violations, CATEGORY_FIELDS)

    return CategoryDraft(
        name=values["name"],
        type=values["type"],
        color=values["color"],
        icon=values["icon"] or Defaults.CATEGORY_ICON,
    )


# =========================================================================
# 조회 필터
# =========================================================================


def validate_month(month: Any) -> str:
    """YYYY-MM 월 필터 검증"""
    if not isinstance(month, str) or not MONTH_PATTERN.fullmatch(month):
        raise ValidationError.single("month", "Month must be in YYYY-MM format")
    return month


def validate_kind_filter(kind: Any) -> str:
    """type 필터 검증"""
    value, message = _check_kind(kind, "Transaction")
    if message:
        raise ValidationError.single("type", message)
    return value
