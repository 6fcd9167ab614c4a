"""
Ledger Query Engine

거래/카테고리/목표 컬렉션에서 파생 재무 지표를 계산.
순수 함수: 입력 컬렉션을 변경하지 않고, 저장소에 접근하지 않는다.

- monthly_summary: 월간 수입/지출/잔액/건수
- category_breakdown: 월간 카테고리별 합계 (활동 있는 카테고리만)
- goal_progress: 목표 달성률, 남은 금액, 남은 일수

월 필터는 저장된 날짜 문자열의 앞 7자리(YYYY-MM) 비교.
타임존 변환 없이 달력 문자열 그대로 비교한다.
"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Any, Iterable

from core.types import Category, Goal, Kind, Transaction
from core.utils.numbers import round_cents, to_json_number
from core.utils.timezone import parse_iso_date

ZERO = Decimal("0")


@dataclass(frozen=True)
class MonthlySummary:
    """월간 요약"""

    total_income: Decimal
    total_expense: Decimal
    balance: Decimal
    transaction_count: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "total_income": to_json_number(self.total_income),
            "total_expense": to_json_number(self.total_expense),
            "balance": to_json_number(self.balance),
            "transaction_count": self.transaction_count,
        }


@dataclass(frozen=True)
class CategoryBreakdown:
    """카테고리별 월간 합계"""

    category_id: int
    name: str
    type: str
    color: str
    icon: str
    transaction_count: int
    total_amount: Decimal

    def to_dict(self) -> dict[str, Any]:
        return {
            "category_id": self.category_id,
            "name": self.name,
            "type": self.type,
            "color": self.color,
            "icon": self.icon,
            "transaction_count": self.transaction_count,
            "total_amount": to_json_number(self.total_amount),
        }


@dataclass(frozen=True)
class GoalProgress:
    """목표 진행 상황"""

    progress_percentage: Decimal
    remaining_amount: Decimal
    days_remaining: int | None
    is_overdue: bool
    is_completed: bool

    def to_dict(self) -> dict[str, Any]:
        return {
            "progress_percentage": to_json_number(self.progress_percentage),
            "remaining_amount": to_json_number(self.remaining_amount),
            "days_remaining": self.days_remaining,
            "is_overdue": self.is_overdue,
            "is_completed": self.is_completed,
        }


def in_month(tx_date: str, month: str) -> bool:
    """날짜 문자열이 해당 월(YYYY-MM)에 속하는지"""
    return tx_date[:7] == month


def monthly_summary(
    transactions: Iterable[Transaction],
    month: str,
) -> MonthlySummary:
    """월간 요약 계산

    balance는 수입 +amount, 지출 -amount 부호합을 한 번에 누적한다.
    Decimal 연산이므로 total_income - total_expense와 정확히 일치.

    Args:
        transactions: 거래 컬렉션
        month: YYYY-MM

    Returns:
        MonthlySummary (거래가 없으면 모든 필드 0)
    """
    total_income = ZERO
    total_expense = ZERO
    balance = ZERO
    count = 0

    for tx in transactions:
        if not in_month(tx.date, month):
            continue
        count += 1
        if tx.type == Kind.INCOME.value:
            total_income += tx.amount
            balance += tx.amount
        else:
            total_expense += tx.amount
            balance -= tx.amount

    return MonthlySummary(
        total_income=total_income,
        total_expense=total_expense,
        balance=balance,
        transaction_count=count,
    )


def category_breakdown(
    transactions: Iterable[Transaction],
    categories: Iterable[Category],
    month: str,
) -> list[CategoryBreakdown]:
    """카테고리별 월간 합계

    합계가 0보다 큰 카테고리만 포함.
    total_amount 내림차순, 동률이면 category id 오름차순.

    Args:
        transactions: 거래 컬렉션
        categories: 카테고리 컬렉션
        month: YYYY-MM

    Returns:
        CategoryBreakdown 목록
    """
    totals: dict[int, Decimal] = {}
    counts: dict[int, int] = {}

    for tx in transactions:
        if not in_month(tx.date, month):
            continue
        totals[tx.category_id] = totals.get(tx.category_id, ZERO) + tx.amount
        counts[tx.category_id] = counts.get(tx.category_id, 0) + 1

    rows = [
        CategoryBreakdown(
            category_id=c.id,
            name=c.name,
            type=c.type,
            color=c.color,
            icon=c.icon,
            transaction_count=counts.get(c.id, 0),
            total_amount=totals.get(c.id, ZERO),
        )
        for c in sorted(categories, key=lambda c: c.id)
    ]

    # sorted()는 안정 정렬: id 오름차순이 동률 순서로 유지된다
    active = [r for r in rows if r.total_amount > ZERO]
    return sorted(active, key=lambda r: r.total_amount, reverse=True)


def _days_until(deadline: date, as_of: date) -> int:
    """마감일까지 남은 달력 일수 (마감일 당일은 0, 지나면 음수)"""
    return (deadline - as_of).days


def goal_progress(goal: Goal, as_of: date) -> GoalProgress:
    """목표 진행 상황 계산

    target_amount가 0인 레코드가 들어오면 달성률 0으로 처리.
    남은 금액은 음수가 되지 않도록 0에서 자른다.

    Args:
        goal: 목표
        as_of: 기준 날짜 (로컬 today)

    Returns:
        GoalProgress
    """
    target = goal.target_amount
    current = goal.current_amount

    if target > ZERO:
        percentage = round_cents(current * 100 / target)
    else:
        percentage = round_cents(ZERO)

    remaining = round_cents(max(target - current, ZERO))

    days_remaining: int | None = None
    is_overdue = False
    deadline = parse_iso_date(goal.deadline) if goal.deadline else None
    if deadline is not None:
        days_remaining = _days_until(deadline, as_of)
        is_overdue = days_remaining < 0

    return GoalProgress(
        progress_percentage=percentage,
        remaining_amount=remaining,
        days_remaining=days_remaining,
        is_overdue=is_overdue,
        is_completed=current >= target,
    )
