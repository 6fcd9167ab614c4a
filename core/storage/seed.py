"""
초기 데이터

- 기본 카테고리: categories 테이블이 비어 있을 때만 삽입
- 샘플 데이터: 현재 월 기준 거래 9건, 저축 목표 3건 (데모용)
"""

import logging
from datetime import date
from decimal import Decimal

from adapters.db.sqlite_adapter import SQLiteAdapter
from core.storage.category_store import CategoryStore
from core.storage.goal_store import GoalStore
from core.storage.transaction_store import TransactionStore
from core.types import Kind
from core.utils.timezone import current_month, today_local
from core.validation.rules import GoalDraft, TransactionDraft

logger = logging.getLogger(__name__)


# (name, type, color, icon)
DEFAULT_CATEGORIES: list[tuple[str, str, str, str]] = [
    # 수입
    ("Salary", Kind.INCOME.value, "#10b981", "💼"),
    ("Business", Kind.INCOME.value, "#14b8a6", "🏪"),
    ("Investment", Kind.INCOME.value, "#06b6d4", "📈"),
    # 지출
    ("Food", Kind.EXPENSE.value, "#ef4444", "🍜"),
    ("Transport", Kind.EXPENSE.value, "#f97316", "🚗"),
    ("Shopping", Kind.EXPENSE.value, "#ec4899", "🛍️"),
    ("Housing", Kind.EXPENSE.value, "#8b5cf6", "🏠"),
    ("Utilities", Kind.EXPENSE.value, "#eab308", "💡"),
    ("Entertainment", Kind.EXPENSE.value, "#6366f1", "🎬"),
]

# (category name, amount, type, description, day of month)
SAMPLE_TRANSACTIONS: list[tuple[str, str, str, str, int]] = [
    ("Salary", "50000", Kind.INCOME.value, "Monthly salary", 1),
    ("Business", "15000", Kind.INCOME.value, "Freelance project", 15),
    ("Housing", "8500", Kind.EXPENSE.value, "Rent", 1),
    ("Utilities", "2500", Kind.EXPENSE.value, "Electricity, water and internet", 5),
    ("Food", "450", Kind.EXPENSE.value, "Lunch", 10),
    ("Food", "650", Kind.EXPENSE.value, "Groceries", 12),
    ("Transport", "1200", Kind.EXPENSE.value, "Fuel", 8),
    ("Shopping", "3500", Kind.EXPENSE.value, "Clothes", 14),
    ("Entertainment", "850", Kind.EXPENSE.value, "Cinema", 16),
]


async def seed_default_categories(adapter: SQLiteAdapter) -> int:
    """기본 카테고리 삽입 (테이블이 비어 있을 때만)

    Returns:
        삽입된 카테고리 수
    """
    store = CategoryStore(adapter)
    if await store.count() > 0:
        return 0

    for name, kind, color, icon in DEFAULT_CATEGORIES:
        await store.create(name, kind, color, icon)

    logger.info(f"기본 카테고리 {len(DEFAULT_CATEGORIES)}개 생성")
    return len(DEFAULT_CATEGORIES)


async def seed_sample_data(
    adapter: SQLiteAdapter,
    today: date | None = None,
) -> tuple[int, int]:
    """샘플 거래/목표 삽입

    거래가 하나라도 있으면 아무것도 하지 않는다.
    기본 카테고리가 없으면 먼저 생성한다.

    Returns:
        (거래 수, 목표 수)
    """
    if today is None:
        today = today_local()

    transaction_store = TransactionStore(adapter)
    if await transaction_store.count() > 0:
        logger.info("거래가 이미 존재하여 샘플 데이터 생략")
        return 0, 0

    await seed_default_categories(adapter)

    categories = {c.name: c.id for c in await CategoryStore(adapter).list_all()}
    month = current_month(today)

    tx_count = 0
    for name, amount, kind, description, day in SAMPLE_TRANSACTIONS:
        category_id = categories.get(name)
        if category_id is None:
            logger.warning(f"샘플 카테고리 없음: {name}")
            continue
        await transaction_store.create(
            TransactionDraft(
                amount=Decimal(amount),
                type=kind,
                category_id=category_id,
                date=f"{month}-{day:02d}",
                description=description,
            )
        )
        tx_count += 1

    goals = [
        GoalDraft("Emergency fund", Decimal("100000"), Decimal("35000"), f"{today.year}-12-31"),
        GoalDraft("New car", Decimal("500000"), Decimal("120000"), f"{today.year + 1}-06-30"),
        GoalDraft("Trip to Japan", Decimal("80000"), Decimal("25000"), f"{today.year + 1}-09-01"),
    ]
    goal_store = GoalStore(adapter)
    for goal in goals:
        await goal_store.create(goal)

    logger.info(f"샘플 데이터 생성: 거래 {tx_count}건, 목표 {len(goals)}건")
    return tx_count, len(goals)
